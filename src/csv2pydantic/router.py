from typing import Dict

from csv2pydantic.adapters.csv_adapter import CSVAdapter
from csv2pydantic.observability.logger import (
    RequestTimer,
    generate_request_id,
    log_event,
)
from csv2pydantic.pipeline.runner import RunConfig, build_schema, render
from csv2pydantic.utils.exceptions import ConfigError


def route(payload: Dict) -> Dict:
    """
    HTTP entry point.

    Payload:
        csv_text (required), type_name (required), delimiter,
        max_rows, min_nonempty_fields, blank_lines
    """
    request_id = generate_request_id()
    timer = RequestTimer()

    csv_text = payload.get("csv_text")
    if not isinstance(csv_text, str):
        raise ConfigError("csv_text must be a string")

    config = RunConfig(
        type_name=payload.get("type_name"),
        max_rows=payload.get("max_rows"),
        min_nonempty_fields=payload.get("min_nonempty_fields"),
        blank_lines=payload.get("blank_lines"),
        delimiter=payload.get("delimiter", ","),
    )

    log_event("REQUEST_STARTED", {
        "request_id": request_id,
        "type_name": config.type_name,
    })

    adapter = CSVAdapter.from_text(csv_text, delimiter=config.delimiter)
    schema = build_schema(adapter, config)
    code = render(schema, config)

    log_event("REQUEST_COMPLETED", {
        "request_id": request_id,
        "type_name": config.type_name,
        "duration_seconds": timer.duration(),
    })

    return {
        "status": "SUCCESS",
        "request_id": request_id,
        "type_name": config.type_name,
        "code": code,
        "rename_mappings": schema.rename_mappings(),
        "fields": [f.to_dict() for f in schema.fields],
    }
