"""
Pipeline entry: CSV rows -> inferred schema -> model source text.

Flow:
headers -> CanonicalSchema -> infer (narrowing) -> synthesize -> spacing
"""

from dataclasses import dataclass
from typing import Optional

from csv2pydantic.adapters.csv_adapter import CSVAdapter, parse_delimiter
from csv2pydantic.canonical.schema import CanonicalSchema
from csv2pydantic.inference.engine import infer
from csv2pydantic.outputs.pydantic_model import synthesize
from csv2pydantic.outputs.styling import add_blank_lines
from csv2pydantic.utils.exceptions import ConfigError


def _check_count(name: str, value) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"{name} must be a non-negative integer, got {value!r}")


@dataclass
class RunConfig:
    """
    Options for one generation run.

    max_rows: rows to analyze (None = all)
    min_nonempty_fields: skip rows with this many or fewer populated fields
    blank_lines: blank lines between fields (None or 0 = none)
    """
    type_name: str
    max_rows: Optional[int] = None
    min_nonempty_fields: Optional[int] = None
    blank_lines: Optional[int] = None
    delimiter: str = ","

    def __post_init__(self):
        if not isinstance(self.type_name, str) or not self.type_name:
            raise ConfigError("type_name must be a non-empty string")
        _check_count("max_rows", self.max_rows)
        _check_count("min_nonempty_fields", self.min_nonempty_fields)
        _check_count("blank_lines", self.blank_lines)
        self.delimiter = parse_delimiter(self.delimiter)


def build_schema(adapter: CSVAdapter, config: RunConfig) -> CanonicalSchema:
    schema = CanonicalSchema.from_headers(config.type_name, adapter.headers())
    schema.raw_metadata["delimiter"] = adapter.delimiter
    return infer(
        schema,
        adapter.records(),
        max_rows=config.max_rows,
        min_nonempty_fields=config.min_nonempty_fields,
    )


def render(schema: CanonicalSchema, config: RunConfig) -> str:
    code = synthesize(schema.type_name, schema.fields)
    return add_blank_lines(code, config.blank_lines or 0)


def run(adapter: CSVAdapter, config: RunConfig) -> str:
    return render(build_schema(adapter, config), config)
