"""
Single-pass column type narrowing.

Only per-column state is kept; each row is inspected and dropped.
"""

from itertools import islice
from typing import Iterable, Optional, Sequence

from csv2pydantic.canonical.schema import CanonicalSchema
from csv2pydantic.observability.logger import log_event
from csv2pydantic.utils.exceptions import ColumnCountMismatchError


def count_nonempty(row: Sequence[str]) -> int:
    return sum(1 for token in row if token)


def infer(
    schema: CanonicalSchema,
    rows: Iterable[Sequence[str]],
    max_rows: Optional[int] = None,
    min_nonempty_fields: Optional[int] = None,
) -> CanonicalSchema:
    """
    Narrow every column of `schema` in place against the data rows.

    - At most `max_rows` rows are read (skipped rows included)
    - A row with a different token count than the header aborts the run
    - A row with `min_nonempty_fields` or fewer non-empty tokens is skipped
      and contributes to neither typing nor optionality

    Rows are numbered from 1, header excluded.
    """
    expected = len(schema.fields)

    if max_rows is not None:
        rows = islice(rows, max_rows)

    log_event("INFERENCE_STARTED", {
        "type_name": schema.type_name,
        "columns": expected,
        "max_rows": max_rows,
        "min_nonempty_fields": min_nonempty_fields,
    })

    for row_number, row in enumerate(rows, start=1):
        if len(row) != expected:
            raise ColumnCountMismatchError(row_number, expected, len(row))

        schema.rows_read += 1

        if min_nonempty_fields is not None:
            populated = count_nonempty(row)
            if populated <= min_nonempty_fields:
                schema.rows_skipped += 1
                log_event("ROW_SKIPPED", {
                    "row_number": row_number,
                    "nonempty_fields": populated,
                })
                continue

        for field, token in zip(schema.fields, row):
            field.update_for(token)

    log_event("INFERENCE_COMPLETED", {
        "type_name": schema.type_name,
        "rows_read": schema.rows_read,
        "rows_skipped": schema.rows_skipped,
        "types": {f.display_name: f.resolve() for f in schema.fields},
    })

    return schema
