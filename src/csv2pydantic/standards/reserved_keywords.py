"""
Identifiers a generated model field must not use verbatim.

Covers Python hard and soft keywords, the pydantic BaseModel attributes a
field would shadow, and the builtin type names the generated annotations
refer to. Kept sorted so lookups can bisect.
"""

from bisect import bisect_left
from typing import Final, Tuple

RESERVED_KEYWORDS: Final[Tuple[str, ...]] = (
    "False",
    "None",
    "True",
    "_",
    "and",
    "as",
    "assert",
    "async",
    "await",
    "break",
    "case",
    "class",
    "construct",
    "continue",
    "copy",
    "def",
    "del",
    "dict",
    "elif",
    "else",
    "except",
    "finally",
    "for",
    "from",
    "from_orm",
    "global",
    "if",
    "import",
    "in",
    "is",
    "json",
    "lambda",
    "match",
    "model_computed_fields",
    "model_config",
    "model_construct",
    "model_copy",
    "model_dump",
    "model_dump_json",
    "model_extra",
    "model_fields",
    "model_fields_set",
    "model_json_schema",
    "model_parametrized_name",
    "model_post_init",
    "model_rebuild",
    "model_validate",
    "model_validate_json",
    "model_validate_strings",
    "nonlocal",
    "not",
    "or",
    "parse_file",
    "parse_obj",
    "parse_raw",
    "pass",
    "raise",
    "return",
    "schema",
    "schema_json",
    "str",
    "try",
    "type",
    "update_forward_refs",
    "validate",
    "while",
    "with",
    "yield",
)


def is_reserved_keyword(name: str) -> bool:
    """
    Exact, case-sensitive membership test.
    """
    idx = bisect_left(RESERVED_KEYWORDS, name)
    return idx < len(RESERVED_KEYWORDS) and RESERVED_KEYWORDS[idx] == name
