"""
Pydantic model synthesis.

The declaration is assembled as a Python syntax tree, printed with
ast.unparse and parsed back, so the emitted text is always valid Python
or the call fails with CodeGenerationError.
"""

import ast
from typing import Iterable, List, Sequence, Tuple, Union

from csv2pydantic.canonical.field import FieldSchema
from csv2pydantic.observability.logger import log_event
from csv2pydantic.utils.exceptions import CodeGenerationError

BASE_CLASS = "BaseModel"
FIELD_FACTORY = "Field"

FieldSpec = Tuple[str, str, str]  # (display_name, source_name, resolved_type)


def _fill_missing_lists(node: ast.AST) -> ast.AST:
    # ClassDef grew type_params in 3.12; older/newer builds differ on defaults
    for name in node._fields:
        if not hasattr(node, name):
            setattr(node, name, [])
    return node


def _parse_type(type_name: str) -> ast.expr:
    try:
        return ast.parse(type_name, mode="eval").body
    except SyntaxError as e:
        raise CodeGenerationError(
            f"Could not generate code: invalid type expression {type_name!r}"
        ) from e


def _is_optional(annotation: ast.expr) -> bool:
    if isinstance(annotation, ast.Constant) and annotation.value is None:
        return True
    return (
        isinstance(annotation, ast.Subscript)
        and isinstance(annotation.value, ast.Name)
        and annotation.value.id == "Optional"
    )


def _field_value(source_name: str, renamed: bool, optional: bool):
    if not renamed:
        return ast.Constant(value=None) if optional else None

    keywords = []
    if optional:
        keywords.append(ast.keyword(arg="default", value=ast.Constant(value=None)))
    keywords.append(ast.keyword(arg="alias", value=ast.Constant(value=source_name)))

    return ast.Call(
        func=ast.Name(id=FIELD_FACTORY, ctx=ast.Load()),
        args=[],
        keywords=keywords,
    )


def build_field(display_name: str, source_name: str, type_name: str) -> ast.AnnAssign:
    """
    `name: Type`, plus `= Field(alias=...)` when the header was renamed
    and a None default when the type admits absence.
    """
    annotation = _parse_type(type_name)
    value = _field_value(
        source_name,
        renamed=display_name != source_name,
        optional=_is_optional(annotation),
    )
    return ast.AnnAssign(
        target=ast.Name(id=display_name, ctx=ast.Store()),
        annotation=annotation,
        value=value,
        simple=1,
    )


def build_model(type_name: str, fields: Sequence[FieldSpec]) -> ast.Module:
    body: List[ast.stmt] = [build_field(*spec) for spec in fields] or [ast.Pass()]

    class_def = _fill_missing_lists(ast.ClassDef(
        name=type_name,
        bases=[ast.Name(id=BASE_CLASS, ctx=ast.Load())],
        keywords=[],
        body=body,
        decorator_list=[],
    ))
    module = ast.Module(body=[class_def], type_ignores=[])
    return ast.fix_missing_locations(module)


def _check_round_trip(code: str, type_name: str, fields: Sequence[FieldSpec]) -> None:
    """
    Parse the printed code and make sure it still declares exactly the
    model and fields that were assembled.
    """
    try:
        tree = ast.parse(code)
    except SyntaxError as e:
        raise CodeGenerationError(f"Could not generate code: {e.msg}") from e

    expected = [spec[0] for spec in fields]
    statements = tree.body
    if (
        len(statements) != 1
        or not isinstance(statements[0], ast.ClassDef)
        or statements[0].name != type_name
    ):
        raise CodeGenerationError(
            f"Could not generate code: {type_name!r} is not a valid class name"
        )

    found = [
        stmt.target.id
        for stmt in statements[0].body
        if isinstance(stmt, ast.AnnAssign) and isinstance(stmt.target, ast.Name)
    ]
    if found != expected or (expected and len(statements[0].body) != len(expected)):
        raise CodeGenerationError(
            f"Could not generate code: field names {expected!r} do not form valid declarations"
        )


def _as_spec(item: Union[FieldSchema, FieldSpec]) -> FieldSpec:
    if isinstance(item, FieldSchema):
        return item.display_name, item.source_name, item.resolve()
    display_name, source_name, type_name = item
    return display_name, source_name, type_name


def synthesize(type_name: str, fields: Iterable[Union[FieldSchema, FieldSpec]]) -> str:
    """
    Render `class <type_name>(BaseModel):` with one field per column,
    in column order. Nothing is returned unless the whole declaration
    parses.
    """
    specs = [_as_spec(item) for item in fields]

    try:
        module = build_model(type_name, specs)
        code = ast.unparse(module)
        _check_round_trip(code, type_name, specs)
    except CodeGenerationError as e:
        log_event("CODE_GENERATION_FAILED", {"type_name": type_name, "error": str(e)})
        raise

    log_event("CODE_GENERATION_COMPLETED", {
        "type_name": type_name,
        "fields": len(specs),
        "renamed": sum(1 for name, raw, _ in specs if name != raw),
    })
    return code
