"""Map schema type tokens to Python type expressions.

Handles:
- Primitive tokens (Integer, Float, Boolean, String)
- "Array of " prefixes, one list[...] level per repetition
- Reference tokens naming other schema types (used verbatim)
- Nullable wrapping of "Optional." type fields and of reference return types
- Zero values used as binding defaults and record member defaults
- Canonical request-parameter text for primitives

Only the first alternative of a multi-type field or return is used
("Integer or String" chat_id maps to int).
"""

from __future__ import annotations

from typing import Sequence

from .model import APIDescription, TypeField

PRIMITIVES: dict[str, str] = {
    "Integer": "int",
    "Float": "float",
    "Boolean": "bool",
    "String": "str",
}

ARRAY_PREFIX = "Array of "

# Leading marker in a field description that allows a nullable reference
OPTIONAL_MARKER = "Optional."

# InputFile, InputMedia...: sent through the upload path, never as params
UPLOAD_PREFIX = "Input"

_ZERO_VALUES: dict[str, str] = {
    "int": "0",
    "float": "0.0",
    "bool": "False",
    "str": '""',
}

_TEXT_CONVERTERS: dict[str, str] = {
    "int": "str({})",
    # Shortest round-trip digits, never in exponent notation
    "float": 'format(Decimal(repr({})), "f")',
    "bool": '"true" if {} else "false"',
    "str": "{}",
}


def map_type(token: str) -> str:
    """Map a schema type token to a Python type expression."""
    if token.startswith(ARRAY_PREFIX):
        return f"list[{map_type(token[len(ARRAY_PREFIX):])}]"
    return PRIMITIVES.get(token, token)


def base_token(token: str) -> str:
    """Strip every "Array of " prefix from a token."""
    while token.startswith(ARRAY_PREFIX):
        token = token[len(ARRAY_PREFIX):]
    return token


def nullable(type_expr: str) -> str:
    return f"{type_expr} | None"


def is_nullable(type_expr: str) -> bool:
    return type_expr.endswith(" | None")


def is_sequence(type_expr: str) -> bool:
    return type_expr.startswith("list[")


def is_primitive(type_expr: str) -> bool:
    return type_expr in _ZERO_VALUES


def map_field_type(api: APIDescription, field: TypeField) -> str:
    """Map a record field, wrapping declared references marked "Optional.".

    The declared-type check runs on the mapped string including any list[...]
    wrapping, so an array of references is never made nullable.
    """
    py_type = map_type(field.types[0])
    if api.is_type(py_type) and field.description.startswith(OPTIONAL_MARKER):
        return nullable(py_type)
    return py_type


def map_return_type(api: APIDescription, returns: Sequence[str]) -> str:
    """Map a method's return type; declared types may come back empty."""
    py_type = map_type(returns[0])
    if api.is_type(py_type):
        return nullable(py_type)
    return py_type


def default_value(type_expr: str) -> str:
    """Source text of the value a binding returns on failure."""
    if is_nullable(type_expr) or is_sequence(type_expr):
        return "None"
    return _ZERO_VALUES.get(type_expr, "None")


def text_converter(type_expr: str) -> str | None:
    """Format string turning a primitive into request text, None otherwise."""
    return _TEXT_CONVERTERS.get(type_expr)


def is_array_token(token: str) -> bool:
    return token.startswith(ARRAY_PREFIX)


def is_upload_token(token: str) -> bool:
    return token.startswith(UPLOAD_PREFIX)
