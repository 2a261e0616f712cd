"""Build template context for the callable bindings in gen_methods.py.

For each method (lexicographic order):
- required fields become positional arguments, in declared order
- optional fields are bundled into a <Method>Options model passed as one
  trailing argument
- every field except uploads gets a statement adding it to the request params
- the binding dispatches, then decodes the response into the return type

Bindings never raise on transport, encode or decode problems; they return
(default, error) where default is the zero value of the return type.
"""

from __future__ import annotations

import logging
from typing import Any

from .model import APIDescription, MethodDescription, MethodField
from .naming import python_identifier, snake_to_camel, snake_to_title
from .type_emitter import comment_lines
from .type_mapper import (
    base_token,
    default_value,
    is_array_token,
    is_upload_token,
    map_return_type,
    map_type,
    nullable,
    text_converter,
)

logger = logging.getLogger(__name__)

OPTIONS_ARG = "opts"


def partition_fields(
    method: MethodDescription,
) -> tuple[list[MethodField], list[MethodField]]:
    """Split fields into (required, optional), keeping declared order."""
    required = [f for f in method.fields if f.required]
    optional = [f for f in method.fields if not f.required]
    return required, optional


def options_name(method_name: str) -> str:
    return snake_to_title(method_name) + "Options"


def _options_member(field: MethodField) -> dict[str, Any]:
    """Options members all have defaults so the model can be built empty.

    Primitives default to their zero value; anything else becomes
    "X | None" defaulting to None, meaning "not sent".
    """
    py_type = map_type(field.types[0])
    if text_converter(py_type) is None:
        py_type = nullable(py_type)
    return {
        "name": python_identifier(field.parameter),
        "type": py_type,
        "default": default_value(py_type),
        "description": comment_lines(field.description),
    }


def build_options_decl(
    method_name: str, optional: list[MethodField],
) -> dict[str, Any] | None:
    """Build the Options model for a method, or None without optional fields."""
    if not optional:
        return None
    return {
        "name": options_name(method_name),
        "members": [_options_member(f) for f in optional],
    }


def _argument(field: MethodField) -> str:
    """Expression that reads a field's value inside the binding."""
    name = python_identifier(field.parameter)
    if field.required:
        return name
    return f"{OPTIONS_ARG}.{name}"


def build_conversion(
    method_name: str, field: MethodField, default: str,
) -> list[str] | None:
    """Statements adding one field to the request params.

    Returns None for upload fields, which get no statement at all.
    """
    token = field.types[0]
    key = field.parameter
    arg = _argument(field)

    converter = text_converter(map_type(token))
    if converter is not None:
        return [f"_params[{key!r}] = {converter.format(arg)}"]

    if is_upload_token(token):
        logger.info("Skipping upload parameter %s of %s", key, method_name)
        return None

    lines = [
        "try:",
        f"    _params[{key!r}] = to_json({arg}, by_alias=True, exclude_none=True).decode()",
        "except PydanticSerializationError as _err:",
        f'    return {default}, ValueError(f"failed to encode {key}: {{_err}}")',
    ]
    # Absent or empty arrays and unset references are left out of the request
    if is_array_token(token):
        guard = f"if {arg}:"
    elif not field.required:
        guard = f"if {arg} is not None:"
    else:
        return lines
    return [guard] + ["    " + line for line in lines]


def build_conversions(
    method_name: str, method: MethodDescription, default: str,
) -> list[list[str]]:
    """Build the param statements for every field, in declared order."""
    conversions = []
    for field in method.fields:
        lines = build_conversion(method_name, field, default)
        if lines is not None:
            conversions.append(lines)
    return conversions


def build_method_decl(api: APIDescription, method_name: str) -> dict[str, Any]:
    """Build the declaration context for one schema method."""
    method = api.methods[method_name]
    return_type = map_return_type(api, method.returns)
    default = default_value(return_type)
    required, optional = partition_fields(method)

    description: list[str] = []
    for entry in method.description:
        description.extend(comment_lines(entry))

    return {
        "name": snake_to_camel(method_name),
        "schema_name": method_name,
        "description": description,
        "params": [
            {"name": python_identifier(f.parameter), "type": map_type(f.types[0])}
            for f in required
        ],
        "options": build_options_decl(method_name, optional),
        "return_type": return_type,
        "default": default,
        "conversions": build_conversions(method_name, method, default),
    }


def build_method_decls(api: APIDescription) -> list[dict[str, Any]]:
    """Build every binding declaration, sorted by method name."""
    return [build_method_decl(api, name) for name in api.method_names()]


def referenced_types(api: APIDescription) -> list[str]:
    """Declared type names the methods unit has to import."""
    names = set()
    for method in api.methods.values():
        tokens = [f.types[0] for f in method.fields] + [method.returns[0]]
        for token in tokens:
            base = base_token(token)
            if api.is_type(base):
                names.add(base)
    return sorted(names)
