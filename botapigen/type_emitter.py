"""Build template context for the record declarations in gen_types.py.

One record per schema type, in lexicographic name order. Members keep the
declared field order and carry Field(alias=...) so pydantic can read and
write the schema name without per-type code.
"""

from __future__ import annotations

from typing import Any

from .model import APIDescription, TypeField
from .naming import python_identifier
from .type_mapper import default_value, is_nullable, is_primitive, is_sequence, map_field_type


def comment_lines(text: str) -> list[str]:
    """Split description text into lines safe to emit after "# "."""
    return [line.rstrip() for line in text.splitlines()] or [""]


def _field_spec(py_type: str, alias: str) -> str:
    """Source text of the Field(...) default for a record member.

    Nullable members default to None, sequences to an empty list and
    primitives to their zero value. Value references stay required.
    """
    if is_sequence(py_type):
        return f"Field(default_factory=list, alias={alias!r})"
    if is_nullable(py_type) or is_primitive(py_type):
        return f"Field({default_value(py_type)}, alias={alias!r})"
    return f"Field(alias={alias!r})"


def build_member(api: APIDescription, field: TypeField) -> dict[str, Any]:
    """Build one record member from a schema field."""
    py_type = map_field_type(api, field)
    return {
        "name": python_identifier(field.field),
        "alias": field.field,
        "type": py_type,
        "field": _field_spec(py_type, field.field),
        "description": comment_lines(field.description),
    }


def build_type_decl(api: APIDescription, type_name: str) -> dict[str, Any]:
    """Build the declaration context for one schema type."""
    type_desc = api.types[type_name]
    description: list[str] = []
    for entry in type_desc.description:
        description.extend(comment_lines(entry))
    return {
        "name": type_name,
        "description": description,
        "members": [build_member(api, f) for f in type_desc.fields],
    }


def build_type_decls(api: APIDescription) -> list[dict[str, Any]]:
    """Build every record declaration, sorted by type name."""
    return [build_type_decl(api, name) for name in api.type_names()]
