"""Read-only model of the api.json schema document.

The document has two top-level mappings:
  types   -> {TypeName: {"description": [...], "fields": [...]}}
  methods -> {methodName: {"description": [...], "fields": [...], "returns": [...]}}

Mapping order in the document carries no meaning. Anything that emits code
iterates over type_names() / method_names(), which are sorted.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class TypeField(_Frozen):
    field: str
    # Alternatives; only the first one is used
    types: tuple[str, ...] = Field(min_length=1)
    description: str = ""


class TypeDescription(_Frozen):
    description: tuple[str, ...] = ()
    fields: tuple[TypeField, ...] = ()


class MethodField(_Frozen):
    parameter: str
    types: tuple[str, ...] = Field(min_length=1)
    required: bool = False
    description: str = ""

    @field_validator("required", mode="before")
    @classmethod
    def _required_flag(cls, value):
        """The document spells the flag as "Yes" / "Optional"."""
        if isinstance(value, str):
            return value == "Yes"
        return value


class MethodDescription(_Frozen):
    fields: tuple[MethodField, ...] = ()
    returns: tuple[str, ...] = Field(min_length=1)
    description: tuple[str, ...] = ()


class APIDescription(_Frozen):
    types: dict[str, TypeDescription] = {}
    methods: dict[str, MethodDescription] = {}

    def type_names(self) -> list[str]:
        """Declared type names in lexicographic order."""
        return sorted(self.types)

    def method_names(self) -> list[str]:
        """Declared method names in lexicographic order."""
        return sorted(self.methods)

    def is_type(self, name: str) -> bool:
        """Check whether name is a declared schema type."""
        return name in self.types
