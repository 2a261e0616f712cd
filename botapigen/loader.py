"""Load and parse the api.json schema document.

Reads api.json from the working directory into an APIDescription.
Malformed documents raise pydantic.ValidationError; nothing is defaulted.
"""

from __future__ import annotations

from pathlib import Path

from .model import APIDescription

SCHEMA_PATH = Path("api.json")


def parse_schema(text: str | bytes) -> APIDescription:
    """Parse a schema document from its JSON text."""
    return APIDescription.model_validate_json(text)


def load_schema(path: Path | None = None) -> APIDescription:
    """Load the schema document from disk."""
    schema_file = path or SCHEMA_PATH
    with open(schema_file, "rb") as f:
        return parse_schema(f.read())
