"""Entry point: python -m botapigen

Reads api.json, generates gen/gen_types.py and gen/gen_methods.py.
BOTAPIGEN_SCHEMA and BOTAPIGEN_OUTPUT_DIR override those locations.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .codegen import generate
from .loader import load_schema


def _env_path(name: str) -> Path | None:
    value = os.environ.get(name)
    return Path(value) if value else None


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    api = load_schema(_env_path("BOTAPIGEN_SCHEMA"))
    generate(api, _env_path("BOTAPIGEN_OUTPUT_DIR"))


if __name__ == "__main__":
    main()
