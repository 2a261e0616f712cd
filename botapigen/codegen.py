"""Render templates, format and write the generated units.

render_units() is pure: schema model in, source text per unit out.
write_unit() / generate() are the filesystem boundary.
"""

from __future__ import annotations

import logging
from pathlib import Path

import black
import jinja2

from .method_emitter import build_method_decls, referenced_types
from .model import APIDescription
from .type_emitter import build_type_decls

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
OUTPUT_DIR = Path("gen")

TYPES_FILE = "gen_types.py"
METHODS_FILE = "gen_methods.py"

HEADER = (
    "# THIS FILE IS AUTOGENERATED. DO NOT EDIT.\n"
    "# Regen by running 'python -m botapigen' in the repo root."
)


def _environment() -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )


def render_types(api: APIDescription) -> str:
    """Render the types unit: one record per schema type."""
    template = _environment().get_template("types.py.j2")
    return template.render(header=HEADER, types=build_type_decls(api))


def render_methods(api: APIDescription) -> str:
    """Render the methods unit: Options models plus the BotMethods bindings."""
    template = _environment().get_template("methods.py.j2")
    return template.render(
        header=HEADER,
        types_module=Path(TYPES_FILE).stem,
        type_imports=referenced_types(api),
        methods=build_method_decls(api),
    )


def render_units(api: APIDescription) -> dict[str, str]:
    """Render every unit, keyed by output file name."""
    return {
        TYPES_FILE: render_types(api),
        METHODS_FILE: render_methods(api),
    }


def format_source(text: str) -> str:
    """Canonicalize generated source; raises black.InvalidInput on bad syntax."""
    return black.format_str(text, mode=black.Mode())


def write_unit(path: Path, text: str) -> None:
    """Write raw text, then overwrite it with the formatted version.

    The raw text stays on disk if formatting fails.
    """
    path.write_text(text, encoding="utf-8")
    logger.debug("Formatting %s", path)
    path.write_text(format_source(text), encoding="utf-8")


def generate(api: APIDescription, output_dir: Path | None = None) -> list[Path]:
    """Render, format and write both units into output_dir."""
    out = output_dir or OUTPUT_DIR
    out.mkdir(parents=True, exist_ok=True)

    counts = {
        TYPES_FILE: f"{len(api.types)} types",
        METHODS_FILE: f"{len(api.methods)} methods",
    }
    written = []
    for file_name, text in render_units(api).items():
        path = out / file_name
        write_unit(path, text)
        print(f"Generated {path} ({counts[file_name]})")
        written.append(path)
    return written
