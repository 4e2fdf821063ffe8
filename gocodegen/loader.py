"""Load the Go source file and the generator template.

Reads the file named by GOFILE (or passed explicitly) and parses its
declarations; locates the Jinja2 template used for rendering.
"""

from __future__ import annotations

from pathlib import Path

import jinja2

from .goparser import GoFile, parse_source

TEMPLATE_PATH = Path(__file__).parent.parent / "templates" / "logging_service.go.j2"


def load_source(path: str | Path) -> GoFile:
    """Read and parse a Go source file."""
    source_file = Path(path)
    with open(source_file, encoding="utf-8") as f:
        return parse_source(f.read(), str(source_file))


def load_template(path: Path | None = None) -> jinja2.Template:
    """Load the output template; raises jinja2.TemplateNotFound if it is missing."""
    template_file = Path(path or TEMPLATE_PATH)
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(template_file.parent)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )
    return env.get_template(template_file.name)
