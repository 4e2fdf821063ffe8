"""Build the Jinja2 template context from an extraction result."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .goparser import GoFile
from .model import ExtractionResult


def build_context(file: GoFile, result: ExtractionResult) -> dict[str, Any]:
    """Build the full template context for one source file."""
    return {
        "package": file.package,
        "source": Path(file.filename).name,
        "entities": result.entities,
        "entities_by_name": result.entities_by_name,
        "endpoint_count": len(result.entities),
    }
