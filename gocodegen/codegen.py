"""Render templates and write generated output.

Takes the context from context_builder and produces logging-service.go.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

from .loader import load_template
from .postprocess import PostProcessor, goimports

OUTPUT_FILENAME = "logging-service.go"


def generate(
    context: dict[str, Any],
    template: jinja2.Template | None = None,
    post_processor: PostProcessor = goimports,
    output_path: Path | None = None,
) -> Path:
    """Render the template, post-process the text and write it out.

    Nothing is written if rendering or post-processing fails.
    """
    output_path = Path(output_path or OUTPUT_FILENAME)
    print(f"Generating {output_path.name}")

    template = template or load_template()
    output = template.render(**context)
    output = post_processor(str(output_path), output)

    output_path.write_text(output, encoding="utf-8")

    print(f"Generated {output_path} ({context['endpoint_count']} endpoints)")
    return output_path
