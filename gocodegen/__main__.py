"""Entry point: python -m gocodegen [FILE]

Reads the Go file named on the command line or by $GOFILE (set by
go generate) and writes logging-service.go to the working directory.

Environment:
  GOFILE              source file when no argument is given
  GOCODEGEN_TEMPLATE  template path (default templates/logging_service.go.j2)
  GOCODEGEN_OUTPUT    output path (default logging-service.go)
  GOCODEGEN_FORMAT    goimports | gofmt | none (default goimports)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import jinja2

from .codegen import OUTPUT_FILENAME, generate
from .context_builder import build_context
from .errors import GeneratorError
from .loader import TEMPLATE_PATH, load_source, load_template
from .postprocess import get_post_processor
from .walker import walk


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    source = args[0] if args else os.environ.get("GOFILE")
    if not source:
        print("usage: python -m gocodegen FILE (or set GOFILE)", file=sys.stderr)
        return 2

    try:
        post_processor = get_post_processor(os.environ.get("GOCODEGEN_FORMAT", "goimports"))
        template = load_template(Path(os.environ.get("GOCODEGEN_TEMPLATE", TEMPLATE_PATH)))
        file = load_source(source)
        result = walk(file)
        context = build_context(file, result)
        generate(
            context,
            template=template,
            post_processor=post_processor,
            output_path=Path(os.environ.get("GOCODEGEN_OUTPUT", OUTPUT_FILENAME)),
        )
    except (GeneratorError, jinja2.TemplateError, OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
