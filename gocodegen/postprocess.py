"""Post-processors applied to rendered Go source before it is written.

A post-processor takes the output filename and the rendered text and
returns the final text. goimports fixes the import block and formats;
gofmt only formats.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable

from .errors import FormatError

PostProcessor = Callable[[str, str], str]


def _run(command: list[str], filename: str, source: str) -> str:
    try:
        proc = subprocess.run(command, input=source, capture_output=True, text=True)
    except FileNotFoundError as exc:
        raise FormatError(f"{command[0]} not found on PATH") from exc
    if proc.returncode != 0:
        raise FormatError(f"{command[0]} failed for {filename}: {proc.stderr.strip()}")
    return proc.stdout


def goimports(filename: str, source: str) -> str:
    # resolve imports as if the file already lived in its output directory
    srcdir = str(Path(filename).resolve().parent)
    return _run(["goimports", "-srcdir", srcdir], filename, source)


def gofmt(filename: str, source: str) -> str:
    return _run(["gofmt"], filename, source)


def passthrough(filename: str, source: str) -> str:
    return source


POST_PROCESSORS: dict[str, PostProcessor] = {
    "goimports": goimports,
    "gofmt": gofmt,
    "none": passthrough,
}


def get_post_processor(name: str) -> PostProcessor:
    try:
        return POST_PROCESSORS[name]
    except KeyError:
        choices = ", ".join(sorted(POST_PROCESSORS))
        raise ValueError(f"unknown formatter {name!r} (choose from {choices})") from None
