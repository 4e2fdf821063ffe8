"""Shared fixtures for the generator tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from gocodegen.goparser import GoFile, parse_source

TESTDATA = Path(__file__).parent / "testdata"


@pytest.fixture
def api_go() -> Path:
    """Path of the sample API source used by end-to-end tests."""
    return TESTDATA / "api.go"


@pytest.fixture
def parse_go() -> Callable[[str], GoFile]:
    """Parse a snippet of declarations inside ``package api``."""
    def _parse(body: str) -> GoFile:
        return parse_source("package api\n\n" + body, "snippet.go")
    return _parse
