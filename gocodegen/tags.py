"""Struct tag parsing and doc-comment helpers."""

from __future__ import annotations

import re

from .errors import MissingTagError

_JSON_TAG = re.compile(r'json:"(\d|\w+)(,omitempty)?"')


def parse_tag(tag: str | None, field: str = "") -> str:
    """Return the json key from a raw struct tag literal.

    The tag is matched as written in the source, backticks included.
    A missing tag, or one without a json key, raises MissingTagError.
    """
    if tag is None:
        raise MissingTagError(field)
    match = _JSON_TAG.search(tag)
    if match is None:
        raise MissingTagError(field, tag)
    return match.group(1)


def _upper_first(s: str) -> str:
    if not s:
        return ""
    return s[0].upper() + s[1:]


def enhance_description(description: str, name: str) -> str:
    """Turn a Go doc comment into a summary sentence.

    Go convention starts a doc comment with the declared name
    ("CreateWidget creates a widget."); the name is dropped and the
    sentence capitalized ("Creates a widget.").
    """
    return _upper_first(description.replace(f"{name} ", "", 1))
