"""Exception types raised while parsing, extracting and generating.

Extraction errors are fatal for a run: a declaration that cannot be mapped
would otherwise produce silently wrong generated code.
"""

from __future__ import annotations


class GeneratorError(Exception):
    """Base class for every error the generator reports."""


class GoSyntaxError(GeneratorError):
    """The Go source could not be parsed."""

    def __init__(self, message: str, filename: str = "<source>", line: int = 0) -> None:
        self.message = message
        self.filename = filename
        self.line = line
        super().__init__(f"{filename}:{line}: {message}")


class ExtractionError(GeneratorError):
    """A declaration matched a naming convention but has an unsupported shape."""


class UnsupportedTypeError(ExtractionError):
    """A type expression has no mapping in the generator vocabulary."""

    def __init__(self, kind: str, expression: str) -> None:
        self.kind = kind
        self.expression = expression
        super().__init__(f"Unmapped type {kind} {expression}")


class MissingTagError(ExtractionError):
    """A field has no json tag, or the tag does not match the expected pattern."""

    def __init__(self, field: str, tag: str | None = None) -> None:
        self.field = field
        self.tag = tag
        if tag is None:
            message = f"field {field!r} has no tag"
        else:
            message = f"field {field!r} has no json key in tag {tag}"
        super().__init__(message)


class MissingFieldNameError(ExtractionError):
    """A struct field is embedded and therefore has no name."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"{type_name}: embedded fields are not supported")


class MalformedDeclarationError(ExtractionError):
    """A Request type is not a struct."""

    def __init__(self, type_name: str, expression: str) -> None:
        self.type_name = type_name
        self.expression = expression
        super().__init__(f"{type_name} must be a struct, got {expression}")


class FormatError(GeneratorError):
    """The post-processing pass over the rendered source failed."""
