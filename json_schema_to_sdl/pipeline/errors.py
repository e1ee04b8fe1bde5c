"""
Errors raised while converting definitions to SDL.

Every error aborts the current conversion; no partial output is returned.
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for all conversion failures."""


class UnknownReferenceError(ConversionError):
    """Raised when a $ref pointer has no matching entry in the definition table."""

    def __init__(self, pointer: str):
        self.pointer = pointer
        super().__init__(f"Unknown reference: {pointer!r}")


class MalformedGeneratedOutputError(ConversionError):
    """Raised when the assembled SDL text is rejected by the formatter.

    The underlying parser error is available as ``__cause__``.
    """


class UnboundedExpansionError(ConversionError):
    """Raised when a cyclic reference or nested object graph is detected."""

    def __init__(self, path: tuple[str, ...] | list[str]):
        self.path = tuple(path)
        super().__init__(f"Cyclic expansion detected: {' -> '.join(self.path)}")


class EmptyObjectError(ConversionError):
    """Raised for an object without any fields when empty objects are not skipped."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Object {name!r} has no fields, directly or inherited")
