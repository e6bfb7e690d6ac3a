# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import Optional


# ============================================================
# Errors
# ============================================================
class ToonError(ValueError):
    pass


class ToonEncodeError(ToonError):
    """Value cannot be represented in TOON (e.g. unsupported control character)."""


class ToonDecodeError(ToonError):
    """Base class for every decoding failure.

    Carries the 1-indexed line number (0 when not tied to a line) and a
    snippet of the offending line so callers can point at the problem.
    """

    def __init__(self, message: str, line: int = 0, snippet: Optional[str] = None):
        self.message = message
        self.line = line
        self.snippet = snippet
        full = message
        if line > 0:
            full = f"Line {line}: {message}"
        if snippet is not None:
            full += f"\n  > {snippet}"
        super().__init__(full)

    def __reduce__(self):
        return (type(self), (self.message, self.line, self.snippet))


class ToonSyntaxError(ToonDecodeError):
    """Malformed TOON: missing colon, bad quoting/escape, malformed header."""


class StrictModeError(ToonDecodeError):
    """Structural violation only reported when strict mode is on."""


class CountMismatchError(StrictModeError):
    """Declared array length or tabular width disagrees with the data."""

    def __init__(
        self,
        message: str,
        expected: int,
        actual: int,
        line: int = 0,
        snippet: Optional[str] = None,
    ):
        self.expected = expected
        self.actual = actual
        super().__init__(message, line, snippet)

    def __reduce__(self):
        return (type(self), (self.message, self.expected, self.actual, self.line, self.snippet))


class ToonIndentationError(StrictModeError):
    """Indentation is not a multiple of the configured width, or uses tabs."""
