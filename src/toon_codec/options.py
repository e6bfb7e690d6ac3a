# -*- coding: utf-8 -*-
from __future__ import annotations

from dataclasses import dataclass, replace

from .constants import (
    DEFAULT_DELIMITER,
    DEFAULT_INDENT,
    DELIMITER_COMMA,
    DELIMITER_PIPE,
    DELIMITER_TAB,
    DELIMITERS,
)


# ============================================================
# Encode options
# ============================================================
@dataclass(frozen=True)
class EncodeOptions:
    """Options for ``encode``.

    Attributes:
        indent: spaces per nesting level (0 = compact, flat output only)
        delimiter: ",", "\\t" or "|" (or "comma" / "tab" / "pipe")
        strict_types: raise ``ToonEncodeError`` on values the normalizer
            does not understand instead of encoding them as ``null``
    """

    indent: int = DEFAULT_INDENT
    delimiter: str = DEFAULT_DELIMITER
    strict_types: bool = False

    def __post_init__(self) -> None:
        if self.indent < 0:
            raise ValueError("Indent must be non-negative")
        delimiter = DELIMITERS.get(self.delimiter, self.delimiter)
        if delimiter not in (DELIMITER_COMMA, DELIMITER_TAB, DELIMITER_PIPE):
            raise ValueError(f"Invalid delimiter: {self.delimiter!r}")
        object.__setattr__(self, "delimiter", delimiter)

    @classmethod
    def default(cls) -> "EncodeOptions":
        return cls()

    @classmethod
    def compact(cls) -> "EncodeOptions":
        """No indentation; smallest output for flat payloads."""
        return cls(indent=0, delimiter=DELIMITER_COMMA)

    @classmethod
    def readable(cls) -> "EncodeOptions":
        return cls(indent=4, delimiter=DELIMITER_COMMA)

    @classmethod
    def tabular(cls) -> "EncodeOptions":
        """Tab-delimited rows, pastes cleanly into spreadsheets."""
        return cls(indent=2, delimiter=DELIMITER_TAB)

    @classmethod
    def pipe_delimited(cls) -> "EncodeOptions":
        """Pipe-delimited rows, for data full of commas."""
        return cls(indent=2, delimiter=DELIMITER_PIPE)

    def with_indent(self, indent: int) -> "EncodeOptions":
        return replace(self, indent=indent)

    def with_delimiter(self, delimiter: str) -> "EncodeOptions":
        return replace(self, delimiter=delimiter)


# ============================================================
# Decode options
# ============================================================
@dataclass(frozen=True)
class DecodeOptions:
    """Options for ``decode``.

    Lenient mode (``strict=False``) is meant for hand-written or
    LLM-written TOON: count/width mismatches, irregular indentation, tab
    indentation, blank lines inside arrays and empty input are accepted.
    """

    indent: int = DEFAULT_INDENT
    strict: bool = True

    def __post_init__(self) -> None:
        if self.indent < 0:
            raise ValueError("Indent must be non-negative")

    @classmethod
    def default(cls) -> "DecodeOptions":
        return cls()

    @classmethod
    def lenient(cls) -> "DecodeOptions":
        return cls(indent=DEFAULT_INDENT, strict=False)

    def with_indent(self, indent: int) -> "DecodeOptions":
        return replace(self, indent=indent)

    def with_strict(self, strict: bool) -> "DecodeOptions":
        return replace(self, strict=strict)


DEFAULT_ENCODE_OPTIONS = EncodeOptions()
DEFAULT_DECODE_OPTIONS = DecodeOptions()
LENIENT_DECODE_OPTIONS = DecodeOptions.lenient()
