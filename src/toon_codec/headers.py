# -*- coding: utf-8 -*-
"""Array header parsing: ``key[N<sigil>]{f1,f2}: v1,v2``."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .constants import (
    BACKSLASH,
    CLOSE_BRACE,
    CLOSE_BRACKET,
    COLON,
    DELIMITER_COMMA,
    DOUBLE_QUOTE,
    OPEN_BRACE,
    OPEN_BRACKET,
    PIPE,
    TAB,
)
from .delimiters import split_delimited
from .errors import ToonSyntaxError
from .primitives import parse_key

_LENGTH_MARKER = "#"
_SIGIL_DELIMITERS = {PIPE: PIPE, TAB: TAB}


class HeaderFormat(str, Enum):
    INLINE = "inline"
    LIST = "list"
    TABULAR = "tabular"


@dataclass(frozen=True)
class ArrayHeader:
    key: Optional[str]
    length: Optional[int]  # None for a standalone "{f1,f2}:" header
    delimiter: str
    fields: Optional[List[str]]
    inline_values: Optional[List[str]]  # raw tokens after the colon
    format: HeaderFormat


def parse_header(text: str, line: int = 0) -> Optional[ArrayHeader]:
    """Parse an array header line, or return None if ``text`` is not one.

    ``text`` is a header when a ``[`` (or a standalone ``{``) comes before
    the first unquoted colon. From that point on, malformed input raises
    ``ToonSyntaxError`` instead of falling back to ``None``.
    """
    text = text.strip()
    key, pos = _scan_key(text, line)
    if pos is None:
        return None

    length: Optional[int] = None
    delimiter = DELIMITER_COMMA
    if text[pos] == OPEN_BRACKET:
        length, delimiter, pos = _scan_length(text, pos, line)

    fields: Optional[List[str]] = None
    if pos < len(text) and text[pos] == OPEN_BRACE:
        fields, pos = _scan_fields(text, pos, delimiter, line)

    if pos >= len(text) or text[pos] != COLON:
        raise ToonSyntaxError("Missing colon after array header", line, text)

    rest = text[pos + 1:].strip()
    inline_values = split_delimited(rest, delimiter, line) if rest else None

    if fields is not None:
        fmt = HeaderFormat.TABULAR
    elif inline_values is not None or length == 0:
        fmt = HeaderFormat.INLINE
    else:
        fmt = HeaderFormat.LIST

    return ArrayHeader(
        key=key,
        length=length,
        delimiter=delimiter,
        fields=fields,
        inline_values=inline_values,
        format=fmt,
    )


def _scan_key(text: str, line: int) -> Tuple[Optional[str], Optional[int]]:
    """Return ``(key, index of "[" or "{")``; index is None for a non-header."""
    if text.startswith(DOUBLE_QUOTE):
        end = _closing_quote(text)
        if end < 0 or end + 1 >= len(text) or text[end + 1] not in (OPEN_BRACKET, OPEN_BRACE):
            return None, None
        return parse_key(text[: end + 1], line), end + 1

    for i, ch in enumerate(text):
        if ch == COLON:
            return None, None
        if ch in (OPEN_BRACKET, OPEN_BRACE):
            raw = text[:i].strip()
            return (parse_key(raw, line) if raw else None), i
    return None, None


def _closing_quote(text: str) -> int:
    i = 1
    while i < len(text):
        ch = text[i]
        if ch == BACKSLASH:
            i += 2
            continue
        if ch == DOUBLE_QUOTE:
            return i
        i += 1
    return -1


def _scan_length(text: str, pos: int, line: int) -> Tuple[int, str, int]:
    end = text.find(CLOSE_BRACKET, pos)
    if end < 0:
        raise ToonSyntaxError("Missing ']' in array header", line, text)
    inner = text[pos + 1:end]
    if inner.startswith(_LENGTH_MARKER):
        raise ToonSyntaxError("Length marker '#' is no longer supported", line, text)

    delimiter = DELIMITER_COMMA
    if inner and inner[-1] in _SIGIL_DELIMITERS:
        delimiter = _SIGIL_DELIMITERS[inner[-1]]
        inner = inner[:-1]
    if not inner.isdigit() or not inner.isascii():
        raise ToonSyntaxError(f"Invalid array length: {inner!r}", line, text)
    return int(inner), delimiter, end + 1


def _scan_fields(text: str, pos: int, delimiter: str, line: int) -> Tuple[List[str], int]:
    in_quotes = False
    i = pos + 1
    while i < len(text):
        ch = text[i]
        if in_quotes and ch == BACKSLASH:
            i += 2
            continue
        if ch == DOUBLE_QUOTE:
            in_quotes = not in_quotes
        elif ch == CLOSE_BRACE and not in_quotes:
            break
        i += 1
    else:
        raise ToonSyntaxError("Missing '}' in tabular header", line, text)

    fields = [parse_key(name, line) for name in split_delimited(text[pos + 1:i], delimiter, line)]
    if not fields:
        raise ToonSyntaxError("Tabular header declares no fields", line, text)
    return fields, i + 1
