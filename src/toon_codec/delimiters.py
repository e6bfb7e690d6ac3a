# -*- coding: utf-8 -*-
"""Quote-aware scanning: delimiter splitting and colon lookup."""
from __future__ import annotations

from typing import List

from .constants import BACKSLASH, COLON, DEFAULT_DELIMITER, DOUBLE_QUOTE, OPEN_BRACE, OPEN_BRACKET
from .errors import ToonSyntaxError

_SNIPPET_CHARS = 50


def split_delimited(text: str, delimiter: str = DEFAULT_DELIMITER, line: int = 0) -> List[str]:
    """Split a row on ``delimiter`` outside of quotes; tokens are trimmed.

    Quotes and escapes are kept in the tokens, ``parse_value`` unescapes them.
    """
    text = text.strip()
    if text == "":
        return []

    values: List[str] = []
    current: List[str] = []
    in_quotes = False
    escaped = False
    for ch in text:
        if escaped:
            current.append(ch)
            escaped = False
        elif ch == BACKSLASH:
            current.append(ch)
            escaped = True
        elif ch == DOUBLE_QUOTE:
            in_quotes = not in_quotes
            current.append(ch)
        elif ch == delimiter and not in_quotes:
            values.append("".join(current).strip())
            current = []
        else:
            current.append(ch)

    if in_quotes:
        raise ToonSyntaxError("Unterminated quoted string", line, text[:_SNIPPET_CHARS])

    values.append("".join(current).strip())
    return values


def find_unquoted_colon(text: str) -> int:
    """Index of the first ``:`` outside a quoted string, or -1."""
    in_quotes = False
    escaped = False
    for i, ch in enumerate(text):
        if escaped:
            escaped = False
        elif in_quotes and ch == BACKSLASH:
            escaped = True
        elif ch == DOUBLE_QUOTE:
            in_quotes = not in_quotes
        elif ch == COLON and not in_quotes:
            return i
    return -1


def has_unquoted_colon(text: str) -> bool:
    return find_unquoted_colon(text) >= 0


def is_array_header(text: str) -> bool:
    text = text.lstrip()
    return text.startswith(OPEN_BRACKET) or text.startswith(OPEN_BRACE)
