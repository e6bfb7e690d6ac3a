# -*- coding: utf-8 -*-
"""Scalar encoding/decoding: quoting, escaping, numbers, keywords."""
from __future__ import annotations

import re
from decimal import Decimal
from typing import Optional, Union

from .constants import (
    BACKSLASH,
    CLOSE_BRACE,
    CLOSE_BRACKET,
    COLON,
    DOUBLE_QUOTE,
    FALSE_LITERAL,
    KEYWORDS,
    LIST_ITEM_MARKER,
    NULL_LITERAL,
    OPEN_BRACE,
    OPEN_BRACKET,
    TRUE_LITERAL,
)
from .errors import ToonEncodeError, ToonSyntaxError
from .values import Primitive

# Unquoted keys: identifier-ish, dots allowed after the first character
_BARE_KEY_RE = re.compile(r"[A-Za-z_][\w.]*", re.ASCII)

# Everything the decoder would read back as a number
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_OCTAL_LIKE_RE = re.compile(r"0[0-7]+")
_HEX_BINARY_RE = re.compile(r"0x[0-9A-Fa-f]+|0b[01]+")

# \n, \r and \t have escapes; nothing else below 0x20 does
_UNSUPPORTED_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")
_CONTROL_RE = re.compile(r"[\x00-\x1f]")

_STRUCTURAL_CHARS = (COLON, OPEN_BRACKET, CLOSE_BRACKET, OPEN_BRACE, CLOSE_BRACE, DOUBLE_QUOTE, BACKSLASH)

_ESCAPES = {"\\": "\\", '"': '"', "n": "\n", "r": "\r", "t": "\t"}

_LARGE_FLOAT = 1e20


# ============================================================
# Encode side
# ============================================================
def encode_primitive(value: Primitive, delimiter: str) -> str:
    if value is None:
        return NULL_LITERAL
    if isinstance(value, bool):
        return TRUE_LITERAL if value else FALSE_LITERAL
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _encode_float(value)
    if isinstance(value, str):
        return encode_string_literal(value, delimiter)
    raise ToonEncodeError(f"Unsupported primitive type: {type(value).__name__}")


def _encode_float(value: float) -> str:
    if value == 0.0:
        return "0"
    if abs(value) > _LARGE_FLOAT:
        # quoted so the exact digits survive readers that use doubles
        return DOUBLE_QUOTE + format(value, ".0f") + DOUBLE_QUOTE
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("", "-", "-0"):
        return "0"
    return text


def encode_key(key: str) -> str:
    """Encode an object key or tabular field name."""
    if _BARE_KEY_RE.fullmatch(key):
        return key
    return DOUBLE_QUOTE + escape_string(key) + DOUBLE_QUOTE


def encode_string_literal(value: str, delimiter: str, is_key: bool = False) -> str:
    if is_safe_unquoted(value, delimiter, is_key):
        return value
    return DOUBLE_QUOTE + escape_string(value) + DOUBLE_QUOTE


def escape_string(value: str) -> str:
    if _UNSUPPORTED_CONTROL_RE.search(value):
        raise ToonEncodeError(
            "String contains unsupported control characters. "
            "Only \\n (newline), \\r (carriage return) and \\t (tab) can be escaped."
        )
    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )


def looks_numeric(value: str) -> bool:
    return bool(
        _NUMBER_RE.fullmatch(value)
        or _OCTAL_LIKE_RE.fullmatch(value)
        or _HEX_BINARY_RE.fullmatch(value)
    )


def is_safe_unquoted(value: str, delimiter: str, is_key: bool = False) -> bool:
    """True if ``value`` can be written without quotes and read back unchanged."""
    if value == "":
        return False
    if value.strip() != value:
        return False
    if is_key and " " in value:
        return False
    if value in KEYWORDS:
        return False
    if looks_numeric(value):
        return False
    if any(ch in value for ch in _STRUCTURAL_CHARS) or delimiter in value:
        return False
    if _CONTROL_RE.search(value):
        return False
    if value.startswith(LIST_ITEM_MARKER):
        return False
    return True


# ============================================================
# Decode side
# ============================================================
def parse_value(token: str, line: int = 0) -> Primitive:
    """Parse one scalar token (already split from its row/line)."""
    token = token.strip()
    if token == "":
        raise ToonSyntaxError("Empty token", line)
    if token.startswith(DOUBLE_QUOTE):
        return parse_quoted_string(token, line)
    if token == TRUE_LITERAL:
        return True
    if token == FALSE_LITERAL:
        return False
    if token == NULL_LITERAL:
        return None
    number = parse_number(token)
    if number is not None:
        return number
    return token


def parse_key(token: str, line: int = 0) -> str:
    token = token.strip()
    if token == "":
        raise ToonSyntaxError("Empty key", line)
    if token.startswith(DOUBLE_QUOTE):
        return parse_quoted_string(token, line)
    return token


def parse_number(token: str) -> Optional[Union[int, float]]:
    """Number value of ``token``, or None if it must stay a string.

    ``05`` / ``-0001`` keep their leading zeros as strings; ``0``, ``-0``,
    ``0.5`` and ``0e10`` are numbers.
    """
    if not _NUMBER_RE.fullmatch(token):
        return None
    if _has_leading_zero(token):
        return None
    if "." in token or "e" in token or "E" in token:
        return float(token)
    return int(token)


def _has_leading_zero(token: str) -> bool:
    digits = token[1:] if token[:1] in ("-", "+") else token
    if not digits.startswith("0") or digits == "0":
        return False
    return not (digits.startswith("0.") or digits[1:2] in ("e", "E"))


def parse_quoted_string(token: str, line: int = 0) -> str:
    """Unescape a ``"..."`` token. The closing quote must end the token."""
    chars = []
    i = 1
    n = len(token)
    while i < n:
        ch = token[i]
        if ch == BACKSLASH:
            if i + 1 >= n:
                break
            nxt = token[i + 1]
            if nxt not in _ESCAPES:
                raise ToonSyntaxError(f"Invalid escape sequence: \\{nxt}", line, token)
            chars.append(_ESCAPES[nxt])
            i += 2
            continue
        if ch == DOUBLE_QUOTE:
            if i != n - 1:
                raise ToonSyntaxError("Unexpected characters after closing quote", line, token)
            return "".join(chars)
        chars.append(ch)
        i += 1
    raise ToonSyntaxError("Unterminated quoted string", line, token)
