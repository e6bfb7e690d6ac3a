# -*- coding: utf-8 -*-
"""Public entry points: ``encode`` / ``decode`` and preset shortcuts."""
from __future__ import annotations

import logging
from typing import Any, Optional

from .constants import SPACE
from .encoder import Encoder
from .errors import ToonDecodeError
from .normalize import normalize_value
from .options import (
    DEFAULT_DECODE_OPTIONS,
    DEFAULT_ENCODE_OPTIONS,
    LENIENT_DECODE_OPTIONS,
    DecodeOptions,
    EncodeOptions,
)
from .parser import Parser
from .security import safe_raw_preview
from .tokenizer import tokenize
from .writer import LineWriter

logger = logging.getLogger(__name__)


def encode(value: Any, options: Optional[EncodeOptions] = None) -> str:
    """Encode any Python value as TOON text (no trailing newline)."""
    options = options or DEFAULT_ENCODE_OPTIONS
    normalized = normalize_value(value, strict_types=options.strict_types)
    writer = LineWriter(SPACE * options.indent)
    Encoder(options, writer).encode_value(normalized)
    logger.debug(
        "Encoded %s into %d lines (indent=%d, delimiter=%r)",
        type(value).__name__,
        len(writer),
        options.indent,
        options.delimiter,
    )
    return writer.to_string()


def decode(text: str, options: Optional[DecodeOptions] = None) -> Any:
    """Decode TOON text into dicts, lists and primitives.

    Raises:
        ToonDecodeError: any syntax error, or a strict-mode violation when
            ``options.strict`` is on (the default).
    """
    options = options or DEFAULT_DECODE_OPTIONS
    try:
        lines = tokenize(text, options)
        result = Parser(options).parse(lines)
    except ToonDecodeError as e:
        logger.debug(
            "Decode failed (strict=%s): %s | raw=%s",
            options.strict,
            e.message,
            safe_raw_preview(text, line=e.line),
        )
        raise
    logger.debug("Decoded %d lines into %s (strict=%s)", len(lines), type(result).__name__, options.strict)
    return result


# ============================================================
# Presets
# ============================================================
def encode_compact(value: Any) -> str:
    return encode(value, EncodeOptions.compact())


def encode_readable(value: Any) -> str:
    return encode(value, EncodeOptions.readable())


def encode_tabular(value: Any) -> str:
    return encode(value, EncodeOptions.tabular())


def encode_pipe_delimited(value: Any) -> str:
    return encode(value, EncodeOptions.pipe_delimited())


def decode_lenient(text: str) -> Any:
    return decode(text, LENIENT_DECODE_OPTIONS)
