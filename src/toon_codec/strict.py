# -*- coding: utf-8 -*-
"""Strict-mode checks. Every check is a no-op when ``strict`` is off."""
from __future__ import annotations

import re
from typing import TYPE_CHECKING, Sequence

from .delimiters import has_unquoted_colon
from .errors import CountMismatchError, StrictModeError, ToonIndentationError, ToonSyntaxError
from .options import DecodeOptions

if TYPE_CHECKING:
    from .tokenizer import Line

_TAB_INDENT_RE = re.compile(r"^[ ]*\t")

_SNIPPET_CHARS = 50

_COUNT_MESSAGES = {
    "inline": "Inline array length mismatch: expected {expected}, got {actual}",
    "list": "List array length mismatch: expected {expected}, got {actual}",
    "tabular": "Tabular array length mismatch: expected {expected} rows, got {actual}",
}


class StrictValidator:
    def __init__(self, options: DecodeOptions):
        self.options = options

    @property
    def enabled(self) -> bool:
        return self.options.strict

    def validate_not_empty(self, non_blank: Sequence["Line"]) -> None:
        if self.enabled and not non_blank:
            raise StrictModeError("Empty input not allowed in strict mode")

    def validate_no_tab_indentation(self, raw: str, line: int) -> None:
        # tabs stay legal as a delimiter and inside quoted strings
        if self.enabled and _TAB_INDENT_RE.match(raw):
            raise ToonIndentationError("Tabs not allowed in indentation (strict mode)", line, raw)

    def validate_indentation_multiple(self, indent: int, line: int, raw: str) -> None:
        size = self.options.indent
        if self.enabled and size > 0 and indent % size != 0:
            raise ToonIndentationError(
                f"Indentation must be multiple of {size} (got {indent} spaces)", line, raw
            )

    def validate_array_count(self, expected: int, actual: int, kind: str, line: int, snippet: str) -> None:
        if not self.enabled or expected == actual:
            return
        template = _COUNT_MESSAGES.get(kind, "Array length mismatch: expected {expected}, got {actual}")
        raise CountMismatchError(
            template.format(expected=expected, actual=actual), expected, actual, line, snippet
        )

    def validate_row_width(self, expected: int, actual: int, line: int, row: str) -> None:
        if self.enabled and expected != actual:
            raise CountMismatchError(
                f"Tabular row width mismatch: expected {expected} values, got {actual}",
                expected,
                actual,
                line,
                row[:_SNIPPET_CHARS],
            )

    def validate_no_blank_lines(self, lines: Sequence["Line"], start: int, end: int) -> None:
        """No blank line between the first and last element line (``lines[start:end]``)."""
        if not self.enabled:
            return
        for entry in lines[start:end]:
            if entry.blank:
                raise StrictModeError(
                    "Blank lines not allowed inside arrays/tabular rows (strict mode)", entry.number
                )

    def validate_colon_present(self, content: str, line: int) -> None:
        if self.enabled and not has_unquoted_colon(content):
            raise ToonSyntaxError("Missing colon after key", line, content)
