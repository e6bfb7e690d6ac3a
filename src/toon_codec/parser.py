# -*- coding: utf-8 -*-
"""Recursive-descent parser over tokenized lines.

Depth is the only structural signal: a block belongs to the line above it
when it sits exactly one level deeper (two levels for the first field of a
list-item map, see ``Parser.parse_list_item``).
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .constants import LIST_ITEM_MARKER, LIST_ITEM_PREFIX
from .delimiters import find_unquoted_colon, has_unquoted_colon, is_array_header, split_delimited
from .errors import ToonIndentationError, ToonSyntaxError
from .headers import ArrayHeader, HeaderFormat, parse_header
from .options import DecodeOptions
from .primitives import parse_key, parse_value
from .strict import StrictValidator
from .tokenizer import Line

logger = logging.getLogger(__name__)


class LineCursor:
    """Read position over a line list. Blank lines are stepped over by ``peek``."""

    def __init__(self, lines: List[Line], pos: int = 0):
        self.lines = lines
        self.pos = pos

    def _next_index(self) -> int:
        i = self.pos
        while i < len(self.lines) and self.lines[i].blank:
            i += 1
        return i

    def peek(self) -> Optional[Line]:
        i = self._next_index()
        return self.lines[i] if i < len(self.lines) else None

    def advance(self) -> Line:
        i = self._next_index()
        if i >= len(self.lines):
            raise ToonSyntaxError("Unexpected end of input")
        self.pos = i + 1
        return self.lines[i]


def is_list_item(content: str) -> bool:
    return content == LIST_ITEM_MARKER or content.startswith(LIST_ITEM_PREFIX)


class Parser:
    def __init__(self, options: DecodeOptions):
        self.options = options
        self.validator = StrictValidator(options)

    @property
    def strict(self) -> bool:
        return self.options.strict

    # ============================================================
    # Root
    # ============================================================
    def parse(self, lines: List[Line]) -> Any:
        non_blank = [line for line in lines if not line.blank]
        self.validator.validate_not_empty(non_blank)
        if not non_blank:
            return {}

        cursor = LineCursor(lines)
        first = non_blank[0]
        content = first.stripped

        if is_array_header(content):
            header = parse_header(content, first.number)
            if header is None:
                raise ToonSyntaxError("Invalid root array header", first.number, content)
            cursor.advance()
            result = self.parse_array(header, cursor, first.depth + 1, first)
        elif has_unquoted_colon(content):
            result = self.parse_object(cursor, first.depth)
        elif len(non_blank) == 1:
            cursor.advance()
            result = parse_value(content, first.number)
        else:
            result = self.parse_object(cursor, first.depth)

        leftover = cursor.peek()
        if leftover is not None:
            raise ToonSyntaxError("Unexpected content after root value", leftover.number, leftover.stripped)
        return result

    # ============================================================
    # Objects
    # ============================================================
    def parse_object(self, cursor: LineCursor, depth: int) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        while True:
            line = cursor.peek()
            if line is None or line.depth < depth:
                break
            if line.depth > depth:
                cursor.advance()
                self._reject(line, "Unexpected indentation", ToonIndentationError)
                continue

            content = line.stripped
            if is_list_item(content):
                cursor.advance()
                self._reject(line, "List item outside of an array", ToonSyntaxError)
                continue

            cursor.advance()
            self.parse_entry(line, content, cursor, depth + 1, result)
        return result

    def parse_entry(
        self,
        line: Line,
        content: str,
        cursor: LineCursor,
        body_depth: int,
        target: Dict[str, Any],
    ) -> None:
        """Parse one ``key...`` entry into ``target``; a block body is read at ``body_depth``."""
        header = parse_header(content, line.number)
        if header is not None:
            if header.key is None:
                self._reject(line, "Array header without a key inside an object", ToonSyntaxError)
                return
            target[header.key] = self.parse_array(header, cursor, body_depth, line)
            return

        colon = find_unquoted_colon(content)
        if colon < 0:
            self.validator.validate_colon_present(content, line.number)
            logger.debug("Skipping line %d without a colon", line.number)
            return

        key = parse_key(content[:colon], line.number)
        rest = content[colon + 1:].strip()
        if rest:
            target[key] = parse_value(rest, line.number)
            return

        nxt = cursor.peek()
        if nxt is None or nxt.depth < body_depth:
            # "key:" with no nested lines
            target[key] = {}
        elif not self.strict and is_list_item(nxt.stripped):
            target[key] = self.parse_bare_list(cursor, nxt.depth)
        else:
            target[key] = self.parse_object(cursor, body_depth if self.strict else nxt.depth)

    # ============================================================
    # Arrays
    # ============================================================
    def parse_array(self, header: ArrayHeader, cursor: LineCursor, body_depth: int, header_line: Line) -> List[Any]:
        if header.format is HeaderFormat.TABULAR:
            return self.parse_tabular_rows(header, cursor, body_depth, header_line)
        if header.format is HeaderFormat.INLINE:
            values = [parse_value(token, header_line.number) for token in header.inline_values or []]
            if header.length is not None:
                self.validator.validate_array_count(
                    header.length, len(values), "inline", header_line.number, header_line.stripped
                )
            return values
        return self.parse_list_items(header, cursor, body_depth, header_line)

    def parse_list_items(self, header: ArrayHeader, cursor: LineCursor, depth: int, header_line: Line) -> List[Any]:
        start = cursor.pos
        items = self._collect_items(cursor, depth)
        self.validator.validate_no_blank_lines(cursor.lines, start, cursor.pos)
        if header.length is not None:
            self.validator.validate_array_count(
                header.length, len(items), "list", header_line.number, header_line.stripped
            )
        return items

    def parse_bare_list(self, cursor: LineCursor, depth: int) -> List[Any]:
        """Lenient only: ``- item`` lines directly under ``key:`` with no header."""
        return self._collect_items(cursor, depth)

    def _collect_items(self, cursor: LineCursor, depth: int) -> List[Any]:
        items: List[Any] = []
        while True:
            line = cursor.peek()
            if line is None or line.depth < depth:
                break
            cursor.advance()
            if line.depth > depth:
                self._reject(line, "Unexpected indentation", ToonIndentationError)
                continue
            content = line.stripped
            if not is_list_item(content):
                self._reject(line, "Expected list item starting with '- '", ToonSyntaxError)
                continue
            items.append(self.parse_list_item(line, content, cursor, depth))
        return items

    def parse_list_item(self, line: Line, content: str, cursor: LineCursor, depth: int) -> Any:
        if content == LIST_ITEM_MARKER:
            nxt = cursor.peek()
            if nxt is not None and nxt.depth > depth:
                return self.parse_object(cursor, depth + 1 if self.strict else nxt.depth)
            return {}

        rest = content[len(LIST_ITEM_PREFIX):].strip()
        if is_array_header(rest):
            header = parse_header(rest, line.number)
            if header is None:
                raise ToonSyntaxError("Invalid array header in list item", line.number, content)
            return self.parse_array(header, cursor, depth + 1, line)

        if has_unquoted_colon(rest):
            # the first field shares the marker line and keeps its block body
            # two levels down; the remaining fields sit one level down
            item: Dict[str, Any] = {}
            self.parse_entry(line, rest, cursor, depth + 2, item)
            item.update(self.parse_object(cursor, depth + 1))
            return item

        return parse_value(rest, line.number)

    def parse_tabular_rows(self, header: ArrayHeader, cursor: LineCursor, depth: int, header_line: Line) -> List[Dict[str, Any]]:
        fields = header.fields or []
        width = len(fields)
        rows: List[Dict[str, Any]] = []
        start = cursor.pos
        while True:
            line = cursor.peek()
            if line is None or line.depth < depth:
                break
            cursor.advance()
            if line.depth > depth:
                self._reject(line, "Unexpected indentation", ToonIndentationError)
                continue

            row = line.stripped
            tokens = split_delimited(row, header.delimiter, line.number)
            if len(tokens) != width:
                self.validator.validate_row_width(width, len(tokens), line.number, row)
                logger.debug(
                    "Tabular row on line %d has %d values, expected %d", line.number, len(tokens), width
                )
            values = [parse_value(token, line.number) for token in tokens[:width]]
            values.extend([None] * (width - len(values)))
            rows.append(dict(zip(fields, values)))

        self.validator.validate_no_blank_lines(cursor.lines, start, cursor.pos)
        if header.length is not None:
            self.validator.validate_array_count(
                header.length, len(rows), "tabular", header_line.number, header_line.stripped
            )
        return rows

    # ============================================================
    # Helpers
    # ============================================================
    def _reject(self, line: Line, message: str, error: type) -> None:
        """Raise in strict mode; otherwise drop the line with a DEBUG record."""
        if self.strict:
            raise error(message, line.number, line.stripped)
        logger.debug("Skipping line %d: %s", line.number, message)
