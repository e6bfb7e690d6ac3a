# -*- coding: utf-8 -*-
"""Encoder: walks a canonical value tree and picks the array layout per array."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from .constants import (
    CLOSE_BRACE,
    CLOSE_BRACKET,
    COLON,
    DELIMITER_SIGILS,
    LIST_ITEM_MARKER,
    LIST_ITEM_PREFIX,
    OPEN_BRACE,
    OPEN_BRACKET,
    SPACE,
)
from .options import EncodeOptions
from .primitives import encode_key, encode_primitive
from .values import (
    PRIMITIVE_KINDS,
    ValueKind,
    is_array_of_arrays,
    is_array_of_primitives,
    kind_of,
    tabular_fields,
)
from .writer import LineWriter


class Encoder:
    """Writes TOON lines for a normalized value into a ``LineWriter``.

    Array layouts, most compact first: inline primitives, array of arrays,
    tabular (uniform flat objects), and the generic hyphen list.
    """

    def __init__(self, options: EncodeOptions, writer: LineWriter):
        self.options = options
        self.writer = writer
        self.delimiter = options.delimiter
        self.sigil = DELIMITER_SIGILS[options.delimiter]

    # ---------------- Root ----------------
    def encode_value(self, value: Any, depth: int = 0) -> None:
        kind = kind_of(value)
        if kind in PRIMITIVE_KINDS:
            self.writer.push(depth, encode_primitive(value, self.delimiter))
        elif kind is ValueKind.LIST:
            # an empty root array produces no output at all
            if value:
                self.encode_array(None, value, depth, "", depth + 1)
        else:
            self.encode_object(value, depth)

    def encode_object(self, obj: Dict[str, Any], depth: int) -> None:
        for key, value in obj.items():
            self.encode_field(key, value, depth, "", depth + 1)

    # ---------------- Fields ----------------
    def encode_field(self, key: str, value: Any, depth: int, prefix: str, body_depth: int) -> None:
        """Write ``key: ...`` at ``depth``; a block body goes to ``body_depth``."""
        kind = kind_of(value)
        encoded_key = encode_key(key)
        if kind in PRIMITIVE_KINDS:
            encoded = encode_primitive(value, self.delimiter)
            self.writer.push(depth, f"{prefix}{encoded_key}{COLON}{SPACE}{encoded}")
        elif kind is ValueKind.LIST:
            self.encode_array(key, value, depth, prefix, body_depth)
        else:
            self.writer.push(depth, f"{prefix}{encoded_key}{COLON}")
            self.encode_object(value, body_depth)

    # ---------------- Arrays ----------------
    def encode_array(
        self,
        key: Optional[str],
        array: List[Any],
        depth: int,
        prefix: str,
        body_depth: int,
    ) -> None:
        if is_array_of_primitives(array):
            self.writer.push(depth, prefix + self.format_inline_array(array, key))
            return

        if is_array_of_arrays(array):
            self.writer.push(depth, prefix + self.format_header(len(array), key))
            for item in array:
                self.writer.push(body_depth, LIST_ITEM_PREFIX + self.format_inline_array(item))
            return

        fields = tabular_fields(array)
        if fields is not None:
            self.writer.push(depth, prefix + self.format_header(len(array), key, fields))
            self.write_tabular_rows(array, fields, body_depth)
            return

        # list headers carry no delimiter sigil: their items are not delimited
        self.writer.push(depth, prefix + self.format_header(len(array), key, with_sigil=False))
        for item in array:
            self.encode_list_item(item, body_depth)

    def format_inline_array(self, array: List[Any], key: Optional[str] = None) -> str:
        header = self.format_header(len(array), key)
        joined = self.delimiter.join(encode_primitive(item, self.delimiter) for item in array)
        if not array:
            return header
        return f"{header}{SPACE}{joined}"

    def format_header(
        self,
        length: int,
        key: Optional[str] = None,
        fields: Optional[List[str]] = None,
        with_sigil: bool = True,
    ) -> str:
        head = encode_key(key) if key is not None else ""
        sigil = self.sigil if with_sigil else ""
        head += f"{OPEN_BRACKET}{length}{sigil}{CLOSE_BRACKET}"
        if fields is not None:
            head += OPEN_BRACE + self.delimiter.join(encode_key(f) for f in fields) + CLOSE_BRACE
        return head + COLON

    def write_tabular_rows(self, array: List[Dict[str, Any]], fields: List[str], depth: int) -> None:
        for obj in array:
            row = self.delimiter.join(encode_primitive(obj[f], self.delimiter) for f in fields)
            self.writer.push(depth, row)

    # ---------------- List items ----------------
    def encode_list_item(self, item: Any, depth: int) -> None:
        kind = kind_of(item)
        if kind in PRIMITIVE_KINDS:
            self.writer.push(depth, LIST_ITEM_PREFIX + encode_primitive(item, self.delimiter))
        elif kind is ValueKind.LIST:
            self.encode_array(None, item, depth, LIST_ITEM_PREFIX, depth + 1)
        else:
            self.encode_object_as_list_item(item, depth)

    def encode_object_as_list_item(self, obj: Dict[str, Any], depth: int) -> None:
        if not obj:
            self.writer.push(depth, LIST_ITEM_MARKER)
            return
        items = iter(obj.items())
        first_key, first_value = next(items)
        # the first field shares the marker line; its body sits two levels
        # below the marker so it cannot merge with the sibling fields
        self.encode_field(first_key, first_value, depth, LIST_ITEM_PREFIX, depth + 2)
        for key, value in items:
            self.encode_field(key, value, depth + 1, "", depth + 2)
