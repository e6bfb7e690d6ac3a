# -*- coding: utf-8 -*-
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .constants import CARRIAGE_RETURN, NEWLINE, SPACE, TAB
from .options import DecodeOptions
from .strict import StrictValidator


@dataclass(frozen=True)
class Line:
    content: str
    depth: int
    number: int  # 1-indexed
    indent: int
    blank: bool = False

    @property
    def stripped(self) -> str:
        return self.content.strip()


def tokenize(text: str, options: DecodeOptions) -> List[Line]:
    """Split TOON text into ``Line`` records with computed nesting depth."""
    validator = StrictValidator(options)
    lines: List[Line] = []
    # trailing newlines are accepted
    for number, raw in enumerate(text.rstrip(NEWLINE).split(NEWLINE), start=1):
        if raw.endswith(CARRIAGE_RETURN):
            raw = raw[:-1]
        if raw.strip() == "":
            lines.append(Line(content="", depth=0, number=number, indent=0, blank=True))
            continue

        if options.strict:
            validator.validate_no_tab_indentation(raw, number)
            indent = _leading_spaces(raw)
            validator.validate_indentation_multiple(indent, number, raw)
        else:
            indent = _leading_width(raw, options.indent)

        lines.append(
            Line(
                content=raw,
                depth=compute_depth(indent, options.indent),
                number=number,
                indent=indent,
            )
        )
    return lines


def compute_depth(indent: int, indent_size: int) -> int:
    if indent_size == 0:
        return 0
    return indent // indent_size


def _leading_spaces(line: str) -> int:
    return len(line) - len(line.lstrip(SPACE))


def _leading_width(line: str, indent_size: int) -> int:
    """Lenient indentation width: a tab counts as one full indentation level."""
    width = 0
    for ch in line:
        if ch == SPACE:
            width += 1
        elif ch == TAB:
            width += indent_size
        else:
            break
    return width
