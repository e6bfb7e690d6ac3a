# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import List

from .constants import NEWLINE


class LineWriter:
    """Collects output lines, each prefixed with ``depth`` copies of the indent string."""

    def __init__(self, indentation_string: str):
        self.indentation_string = indentation_string
        self._lines: List[str] = []

    def push(self, depth: int, content: str) -> None:
        self._lines.append(self.indentation_string * depth + content)

    def __len__(self) -> int:
        return len(self._lines)

    def to_string(self) -> str:
        return NEWLINE.join(self._lines)
