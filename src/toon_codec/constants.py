# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import Dict

# List markers
LIST_ITEM_MARKER = "-"
LIST_ITEM_PREFIX = "- "

# Structural characters
COMMA = ","
COLON = ":"
SPACE = " "
PIPE = "|"
TAB = "\t"

OPEN_BRACKET = "["
CLOSE_BRACKET = "]"
OPEN_BRACE = "{"
CLOSE_BRACE = "}"

# Literals
NULL_LITERAL = "null"
TRUE_LITERAL = "true"
FALSE_LITERAL = "false"
KEYWORDS = frozenset({NULL_LITERAL, TRUE_LITERAL, FALSE_LITERAL})

# Escapes
BACKSLASH = "\\"
DOUBLE_QUOTE = '"'
NEWLINE = "\n"
CARRIAGE_RETURN = "\r"

# Delimiters
DELIMITER_COMMA = COMMA
DELIMITER_TAB = TAB
DELIMITER_PIPE = PIPE
DEFAULT_DELIMITER = DELIMITER_COMMA

DELIMITERS: Dict[str, str] = {
    "comma": DELIMITER_COMMA,
    "tab": DELIMITER_TAB,
    "pipe": DELIMITER_PIPE,
}

# Marker written inside "[N...]" to announce the active delimiter.
DELIMITER_SIGILS: Dict[str, str] = {
    DELIMITER_COMMA: "",
    DELIMITER_TAB: TAB,
    DELIMITER_PIPE: PIPE,
}

DEFAULT_INDENT = 2
