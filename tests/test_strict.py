from __future__ import annotations

import pickle

import pytest

from toon_codec import CountMismatchError, DecodeOptions, StrictModeError, ToonIndentationError, ToonSyntaxError
from toon_codec.strict import StrictValidator
from toon_codec.tokenizer import tokenize

STRICT = StrictValidator(DecodeOptions())
LENIENT = StrictValidator(DecodeOptions.lenient())


def test_lenient_validator_never_raises():
    LENIENT.validate_not_empty([])
    LENIENT.validate_no_tab_indentation("\tx: 1", 1)
    LENIENT.validate_indentation_multiple(3, 1, "   x: 1")
    LENIENT.validate_array_count(3, 2, "list", 1, "items[3]:")
    LENIENT.validate_row_width(2, 1, 2, "1")
    LENIENT.validate_colon_present("no colon", 1)


def test_array_count_messages():
    with pytest.raises(CountMismatchError, match="Inline array length mismatch: expected 3, got 2"):
        STRICT.validate_array_count(3, 2, "inline", 1, "tags[3]: a,b")
    with pytest.raises(CountMismatchError, match="Tabular array length mismatch"):
        STRICT.validate_array_count(1, 0, "tabular", 1, "rows[1]{a}:")
    STRICT.validate_array_count(2, 2, "list", 1, "items[2]:")


def test_indentation_checks():
    with pytest.raises(ToonIndentationError, match="multiple of 2"):
        STRICT.validate_indentation_multiple(3, 4, "   x: 1")
    with pytest.raises(ToonIndentationError):
        STRICT.validate_no_tab_indentation("  \tx: 1", 2)
    # tabs after content are delimiters, not indentation
    STRICT.validate_no_tab_indentation("  a\tb", 2)


def test_blank_lines_in_range():
    lines = tokenize("a[2]:\n  - 1\n\n  - 2\n\nb: 1", DecodeOptions())
    with pytest.raises(StrictModeError) as exc:
        STRICT.validate_no_blank_lines(lines, 1, 4)
    assert exc.value.line == 3
    STRICT.validate_no_blank_lines(lines, 3, 4)


def test_colon_present():
    STRICT.validate_colon_present('"a:b": 1', 1)
    with pytest.raises(ToonSyntaxError, match="Missing colon"):
        STRICT.validate_colon_present('"a:b"', 1)


def test_error_formatting_and_pickling():
    err = CountMismatchError("mismatch", 3, 2, 7, "items[3]:")
    assert str(err) == "Line 7: mismatch\n  > items[3]:"
    restored = pickle.loads(pickle.dumps(err))
    assert (restored.expected, restored.actual, restored.line) == (3, 2, 7)
    assert str(ToonSyntaxError("bad")) == "bad"
