from __future__ import annotations

import pytest

from toon_codec import (
    CountMismatchError,
    DecodeOptions,
    StrictModeError,
    ToonDecodeError,
    ToonIndentationError,
    ToonSyntaxError,
    decode,
    decode_lenient,
)
from toon_codec.delimiters import find_unquoted_colon, split_delimited
from toon_codec.headers import HeaderFormat, parse_header
from toon_codec.tokenizer import tokenize

LENIENT = DecodeOptions.lenient()


# ============================================================
# Tokenizer
# ============================================================
def test_tokenize_depths_and_numbers():
    lines = tokenize("a:\n  b: 1\n\n    c: 2\n\n", DecodeOptions())
    assert [ln.depth for ln in lines] == [0, 1, 0, 2]
    assert [ln.number for ln in lines] == [1, 2, 3, 4]
    assert lines[2].blank


def test_tokenize_crlf():
    lines = tokenize("a: 1\r\nb: 2\r\n", DecodeOptions())
    assert [ln.content for ln in lines] == ["a: 1", "b: 2"]


def test_tokenize_lenient_tab_counts_as_one_level():
    lines = tokenize("a:\n\tb: 1", LENIENT)
    assert lines[1].depth == 1


# ============================================================
# Delimiters / headers
# ============================================================
def test_split_delimited():
    assert split_delimited('a,"b,c",d') == ["a", '"b,c"', "d"]
    assert split_delimited(" a , b ") == ["a", "b"]
    assert split_delimited("a|b,c", "|") == ["a", "b,c"]
    assert split_delimited('"x\\"y",z') == ['"x\\"y"', "z"]
    assert split_delimited("") == []


def test_split_delimited_unterminated_quote():
    with pytest.raises(ToonSyntaxError):
        split_delimited('a,"b', ",", line=4)


def test_find_unquoted_colon():
    assert find_unquoted_colon('"a:b": c') == 5
    assert find_unquoted_colon("key: value") == 3
    assert find_unquoted_colon('"no colon here"') == -1


def test_parse_header_tabular():
    header = parse_header("items[2]{id,name}:")
    assert header.key == "items"
    assert header.length == 2
    assert header.fields == ["id", "name"]
    assert header.delimiter == ","
    assert header.inline_values is None
    assert header.format is HeaderFormat.TABULAR


def test_parse_header_inline_with_sigil():
    header = parse_header("tags[3|]: a|b|c")
    assert header.delimiter == "|"
    assert header.inline_values == ["a", "b", "c"]
    assert header.format is HeaderFormat.INLINE


def test_parse_header_variants():
    assert parse_header("[2]:").format is HeaderFormat.LIST
    assert parse_header("[2]:").key is None
    assert parse_header("a[0]:").format is HeaderFormat.INLINE
    standalone = parse_header("{a,b}:")
    assert standalone.length is None
    assert standalone.fields == ["a", "b"]
    assert parse_header('"my key"[1]: x').key == "my key"
    assert parse_header('rows[1\t]{"a b"\tc}:').fields == ["a b", "c"]


@pytest.mark.parametrize("text", ["key: value", "key: [1]", '"a[1]": x', "plain"])
def test_parse_header_not_a_header(text):
    assert parse_header(text) is None


@pytest.mark.parametrize("text", ["a[#2]: x,y", "a[x]:", "a[]:", "a[2", "a[2]{x:", "a[2]", "a[2]{}:"])
def test_parse_header_malformed(text):
    with pytest.raises(ToonSyntaxError):
        parse_header(text)


# ============================================================
# Decoding
# ============================================================
def test_decode_inline_array():
    assert decode("tags[3]: a,b,c") == {"tags": ["a", "b", "c"]}


def test_decode_tabular():
    text = "items[2]{id,name}:\n  1,A\n  2,B"
    assert decode(text) == {"items": [{"id": 1, "name": "A"}, {"id": 2, "name": "B"}]}


def test_decode_nested_object():
    text = "user:\n  name: Ada\n  address:\n    city: Paris\nactive: true"
    assert decode(text) == {"user": {"name": "Ada", "address": {"city": "Paris"}}, "active": True}


def test_decode_root_array():
    assert decode("[3]: a,b,c") == ["a", "b", "c"]
    assert decode("[2]{a}:\n  1\n  2") == [{"a": 1}, {"a": 2}]


def test_decode_root_primitives():
    assert decode("42") == 42
    assert decode("hello world") == "hello world"
    assert decode('"hello: world"') == "hello: world"
    assert decode("null") is None


def test_count_mismatch_strict_vs_lenient():
    text = "items[3]{a}:\n  1\n  2"
    with pytest.raises(CountMismatchError) as exc:
        decode(text)
    assert exc.value.expected == 3
    assert exc.value.actual == 2
    assert decode(text, LENIENT) == {"items": [{"a": 1}, {"a": 2}]}


def test_inline_count_mismatch():
    with pytest.raises(CountMismatchError):
        decode("tags[2]: a,b,c")
    assert decode_lenient("tags[2]: a,b,c") == {"tags": ["a", "b", "c"]}


def test_list_count_mismatch():
    with pytest.raises(CountMismatchError):
        decode("items[3]:\n  - 1\n  - 2")


def test_tabular_row_width():
    with pytest.raises(CountMismatchError):
        decode("rows[1]{a,b}:\n  1")
    assert decode_lenient("rows[1]{a,b}:\n  1") == {"rows": [{"a": 1, "b": None}]}
    assert decode_lenient("rows[1]{a,b}:\n  1,2,3") == {"rows": [{"a": 1, "b": 2}]}


def test_delimited_tabular():
    text = "rows[2|]{a|b}:\n  1|x,y\n  2|z"
    assert decode(text) == {"rows": [{"a": 1, "b": "x,y"}, {"a": 2, "b": "z"}]}
    assert decode("tags[2\t]: a\tb") == {"tags": ["a", "b"]}


def test_empty_input():
    with pytest.raises(StrictModeError):
        decode("")
    with pytest.raises(StrictModeError):
        decode("\n  \n")
    assert decode_lenient("") == {}


def test_key_without_body_is_empty_object():
    assert decode("key:") == {"key": {}}
    assert decode("a:\nb: 1") == {"a": {}, "b": 1}


def test_empty_array():
    assert decode("items[0]:") == {"items": []}


def test_list_items():
    text = "items[6]:\n  - 1\n  - two\n  - a: 1\n    b[2]: 1,2\n  - [2]: 1,2\n  - [1]{x}:\n    1\n  -"
    assert decode(text) == {"items": [1, "two", {"a": 1, "b": [1, 2]}, [1, 2], [{"x": 1}], {}]}


def test_list_item_first_field_body_two_levels_down():
    text = "users[2]:\n  - profile:\n      age: 3\n    name: A\n  - id: 1"
    assert decode(text) == {"users": [{"profile": {"age": 3}, "name": "A"}, {"id": 1}]}


def test_quoted_keys():
    assert decode('"my key": 1\n"a:b"[2]: x,y\n"[x]": z') == {"my key": 1, "a:b": ["x", "y"], "[x]": "z"}


def test_tab_indentation():
    with pytest.raises(ToonIndentationError):
        decode("a:\n\tb: 1")
    assert decode_lenient("a:\n\tb: 1") == {"a": {"b": 1}}


def test_indentation_must_be_multiple():
    with pytest.raises(ToonIndentationError) as exc:
        decode("a:\n   b: 1")
    assert exc.value.line == 2
    assert decode_lenient("a:\n   b: 1") == {"a": {"b": 1}}


def test_custom_indent():
    assert decode("a:\n    b: 1", DecodeOptions(indent=4)) == {"a": {"b": 1}}


def test_unexpected_indentation():
    with pytest.raises(ToonIndentationError):
        decode("a: 1\n    b: 2")
    assert decode_lenient("a: 1\n    b: 2") == {"a": 1}


def test_blank_lines():
    assert decode("a: 1\n\nb: 2") == {"a": 1, "b": 2}
    with pytest.raises(StrictModeError):
        decode("items[2]:\n  - 1\n\n  - 2")
    with pytest.raises(StrictModeError):
        decode("rows[2]{a}:\n  1\n\n  2")
    assert decode_lenient("items[2]:\n  - 1\n\n  - 2") == {"items": [1, 2]}


def test_missing_colon():
    with pytest.raises(ToonSyntaxError):
        decode("a: 1\nbogus")
    assert decode_lenient("a: 1\nbogus") == {"a": 1}


def test_bare_hyphen_list_only_in_lenient_mode():
    text = "items:\n  - a\n  - b"
    with pytest.raises(ToonSyntaxError):
        decode(text)
    assert decode_lenient(text) == {"items": ["a", "b"]}


def test_trailing_content_after_root_array():
    with pytest.raises(ToonSyntaxError):
        decode("[1]: a\nb: 1")


def test_syntax_errors_carry_line_numbers():
    with pytest.raises(ToonSyntaxError) as exc:
        decode('a: 1\nb: "open')
    assert exc.value.line == 2
    assert str(exc.value).startswith("Line 2: ")


@pytest.mark.parametrize("text", ['a: "bad \\q"', "a[#1]: x", 'a: "x" y', "a[1]: \"x"])
def test_syntax_errors(text):
    with pytest.raises(ToonSyntaxError):
        decode(text)


def test_all_errors_are_value_errors():
    with pytest.raises(ValueError):
        decode("a[x]: 1")
    with pytest.raises(ToonDecodeError):
        decode("tags[2]: a")


def test_numbers_and_leading_zeros():
    assert decode("a: 05\nb: -0\nc: 1.50\nd: 1e3") == {"a": "05", "b": 0, "c": 1.5, "d": 1000.0}
