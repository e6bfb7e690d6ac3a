from __future__ import annotations

import pytest

from toon_codec import DecodeOptions, EncodeOptions, decode, encode

VALUES = [
    {"a": 1, "b": "text", "c": None, "d": True, "e": 2.5},
    {"tags": ["a", "b,c", "", "true", "05", "-x", "1e5", " padded "]},
    {"users": [{"id": 1, "name": "Ada"}, {"id": 2, "name": "Bob"}]},
    {"matrix": [[1, 2], [3, 4], []]},
    {"items": [1, "two", {"a": 1, "b": [1, 2]}, [1, 2], [{"x": 1}], {}]},
    {"users": [{"profile": {"age": 3, "tags": ["x"]}, "name": "A"}, {"id": 1}]},
    {"groups": [{"members": [{"id": 1}, {"id": 2}], "name": "g"}]},
    {"groups": [{"members": [{"id": 1, "roles": ["a"]}, 3], "name": "g"}]},
    {"grid": [{"cells": [[1, 2], [3]], "label": "x"}]},
    {"my key": {"a:b": [1, 2], "[x]": "y", "": "empty key"}},
    {"empty": {}, "list": [], "nested": {"deeper": {"deepest": "v"}}},
    {"text": 'multi\nline\ttab "quoted" back\\slash'},
    [{"a": 1}, {"a": 2}],
    [1, [2, 3], {"k": "v"}],
    [[]],
    "hello world",
    "",
    "a: b",
    42,
    -3.5,
    None,
    True,
]


@pytest.mark.parametrize("value", VALUES)
def test_roundtrip(value):
    assert decode(encode(value)) == value


@pytest.mark.parametrize("value", VALUES)
def test_reencoding_is_idempotent(value):
    once = encode(value)
    assert encode(decode(once)) == once


@pytest.mark.parametrize(
    "options",
    [EncodeOptions.pipe_delimited(), EncodeOptions.tabular(), EncodeOptions.readable()],
)
def test_roundtrip_with_presets(options):
    value = {
        "users": [{"id": 1, "name": "A B", "note": "x,y|z"}, {"id": 2, "name": "C", "note": "tab\there"}],
        "tags": ["a", "b"],
        "nested": {"list": [{"k": [1, 2]}]},
    }
    text = encode(value, options)
    assert decode(text, DecodeOptions(indent=options.indent)) == value


@pytest.mark.parametrize(
    "text",
    ["plain", "with space", "ünïcode ✓", "-leading", "trailing-", "0", "007", "null", "a,b", "x\ry", '\\"'],
)
def test_string_roundtrip(text):
    assert decode(encode(text)) == text
    assert decode(encode({"v": text})) == {"v": text}
    assert decode(encode({"v": [text, text]})) == {"v": [text, text]}


def test_compact_flat_roundtrip():
    value = {"a": 1, "tags": ["x", "y"], "name": "flat"}
    text = encode(value, EncodeOptions.compact())
    assert decode(text, DecodeOptions(indent=0)) == value


@pytest.mark.parametrize(
    "value",
    [
        {"a\n": 1},
        {"rows": [{"id\n": 1}, {"id\n": 2}]},
        {"tags\n": ["x", "y"]},
    ],
)
def test_keys_ending_in_newline_roundtrip(value):
    assert decode(encode(value)) == value
