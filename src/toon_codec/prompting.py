# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import Any, Dict, Optional, Type

from pydantic import BaseModel

from .api import encode
from .constants import DELIMITER_COMMA, DELIMITER_PIPE, DELIMITER_TAB
from .options import DEFAULT_ENCODE_OPTIONS, EncodeOptions

_DELIMITER_NAMES = {DELIMITER_COMMA: "comma", DELIMITER_TAB: "tab", DELIMITER_PIPE: "pipe"}

_MAX_EXAMPLE_FIELDS = 8
_MAX_EXAMPLE_DEPTH = 3


def build_format_instructions(
    model: Optional[Type[BaseModel]] = None,
    options: Optional[EncodeOptions] = None,
) -> str:
    """LLM에게 TOON 형식으로 답하도록 요청하는 지시문을 생성합니다.

    ``model`` 이 주어지면 스키마로 만든 더미 객체를 실제 인코더로 인코딩해
    예시로 덧붙인다.
    """
    options = options or DEFAULT_ENCODE_OPTIONS
    delimiter_name = _DELIMITER_NAMES[options.delimiter]
    out = [
        "Respond in TOON (Token-Oriented Object Notation).",
        "",
        "Rules:",
        "- One `key: value` per line; nested objects are `key:` followed by lines indented "
        f"{options.indent or 2} spaces deeper.",
        f"- Arrays of scalars: `key[N]: v1{options.delimiter}v2` where N is the element count.",
        "- Arrays of flat objects with the same keys: `key[N]{f1,f2}:` then one row of values per line.",
        "- Other arrays: `key[N]:` then one `- ` item per element.",
        f"- Values are separated by {delimiter_name}s.",
        "- Quote strings that contain the delimiter, `:`, brackets, braces or quotes, "
        "or that look like numbers or true/false/null.",
        "- Do not wrap the answer in JSON.",
    ]
    if model is not None:
        out.extend(["", "Example:", build_toon_example(model, options)])
    return "\n".join(out)


def build_toon_example(model: Type[BaseModel], options: Optional[EncodeOptions] = None) -> str:
    """스키마 구조를 보여주는 작은 TOON 예시 (```toon 코드펜스 포함)."""
    schema = model.model_json_schema()
    defs = schema.get("$defs") or {}
    props = schema.get("properties") or {}
    example_obj: Dict[str, Any] = {}
    for k, v in list(props.items())[:_MAX_EXAMPLE_FIELDS]:
        example_obj[k] = _dummy_from_schema(v, defs, 0)
    return "```toon\n" + encode(example_obj, options) + "\n```"


def _dummy_scalar(schema: Dict[str, Any]) -> Any:
    if "enum" in schema and schema["enum"]:
        return schema["enum"][0]
    t = schema.get("type")
    if t == "string":
        return "example"
    if t == "integer":
        return 1
    if t == "number":
        return 0.5
    if t == "boolean":
        return True
    return None


def _dummy_from_schema(schema: Dict[str, Any], defs: Dict[str, Any], depth: int) -> Any:
    ref = schema.get("$ref")
    if isinstance(ref, str):
        schema = defs.get(ref.rsplit("/", 1)[-1], {})

    t = schema.get("type")
    if depth >= _MAX_EXAMPLE_DEPTH:
        return {} if t == "object" else _dummy_scalar(schema)

    if t == "object":
        props = schema.get("properties") or {}
        return {k: _dummy_from_schema(v, defs, depth + 1) for k, v in list(props.items())[:_MAX_EXAMPLE_FIELDS]}

    if t == "array":
        item = schema.get("items") or {}
        return [_dummy_from_schema(item, defs, depth + 1) for _ in range(2)]

    for key in ("anyOf", "oneOf", "allOf"):
        variants = [s for s in schema.get(key) or [] if s.get("type") != "null"]
        if variants:
            return _dummy_from_schema(variants[0], defs, depth)

    return _dummy_scalar(schema)
