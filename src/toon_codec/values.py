# -*- coding: utf-8 -*-
"""Canonical value tree and the array shapes the encoder chooses between.

After normalization every value is one of ``None``, ``bool``, ``int``,
``float``, ``str``, ``list`` or ``dict`` (string keys, insertion order kept).
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Union

Primitive = Union[str, int, float, bool, None]
CanonicalValue = Union[Primitive, List[Any], Dict[str, Any]]


class ValueKind(Enum):
    NULL = "null"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    LIST = "list"
    MAP = "map"


PRIMITIVE_KINDS = frozenset(
    {ValueKind.NULL, ValueKind.BOOL, ValueKind.INT, ValueKind.FLOAT, ValueKind.STRING}
)


def kind_of(value: Any) -> ValueKind:
    """Tag a canonical value. Raises ``TypeError`` for anything else."""
    if value is None:
        return ValueKind.NULL
    # bool is a subclass of int
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, int):
        return ValueKind.INT
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.LIST
    if isinstance(value, dict):
        return ValueKind.MAP
    raise TypeError(f"Not a canonical TOON value: {type(value).__name__}")


def is_primitive(value: Any) -> bool:
    return value is None or isinstance(value, (str, int, float, bool))


def is_array_of_primitives(value: List[Any]) -> bool:
    return all(is_primitive(item) for item in value)


def is_array_of_arrays(value: List[Any]) -> bool:
    if not value:
        return False
    return all(isinstance(item, list) and is_array_of_primitives(item) for item in value)


def is_array_of_objects(value: List[Any]) -> bool:
    if not value:
        return False
    return all(isinstance(item, dict) for item in value)


def tabular_fields(value: List[Any]) -> Optional[List[str]]:
    """Field names for a tabular encoding, or None if the array does not qualify.

    Every element must be a map with the same key set as the first one
    (order-independent) and only primitive values. Maps without keys never
    qualify: their rows would be empty lines.
    """
    if not is_array_of_objects(value):
        return None
    fields = list(value[0].keys())
    if not fields:
        return None
    expected = set(fields)
    for item in value:
        if len(item) != len(fields) or set(item.keys()) != expected:
            return None
        if not all(is_primitive(v) for v in item.values()):
            return None
    return fields
