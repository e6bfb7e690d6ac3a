# -*- coding: utf-8 -*-
"""Convert arbitrary Python values into the canonical TOON value tree."""
from __future__ import annotations

import dataclasses
import datetime
import logging
import math
import types
from collections.abc import Mapping, Sequence
from decimal import Decimal
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel

from .errors import ToonEncodeError
from .values import CanonicalValue

logger = logging.getLogger(__name__)


@runtime_checkable
class ToonSerializable(Protocol):
    """Objects that know how to turn themselves into plain data."""

    def to_toon(self) -> Any: ...


def normalize_value(value: Any, *, strict_types: bool = False) -> CanonicalValue:
    """Normalize ``value`` into primitives, lists and string-keyed dicts.

    Custom hooks win over generic handling: ``to_toon()`` first, then
    pydantic models, mappings and sequences, then ``to_dict()``, then
    dataclasses. Dataclasses and plain objects export public attributes
    only. Values with no sensible representation become ``None`` unless
    ``strict_types`` is set.
    """
    if value is None:
        return None

    # Enum before str/int: StrEnum and IntEnum are subclasses of both.
    if isinstance(value, Enum):
        backing = value.value
        if isinstance(backing, (str, int, float, bool)):
            return normalize_value(backing, strict_types=strict_types)
        return value.name

    if isinstance(value, (bool, str)):
        return value

    if isinstance(value, int):
        return int(value)

    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        if value == 0.0 and math.copysign(1.0, value) < 0:
            return 0
        return value

    if isinstance(value, Decimal):
        if not value.is_finite():
            return None
        if value == value.to_integral_value():
            return int(value)
        return normalize_value(float(value), strict_types=strict_types)

    # datetime is a subclass of date
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()

    if isinstance(value, ToonSerializable):
        serialized = value.to_toon()
        if serialized is not value:
            return normalize_value(serialized, strict_types=strict_types)

    if isinstance(value, BaseModel):
        return normalize_value(value.model_dump(), strict_types=strict_types)

    if isinstance(value, Mapping):
        return {
            _normalize_key(k): normalize_value(v, strict_types=strict_types)
            for k, v in value.items()
        }

    # namedtuple keeps its field names
    if isinstance(value, tuple) and hasattr(value, "_asdict"):
        return normalize_value(value._asdict(), strict_types=strict_types)

    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray, memoryview)):
        return [normalize_value(item, strict_types=strict_types) for item in value]

    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict) and not isinstance(value, type):
        return normalize_value(to_dict(), strict_types=strict_types)

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: normalize_value(getattr(value, f.name), strict_types=strict_types)
            for f in dataclasses.fields(value)
            if not f.name.startswith("_")
        }

    if _has_public_fields(value):
        return {
            name: normalize_value(attr, strict_types=strict_types)
            for name, attr in vars(value).items()
            if not name.startswith("_")
        }

    if strict_types:
        raise ToonEncodeError(f"Cannot normalize value of type {type(value).__name__}")
    logger.debug("Unsupported type %s normalized to null", type(value).__name__)
    return None


def _normalize_key(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, Enum):
        key = key.value if isinstance(key.value, (str, int, float, bool)) else key.name
        if isinstance(key, str):
            return key
    if key is True:
        return "true"
    if key is False:
        return "false"
    if key is None:
        return "null"
    return str(key)


def _has_public_fields(value: Any) -> bool:
    if isinstance(value, (type, types.ModuleType)) or callable(value):
        return False
    return isinstance(getattr(value, "__dict__", None), dict)

