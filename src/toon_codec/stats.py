# -*- coding: utf-8 -*-
"""
TOON 출력 크기 분석 도구

TOON 인코딩과 compact JSON의 길이를 비교하여 프롬프트에 넣을 데이터의
대략적인 토큰 절감량을 측정합니다.
"""

from __future__ import annotations

import json
import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from .api import encode
from .normalize import normalize_value
from .options import DEFAULT_ENCODE_OPTIONS, EncodeOptions

# Rough chars-per-token ratio for English-like text
CHARS_PER_TOKEN = 4


@dataclass(frozen=True)
class FormatComparison:
    """TOON vs compact JSON 비교 결과."""

    toon_chars: int
    json_chars: int
    savings: int  # json_chars - toon_chars, negative when TOON is larger
    savings_percent: float

    @property
    def savings_percent_label(self) -> str:
        return f"{self.savings_percent:.1f}%"

    def as_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["savings_percent_label"] = self.savings_percent_label
        return data


def toon_size(value: Any, options: Optional[EncodeOptions] = None) -> int:
    """Number of characters in the TOON encoding of ``value``."""
    return len(encode(value, options))


def estimate_tokens(value: Any, options: Optional[EncodeOptions] = None) -> int:
    """Approximate token count: one token per four characters, rounded up."""
    return math.ceil(toon_size(value, options) / CHARS_PER_TOKEN)


def compare_with_json(value: Any, options: Optional[EncodeOptions] = None) -> FormatComparison:
    """TOON 인코딩과 compact JSON 길이를 비교합니다.

    JSON 쪽은 같은 정규화 결과를 ``separators=(",", ":")`` 로 직렬화한 길이.

    Example:
        >>> cmp = compare_with_json({"tags": ["a", "b", "c"]})
        >>> cmp.toon_chars, cmp.json_chars
        (14, 22)
    """
    options = options or DEFAULT_ENCODE_OPTIONS
    toon_chars = toon_size(value, options)
    normalized = normalize_value(value, strict_types=options.strict_types)
    json_chars = len(json.dumps(normalized, ensure_ascii=False, separators=(",", ":")))
    savings = json_chars - toon_chars
    percent = (savings / json_chars * 100) if json_chars else 0.0
    return FormatComparison(
        toon_chars=toon_chars,
        json_chars=json_chars,
        savings=savings,
        savings_percent=round(percent, 1),
    )
