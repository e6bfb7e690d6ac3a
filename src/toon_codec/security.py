# -*- coding: utf-8 -*-
"""Redaction of decode input before it reaches the logs."""
from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import List, Optional

_EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
_PHONE_RE = re.compile(r"\b(?:\+?\d{1,3}[- ]?)?(?:\d{2,4}[- ]?)\d{3,4}[- ]?\d{4}\b")
_CARD_RE = re.compile(r"\b(?:\d[ -]*?){13,19}\b")

# "password: x", "- api_key: x", "\"token\": x" -> value masked, key kept
_SECRET_FIELD_RE = re.compile(
    r'^(?P<key>[ \t]*(?:- )?"?(?:password|passwd|secret|token|api[_-]?key|authorization)"?[ \t]*:)[ \t]*\S.*$',
    re.IGNORECASE | re.MULTILINE,
)

LOG_RAW_ENV = "TOON_CODEC_LOG_RAW"
LOG_PREVIEW_CHARS_ENV = "TOON_CODEC_LOG_PREVIEW_CHARS"
DEFAULT_PREVIEW_CHARS = 200

REDACTED = "REDACTED"

# lines shown on each side of the failing line
_CONTEXT_LINES = 1


@dataclass(frozen=True)
class RawLogPolicy:
    """디코딩 입력 원문의 로깅 정책.

    - 기본값: 원문 미로깅 (``REDACTED``).
    - ``TOON_CODEC_LOG_RAW=true`` 는 개발 환경에서만 권장.
    - ``preview_chars``: 미리보기 전체(또는 오류 주변 각 줄)의 최대 길이.
    """

    enabled: bool = False
    preview_chars: int = DEFAULT_PREVIEW_CHARS

    @staticmethod
    def from_env() -> "RawLogPolicy":
        enabled = os.getenv(LOG_RAW_ENV, "false").lower() == "true"
        try:
            preview_chars = int(os.getenv(LOG_PREVIEW_CHARS_ENV, str(DEFAULT_PREVIEW_CHARS)))
        except ValueError:
            preview_chars = DEFAULT_PREVIEW_CHARS
        return RawLogPolicy(enabled=enabled, preview_chars=max(0, preview_chars))


def mask_pii_text(text: str) -> str:
    """정규식 기반 마스킹: 비밀 키의 값, 이메일, 카드번호, 전화번호.

    자유형 텍스트의 PII를 완전히 탐지하지는 못한다.
    """
    text = _SECRET_FIELD_RE.sub(r"\g<key> [REDACTED]", text)
    text = _EMAIL_RE.sub("[REDACTED_EMAIL]", text)
    text = _CARD_RE.sub("[REDACTED_CARD]", text)
    text = _PHONE_RE.sub("[REDACTED_PHONE]", text)
    return text


def safe_raw_preview(text: str, policy: Optional[RawLogPolicy] = None, line: int = 0) -> str:
    """정책에 따라 로그에 남길 원문 미리보기를 반환.

    ``line`` (1-indexed, ``ToonDecodeError.line``) 이 주어지면 원문 앞부분 대신
    해당 줄과 앞뒤 한 줄을 오류 메시지와 같은 줄 번호로 보여준다::

          2 | name: Ada
        > 3 | note: "open
          4 | tags[2]: a,b
    """
    if policy is None:
        policy = RawLogPolicy.from_env()
    if not policy.enabled:
        return REDACTED
    lines = text.split("\n")
    if line <= 0 or line > len(lines):
        return mask_pii_text(text[: policy.preview_chars])
    return "\n".join(_numbered_window(lines, line, policy.preview_chars))


def _numbered_window(lines: List[str], line: int, width: int) -> List[str]:
    first = max(1, line - _CONTEXT_LINES)
    last = min(len(lines), line + _CONTEXT_LINES)
    digits = len(str(last))
    out = []
    for number in range(first, last + 1):
        marker = ">" if number == line else " "
        content = mask_pii_text(lines[number - 1].rstrip("\r"))[:width]
        out.append(f"{marker} {number:>{digits}} | {content}")
    return out
