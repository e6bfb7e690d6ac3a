# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
import re
from typing import Any, Optional, Type

from langchain_core.exceptions import OutputParserException
from langchain_core.output_parsers import BaseOutputParser
from pydantic import BaseModel, Field, ValidationError

from .api import decode
from .errors import ToonDecodeError
from .options import LENIENT_DECODE_OPTIONS, DecodeOptions
from .prompting import build_format_instructions
from .security import safe_raw_preview

logger = logging.getLogger(__name__)

_CODE_FENCE_RE = re.compile(r"```(?:toon)?[ \t]*\r?\n(.*?)\r?\n?[ \t]*```", flags=re.DOTALL)


def strip_code_fence(text: str) -> str:
    """```toon ... ``` 코드펜스가 있으면 본문만 꺼낸다."""
    match = _CODE_FENCE_RE.search(text or "")
    if match:
        return match.group(1)
    return text or ""


class ToonOutputParser(BaseOutputParser[Any]):
    """LangChain용 TOON 출력 파서.

    LLM 출력은 손으로 쓴 TOON에 가깝기 때문에 기본값은 lenient 디코딩.
    ``model`` 이 주어지면 디코딩 결과를 pydantic 모델로 검증한다.
    """

    pydantic_model: Optional[Type[BaseModel]] = Field(default=None)
    options: DecodeOptions = Field(default_factory=lambda: LENIENT_DECODE_OPTIONS)

    def __init__(
        self,
        model: Optional[Type[BaseModel]] = None,
        options: Optional[DecodeOptions] = None,
        **kwargs: Any,
    ):
        super().__init__(**kwargs)
        object.__setattr__(self, "pydantic_model", model)
        object.__setattr__(self, "options", options or LENIENT_DECODE_OPTIONS)

    def get_format_instructions(self) -> str:
        return build_format_instructions(self.pydantic_model)

    def decode(self, text: str) -> Any:
        """TOON 텍스트를 디코딩 (pydantic 검증 없이)."""
        return decode(strip_code_fence(text), self.options)

    def parse(self, text: str) -> Any:
        try:
            data = self.decode(text)
        except ToonDecodeError as e:
            logger.warning(
                "TOON output could not be decoded: %s | raw=%s",
                e.message,
                safe_raw_preview(strip_code_fence(text), line=e.line),
            )
            raise OutputParserException(f"Invalid TOON output: {e}", llm_output=text) from e

        if self.pydantic_model is None:
            return data
        try:
            return self.pydantic_model.model_validate(data)
        except ValidationError as e:
            logger.warning("TOON output failed %s validation", self.pydantic_model.__name__)
            raise OutputParserException(
                f"TOON output does not match {self.pydantic_model.__name__}: {e}", llm_output=text
            ) from e

    @property
    def _type(self) -> str:
        return "toon"
