"""Dream interpretation workflow: validate, prompt, generate, parse."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from ...core.config import DreamSettings
from ...core.exceptions import ConfigurationError, InputValidationError
from ...core.logging_config import get_logger
from ..schemas.dream import AnalysisResult, DreamInput
from .gemini_client import GeminiClient
from .prompt_builder import build_prompt
from .response_parser import parse_response

logger = get_logger(__name__)

MISSING_API_KEY_MESSAGE = "GEMINI_API_KEY 환경 변수가 설정되지 않았습니다."
EMPTY_DREAM_MESSAGE = "꿈 정보가 제공되지 않았습니다."


class DreamAnalyzer:
    """Runs one dream through the Gemini model and splits the interpretation."""

    def __init__(self, settings: DreamSettings, client: GeminiClient | None = None) -> None:
        self._settings = settings
        self._client = client or GeminiClient(settings)

    def _require_api_key(self) -> str:
        secret = self._settings.gemini_api_key
        api_key = secret.get_secret_value() if secret is not None else ""
        if not api_key:
            raise ConfigurationError(MISSING_API_KEY_MESSAGE)
        return api_key

    @staticmethod
    def validate_payload(payload: Any) -> DreamInput:
        """Coerce the untyped request body into a non-empty DreamInput."""

        if not isinstance(payload, dict):
            payload = {}

        try:
            dream = DreamInput.model_validate(payload)
        except ValidationError as exc:
            fields = sorted({str(error["loc"][0]) for error in exc.errors() if error["loc"]})
            raise InputValidationError(
                f"꿈 정보 형식이 올바르지 않습니다: {', '.join(fields)}"
            ) from exc

        if dream.is_empty():
            raise InputValidationError(EMPTY_DREAM_MESSAGE)
        return dream

    async def analyze(self, payload: Any) -> AnalysisResult:
        api_key = self._require_api_key()
        dream = self.validate_payload(payload)

        prompt = build_prompt(dream)
        logger.info(
            "dream_prompt_built",
            has_story=bool(dream.story),
            has_symbols=bool(dream.symbols),
            has_emotion=bool(dream.emotion),
            prompt_chars=len(prompt),
        )

        raw_text = await self._client.generate(prompt, api_key)
        result = parse_response(raw_text)

        logger.info(
            "dream_analysis_completed",
            psychology_chars=len(result.psychology),
            prophecy_chars=len(result.prophecy),
        )
        return result
