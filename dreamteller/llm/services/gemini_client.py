"""Gemini generateContent client."""

from __future__ import annotations

from typing import Any

import httpx

from ...core.config import DreamSettings
from ...core.exceptions import ExternalServiceError, RateLimitExceeded
from ...core.http_client import async_http_client
from ...core.logging_config import get_logger

logger = get_logger(__name__)

GENERATION_CONFIG: dict[str, Any] = {
    "temperature": 0.9,
    "topK": 40,
    "topP": 0.95,
    "maxOutputTokens": 8192,
}

TRANSPORT_EXCEPTIONS: tuple[type[Exception], ...] = (
    httpx.TimeoutException,
    httpx.TransportError,
)


def _mask(secret: str) -> str:
    if len(secret) <= 8:
        return "***"
    return f"{secret[:4]}***{secret[-4:]}"


def _upstream_error_detail(response: httpx.Response) -> str:
    """Prefer the upstream ``error.message``; fall back to the status code."""

    try:
        payload = response.json()
    except ValueError:
        return str(response.status_code)

    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return str(response.status_code)


def extract_text(payload: Any) -> str | None:
    """Return ``candidates[0].content.parts[0].text`` when present."""

    try:
        text = payload["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) else None


class GeminiClient:
    """Single-shot wrapper around the Gemini REST ``generateContent`` call."""

    def __init__(
        self,
        settings: DreamSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = str(settings.gemini_api_base).rstrip("/")
        self._model = settings.gemini_model
        self._timeout = settings.gemini_timeout_seconds
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return f"/models/{self._model}:generateContent"

    async def generate(self, prompt: str, api_key: str) -> str:
        """Send ``prompt`` upstream and return the first candidate's text."""

        body = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": GENERATION_CONFIG,
        }
        logger.info(
            "gemini_request_sent",
            model=self._model,
            prompt_chars=len(prompt),
            api_key_masked=_mask(api_key),
        )

        try:
            async with async_http_client(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    self.endpoint,
                    params={"key": api_key},
                    json=body,
                    headers={"Content-Type": "application/json"},
                )
        except TRANSPORT_EXCEPTIONS as exc:
            logger.error(
                "gemini_transport_error",
                error_type=type(exc).__name__,
                message=str(exc),
            )
            raise ExternalServiceError(f"Gemini API 요청 실패: {exc}") from exc

        if response.is_error:
            detail = _upstream_error_detail(response)
            logger.error(
                "gemini_http_error",
                status_code=response.status_code,
                detail=detail,
            )
            message = f"Gemini API 오류: {detail}"
            if response.status_code == httpx.codes.TOO_MANY_REQUESTS:
                raise RateLimitExceeded(message)
            raise ExternalServiceError(message)

        try:
            payload = response.json()
        except ValueError as exc:
            raise ExternalServiceError("Gemini API 응답이 비어있습니다.") from exc

        text = extract_text(payload)
        if not text:
            logger.error(
                "gemini_empty_response",
                finish_reason=_finish_reason(payload),
            )
            raise ExternalServiceError("Gemini API 응답이 비어있습니다.")

        logger.info(
            "gemini_response_received",
            status_code=response.status_code,
            response_chars=len(text),
        )
        return text


def _finish_reason(payload: Any) -> str | None:
    try:
        return payload["candidates"][0].get("finishReason")
    except (KeyError, IndexError, TypeError, AttributeError):
        return None
