"""Turn the model's free-form reply into an AnalysisResult.

The model is asked for a bare JSON object but does not always comply, so the
reply goes through a fixed ladder of attempts:

1. the interior of a ```json fenced block, else
2. the span from the first ``{`` to the last ``}``, else
3. the raw text itself,

is decoded as JSON. When decoding fails the raw text is split at the heading of
the prophetic section, and when that heading is missing the whole reply becomes
the psychological part. ``parse_response`` never raises.
"""

from __future__ import annotations

import json
import re
from typing import Any

from ...core.logging_config import get_logger
from ..schemas.dream import AnalysisResult

logger = get_logger(__name__)

UNSPLITTABLE_PROPHECY = "예언적 해석을 분리할 수 없습니다."

_FENCED_JSON = re.compile(r"```json\s*(.*?)\s*```", re.DOTALL)
_BRACE_SPAN = re.compile(r"\{.*\}", re.DOTALL)
_PROPHECY_MARKER = re.compile(r"제2해석|미래의 속삭임", re.IGNORECASE)


def extract_json_candidate(raw: str) -> str:
    """Return the substring of ``raw`` most likely to hold the JSON reply."""

    fenced = _FENCED_JSON.search(raw)
    if fenced:
        return fenced.group(1)

    braces = _BRACE_SPAN.search(raw)
    if braces:
        return braces.group(0)

    return raw


def _reject_constant(name: str) -> Any:
    # NaN and the infinities are not JSON and cannot be rendered back out.
    raise ValueError(f"Non-standard JSON constant: {name}")


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def _from_payload(payload: dict[str, Any]) -> AnalysisResult:
    return AnalysisResult.model_validate(
        {
            **payload,
            "psychology": _as_text(payload.get("psychology")),
            "prophecy": _as_text(payload.get("prophecy")),
        }
    )


def split_by_marker(raw: str) -> AnalysisResult:
    """Split a prose reply at the prophetic heading, or give up gracefully."""

    match = _PROPHECY_MARKER.search(raw)
    if match and match.start() > 0:
        index = match.start()
        return AnalysisResult(
            psychology=raw[:index].strip(),
            prophecy=raw[index:].strip(),
        )

    logger.warning("response_parse_unsplittable", length=len(raw))
    return AnalysisResult(psychology=raw, prophecy=UNSPLITTABLE_PROPHECY)


def parse_response(raw: str) -> AnalysisResult:
    """Parse the raw model output into the two interpretation fields."""

    candidate = extract_json_candidate(raw)
    try:
        payload = json.loads(candidate, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        logger.info("response_parse_fallback", reason="invalid_json", error=str(exc))
        return split_by_marker(raw)

    if not isinstance(payload, dict):
        logger.info(
            "response_parse_fallback",
            reason="not_an_object",
            decoded_type=type(payload).__name__,
        )
        return split_by_marker(raw)

    return _from_payload(payload)
