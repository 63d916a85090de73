"""Dream analysis endpoint."""

import json
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ...core.config import DreamSettings, get_settings
from ...core.exceptions import InputValidationError
from ...core.logging_config import get_logger
from ..schemas.dream import AnalysisResult, ErrorResponse
from ..services.dream_analyzer import DreamAnalyzer

router = APIRouter(prefix="/api", tags=["analyze"])
logger = get_logger(__name__)


def get_dream_analyzer(settings: DreamSettings = Depends(get_settings)) -> DreamAnalyzer:
    return DreamAnalyzer(settings)


async def _read_payload(request: Request) -> Any:
    """Decode the body; anything that is not JSON counts as an empty payload."""

    body = await request.body()
    if not body:
        return {}
    try:
        return json.loads(body)
    except ValueError:
        logger.info("dream_request_body_not_json", body_bytes=len(body))
        return {}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


@router.post(
    "/analyze",
    response_model=AnalysisResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze_dream(
    request: Request,
    analyzer: DreamAnalyzer = Depends(get_dream_analyzer),
) -> JSONResponse:
    logger.info("dream_analysis_requested")
    payload = await _read_payload(request)

    try:
        result = await analyzer.analyze(payload)
        return JSONResponse(status_code=200, content=result.model_dump())
    except InputValidationError as exc:
        logger.info("dream_analysis_rejected", reason=str(exc))
        return _error(400, str(exc))
    except Exception as exc:
        logger.exception("dream_analysis_failed", error_type=type(exc).__name__)
        return _error(500, str(exc))
