"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from ...core.config import DreamSettings, get_settings

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/")
async def health_check(settings: DreamSettings = Depends(get_settings)) -> dict[str, str | bool]:
    return {
        "status": "ok",
        "model": settings.gemini_model,
        "api_key_configured": settings.gemini_api_key is not None,
        "timestamp": datetime.now(tz=timezone.utc).isoformat(),
    }
