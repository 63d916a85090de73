"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.config import env_file_candidates, get_settings, resolved_env_file
from ..core.logging_config import configure_logging, get_logger
from .api.analyze import router as analyze_router
from .api.health import router as health_router

configure_logging()
logger = get_logger(__name__)

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI lifespan handler."""

    settings = get_settings()
    logger.info(
        "dreamteller_startup",
        env=settings.app_env,
        log_level=settings.log_level,
        gemini_base=str(settings.gemini_api_base),
        gemini_model=settings.gemini_model,
        api_key_configured=settings.gemini_api_key is not None,
    )
    logger.info(
        "environment_loaded",
        log_file=settings.log_file or "stdout-only",
        env_file=resolved_env_file() or "not-found",
        env_candidates=list(env_file_candidates()),
    )
    yield
    logger.info("dreamteller_shutdown")


app = FastAPI(
    title="Dreamteller",
    version="0.1.0",
    description="Two-part dream interpretation backed by Gemini.",
    lifespan=lifespan,
)


@app.middleware("http")
async def cors_and_request_logging(request: Request, call_next):
    logger.info(
        "http_request_received",
        method=request.method,
        path=request.url.path,
        client=str(request.client[0]) if request.client else "unknown",
    )
    # Preflight never reaches the routers.
    if request.method == "OPTIONS":
        response = Response(status_code=200)
    else:
        response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    logger.info(
        "http_request_completed",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
    )
    return response


@app.exception_handler(StarletteHTTPException)
async def http_error_as_json(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 405:
        message = "Method not allowed"
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None),
    )


app.include_router(health_router)
app.include_router(analyze_router)


@app.get("/")
async def index() -> dict[str, str]:
    return {"service": "dreamteller", "status": "ok"}
