"""Configuration management for the Dreamteller service."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import AnyHttpUrl, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

_REPO_ROOT = Path(__file__).resolve().parents[2]
_PACKAGE_DIR = Path(__file__).resolve().parents[1]
# Repo-root .env first, then the package directory and the working directory.
_ENV_FILE_CANDIDATES: tuple[str, ...] = (
    str(_REPO_ROOT / ".env"),
    str(_PACKAGE_DIR / ".env"),
    ".env",
)


class DreamSettings(BaseSettings):
    """Centralised configuration derived from environment variables."""

    app_env: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_file: str | None = Field(
        None,
        description="Optional log file path; stdout only when unset",
    )

    server_host: str = Field("0.0.0.0", description="uvicorn bind host")
    server_port: int = Field(8000, description="uvicorn bind port")

    # Optional at startup: a missing key fails each request, not the process.
    gemini_api_key: SecretStr | None = Field(None, description="Gemini API key")
    gemini_api_base: AnyHttpUrl = Field(
        "https://generativelanguage.googleapis.com/v1beta",
        description="Gemini REST endpoint",
    )
    gemini_model: str = Field("gemini-2.5-pro", description="Gemini model id")
    gemini_timeout_seconds: float | None = Field(
        None,
        description="Client-side deadline for the Gemini call; None disables it",
    )

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE_CANDIDATES,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> DreamSettings:
    """Return a cached DreamSettings instance."""

    return DreamSettings()


def resolved_env_file() -> str | None:
    """Return the first readable .env file from the candidate list."""

    for candidate in _ENV_FILE_CANDIDATES:
        path = Path(candidate).expanduser()
        if path.is_file():
            return str(path)
    return None


def env_file_candidates() -> tuple[str, ...]:
    """Expose configured env file search order for diagnostics."""

    return _ENV_FILE_CANDIDATES
