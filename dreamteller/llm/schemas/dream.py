"""Pydantic schemas for the dream analysis endpoint."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DreamInput(BaseModel):
    """User-submitted dream description; every field is optional free text."""

    model_config = ConfigDict(extra="ignore")

    story: str | None = Field(None, description="Overall plot of the dream")
    symbols: str | None = Field(None, description="Symbolic objects that appeared")
    emotion: str | None = Field(None, description="Feelings in the dream and current situation")

    @field_validator("story", "symbols", "emotion", mode="before")
    @classmethod
    def _render_scalars(cls, value: Any) -> Any:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            # Zero counts as not provided, like any other falsy value.
            return str(value) if value else None
        return value

    def is_empty(self) -> bool:
        return not (self.story or self.symbols or self.emotion)


class AnalysisResult(BaseModel):
    """Two-part interpretation returned to the client."""

    # Extra keys decoded from the model's JSON reply are passed through.
    model_config = ConfigDict(extra="allow")

    psychology: str
    prophecy: str


class ErrorResponse(BaseModel):
    error: str
