"""Serverless entry point: the platform serves the ASGI ``app`` at /api/analyze."""

from dreamteller.llm.main import app

__all__ = ["app"]
