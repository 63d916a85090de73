"""Service layer exports."""

from .dream_analyzer import DreamAnalyzer
from .gemini_client import GeminiClient
from .prompt_builder import build_prompt
from .response_parser import parse_response

__all__ = [
    "build_prompt",
    "DreamAnalyzer",
    "GeminiClient",
    "parse_response",
]
