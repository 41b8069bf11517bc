"""
Gemini Adapter - Google Gemini generateContent REST client.

This is the ONLY place that calls the Gemini API.
"""

from .client import API_KEY_HEADER, GeminiClient
from .models import (
    FailureKind,
    GeminiConfig,
    GenerateContentRequest,
    GenerateContentResponse,
    GenerateResult,
)

__all__ = [
    "API_KEY_HEADER",
    "GeminiClient",
    "GeminiConfig",
    "GenerateContentRequest",
    "GenerateContentResponse",
    "GenerateResult",
    "FailureKind",
]
