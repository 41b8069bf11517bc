"""
API Dependencies - Dependency injection for FastAPI routes.

Provides singleton instances of the Gemini client and text extractor.
"""

from __future__ import annotations

from functools import lru_cache

from dotocr.adapters.gemini import GeminiClient, GeminiConfig
from dotocr.config import get_settings
from dotocr.domains.ocr import GeminiTextExtractor, TextExtractor


@lru_cache
def get_gemini_client() -> GeminiClient:
    """
    Get Gemini client singleton.

    Raises:
        ConfigurationError: GEMINI_API_KEY is not configured
    """
    settings = get_settings()
    config = GeminiConfig(
        model=settings.gemini_model,
        base_url=settings.gemini_base_url,
    )
    return GeminiClient(api_key=settings.require_api_key(), config=config)


@lru_cache
def get_text_extractor() -> TextExtractor:
    """Get text extractor singleton."""
    return GeminiTextExtractor(get_gemini_client())


async def init_services() -> None:
    """
    Initialize services on startup.

    This should be called from the FastAPI lifespan handler. A missing API
    key raises here so the server refuses to start.
    """
    get_text_extractor()


async def cleanup_services() -> None:
    """Cleanup services on shutdown."""
    if get_gemini_client.cache_info().currsize:
        await get_gemini_client().close()
    get_text_extractor.cache_clear()
    get_gemini_client.cache_clear()
