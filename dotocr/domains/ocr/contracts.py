"""
OCR Contracts - Interfaces for the OCR domain.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from dotocr.adapters.gemini.models import GenerateContentRequest, GenerateResult


@runtime_checkable
class TextExtractor(Protocol):
    """
    Contract for image text extraction implementations.

    Example:
        >>> class MyExtractor:
        ...     async def extract_text(self, image_bytes: bytes, mime_type: str) -> str:
        ...         ...
        >>> assert isinstance(MyExtractor(), TextExtractor)
    """

    async def extract_text(self, image_bytes: bytes | None, mime_type: str | None) -> str:
        """
        Extract text from an image.

        Args:
            image_bytes: Raw image data
            mime_type: Image MIME type (e.g. "image/png")

        Returns:
            Extracted text, or "" when nothing was found or the call failed
        """
        ...


@runtime_checkable
class ContentGenerator(Protocol):
    """Contract for the transport that performs one generateContent call."""

    async def generate_content(self, request: GenerateContentRequest) -> GenerateResult:
        ...
