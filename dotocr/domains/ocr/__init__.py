"""
OCR Domain - Image to text extraction.

This domain handles:
- Validating image input (bytes + MIME type)
- Building the Gemini request for a single image
- Unwrapping the first generated text
"""

from .contracts import TextExtractor
from .extractor import GeminiTextExtractor

__all__ = [
    # Contracts
    "TextExtractor",
    # Implementations
    "GeminiTextExtractor",
]
