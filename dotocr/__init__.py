"""
DotOCR - Image text extraction backed by Google Gemini.

Example:
    >>> from dotocr.adapters.gemini import GeminiClient
    >>> from dotocr.domains.ocr import GeminiTextExtractor
    >>> extractor = GeminiTextExtractor(GeminiClient(api_key="..."))
    >>> text = await extractor.extract_text(image_bytes, "image/png")
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
