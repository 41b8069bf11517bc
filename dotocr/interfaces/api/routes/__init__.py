"""
API Routes.
"""

from . import health, ocr

__all__ = ["health", "ocr"]
