"""
Domains - Business logic.

- ocr: Image to text extraction
"""

__all__ = ["ocr"]
