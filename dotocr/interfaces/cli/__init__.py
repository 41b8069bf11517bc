"""
CLI Interface - Command-line tools for DotOCR.

Provides commands for:
- Extracting text from a local image
- Running the API server
"""

from .main import app, main

__all__ = ["app", "main"]
