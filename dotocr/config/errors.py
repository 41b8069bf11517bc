"""
Error Taxonomy - Consistent error codes across the application.

The text extractor itself never raises; these errors cover the layers
around it (startup configuration and the HTTP upload surface).

Usage:
    from dotocr.config.errors import ErrorCode, DotOcrError

    raise DotOcrError(ErrorCode.OCR_INVALID_UPLOAD, "File is empty")
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Standardized error codes for machine-readable error responses."""

    # OCR errors
    OCR_INVALID_UPLOAD = "OCR_INVALID_UPLOAD"
    OCR_UNSUPPORTED_MEDIA_TYPE = "OCR_UNSUPPORTED_MEDIA_TYPE"

    # Configuration errors
    CONFIG_MISSING_API_KEY = "CONFIG_MISSING_API_KEY"

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DotOcrError(Exception):
    """Base exception with error code support."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(f"[{code.value}] {message}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to API-friendly dictionary."""
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(DotOcrError):
    """Required configuration is missing or invalid."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.CONFIG_MISSING_API_KEY, message, details)


class InvalidUploadError(DotOcrError):
    """Uploaded payload cannot be processed."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        code: ErrorCode = ErrorCode.OCR_INVALID_UPLOAD,
    ) -> None:
        super().__init__(code, message, details)
