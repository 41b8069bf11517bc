"""
Configuration - Application settings and error taxonomy.
"""

from .errors import (
    ConfigurationError,
    DotOcrError,
    ErrorCode,
    InvalidUploadError,
)
from .settings import Settings, get_settings

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Errors
    "ErrorCode",
    "DotOcrError",
    "ConfigurationError",
    "InvalidUploadError",
]
