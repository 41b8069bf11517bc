"""
API Interface - FastAPI REST API.

Run with: uvicorn dotocr.interfaces.api:create_app --factory
"""

from .main import create_app

__all__ = ["create_app"]
