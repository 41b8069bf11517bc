"""
Health Routes - System health and status endpoints.
"""

from typing import Any

from fastapi import APIRouter

from dotocr import __version__

router = APIRouter()


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "service": "dotocr"}


@router.get("/api")
async def api_info() -> dict[str, Any]:
    """API info endpoint."""
    return {
        "name": "DotOCR API",
        "version": __version__,
        "description": "Image text extraction backed by Google Gemini",
        "docs": "/docs",
    }
