"""
FastAPI Main Application - API entry point.

Run with: uvicorn dotocr.interfaces.api:create_app --factory --reload
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from dotocr import __version__
from dotocr.config import get_settings

from .deps import cleanup_services, init_services
from .middleware import (
    ErrorHandlerMiddleware,
    LatencyMiddleware,
    RequestIDMiddleware,
)
from .routes import health, ocr

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings = get_settings()
    logger.info("Starting DotOCR API...")
    logger.info("  Gemini model: %s", settings.gemini_model)

    # Fails fast when GEMINI_API_KEY is missing
    await init_services()
    logger.info("  Services initialized")

    yield

    logger.info("Shutting down DotOCR API...")
    await cleanup_services()


def create_app() -> FastAPI:
    """Create FastAPI application."""
    app = FastAPI(
        title="DotOCR API",
        description="Extract text from uploaded images with Google Gemini",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters - first added = innermost)
    # 1. Error handling (catch exceptions from routes)
    app.add_middleware(ErrorHandlerMiddleware)

    # 2. Latency tracking
    app.add_middleware(LatencyMiddleware)

    # 3. Request ID (outermost custom - runs first)
    app.add_middleware(RequestIDMiddleware)

    # Include routers
    app.include_router(health.router, tags=["Health"])
    app.include_router(ocr.router, prefix="/api/ocr", tags=["OCR"])

    return app
