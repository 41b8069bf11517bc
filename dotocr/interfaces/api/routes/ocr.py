"""
OCR Routes - Image upload to plain-text extraction.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import PlainTextResponse

from dotocr.config.errors import ErrorCode, InvalidUploadError
from dotocr.domains.ocr import TextExtractor

from ..deps import get_text_extractor

logger = logging.getLogger(__name__)

router = APIRouter()

NO_TEXT_MESSAGE = "No text found in the image."
FAILURE_MESSAGE = "An error occurred during text extraction."


@router.post(
    "/extract-text",
    response_class=PlainTextResponse,
    responses={
        200: {"content": {"text/plain": {}}, "description": "Extracted text"},
        400: {"description": "Missing, empty or non-image upload"},
        500: {"description": "Text extraction failed"},
    },
)
async def extract_text(
    file: UploadFile | None = File(None, description="Image file to process"),
    extractor: TextExtractor = Depends(get_text_extractor),
) -> PlainTextResponse:
    """
    Extract text from an uploaded image.

    Upload an image (JPEG, PNG, WebP, HEIC, ...) as multipart form field
    `file` and receive the extracted text as plain text.
    """
    image_data = await file.read() if file is not None else b""
    if not image_data:
        raise InvalidUploadError("No file uploaded or file is empty.")

    content_type = file.content_type or ""
    if not content_type.startswith("image/"):
        raise InvalidUploadError(
            "Unsupported file type. Please upload an image (e.g., JPEG, PNG).",
            details={"content_type": content_type},
            code=ErrorCode.OCR_UNSUPPORTED_MEDIA_TYPE,
        )

    logger.info(
        "Received image file: %s, size=%d bytes, type=%s",
        file.filename,
        len(image_data),
        content_type,
    )

    try:
        text = await extractor.extract_text(image_data, content_type)
    except Exception:
        logger.exception("An error occurred while processing the image for text extraction.")
        return PlainTextResponse(FAILURE_MESSAGE, status_code=500)

    if not text:
        logger.info("Text extraction completed, but no text was found for file: %s", file.filename)
        return PlainTextResponse(NO_TEXT_MESSAGE)

    logger.info("Text successfully extracted from file: %s", file.filename)
    return PlainTextResponse(text)
