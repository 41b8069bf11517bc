"""
Gemini Text Extractor - Image OCR via a single Gemini generateContent call.

Every failure path converges on "" plus a log record. Callers cannot tell
"no text" from "call failed" by the return value; only logs carry that.
"""

from __future__ import annotations

import base64
import logging

from dotocr.adapters.gemini.models import (
    DEFAULT_INSTRUCTION,
    FailureKind,
    GenerateContentRequest,
)

from .contracts import ContentGenerator

__all__ = ["GeminiTextExtractor"]


class GeminiTextExtractor:
    """
    Extract text from images using Gemini.

    Stateless between calls and safe to share across concurrent requests.

    Example:
        >>> client = GeminiClient(api_key="AIza...")
        >>> extractor = GeminiTextExtractor(client)
        >>> text = await extractor.extract_text(png_bytes, "image/png")
    """

    def __init__(
        self,
        client: ContentGenerator,
        logger: logging.Logger | None = None,
        instruction: str = DEFAULT_INSTRUCTION,
    ) -> None:
        """
        Initialize extractor.

        Args:
            client: Transport performing the generateContent call
            logger: Log sink. Defaults to this module's logger.
            instruction: Prompt sent ahead of the image
        """
        self.client = client
        self.instruction = instruction
        self._logger = logger if logger is not None else logging.getLogger(__name__)

    async def extract_text(self, image_bytes: bytes | None, mime_type: str | None) -> str:
        """
        Extract all text from an image.

        Args:
            image_bytes: Raw image data
            mime_type: Image MIME type (e.g. "image/jpeg", "image/png")

        Returns:
            The extracted text exactly as returned by the API, or "" if no
            text was found or any step failed.
        """
        if not image_bytes:
            self._log_failure(FailureKind.INPUT, "Attempted to extract text from empty image data.")
            return ""
        if mime_type is None or not mime_type.strip():
            self._log_failure(FailureKind.INPUT, "MIME type not provided for image data.")
            return ""

        try:
            encoded = base64.b64encode(image_bytes).decode("ascii")
            request = GenerateContentRequest.for_image(
                mime_type=mime_type,
                data=encoded,
                instruction=self.instruction,
            )

            self._logger.info(
                "Sending request to Gemini API for text extraction. Image MIME type: %s",
                mime_type,
            )
            result = await self.client.generate_content(request)

            if not result.ok:
                self._log_failure(result.failure, result.detail, result.status_code)
                return ""

            text = result.response.first_text()
            if not text:
                self._logger.info("No text extracted or response was empty from Gemini API.")
                return ""

            self._logger.info("Successfully extracted text from image (%d chars).", len(text))
            return text

        except Exception as e:
            self._log_failure(FailureKind.UNEXPECTED, f"{type(e).__name__}: {e}")
            return ""

    def _log_failure(
        self,
        kind: FailureKind | None,
        detail: str,
        status_code: int | None = None,
    ) -> None:
        """Emit exactly one record for a failed extraction; input problems are warnings."""
        if kind == FailureKind.INPUT:
            self._logger.warning(detail)
        elif kind == FailureKind.TRANSPORT:
            self._logger.error(
                "HTTP request error calling Gemini API: status=%s detail=%s",
                status_code,
                detail,
            )
        elif kind == FailureKind.DECODE:
            self._logger.error(
                "JSON deserialization error from Gemini API response: %s", detail
            )
        else:
            self._logger.exception(
                "An unexpected error occurred during text extraction: %s", detail
            )
