"""
Gemini Client - REST client for the Gemini generateContent endpoint.

Authentication:
- Static API key sent in the x-goog-api-key header
- The key is never placed in the URL or written to logs

Behavior:
- One POST per call, no retries, transport-default timeout
- Failures come back as a tagged GenerateResult instead of exceptions
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from dotocr.config.errors import ConfigurationError

from .models import (
    FailureKind,
    GeminiConfig,
    GenerateContentRequest,
    GenerateContentResponse,
    GenerateResult,
)

logger = logging.getLogger(__name__)

__all__ = ["GeminiClient", "API_KEY_HEADER"]

API_KEY_HEADER = "x-goog-api-key"

# Cap on the amount of an error body carried into log details
_DETAIL_LIMIT = 500


class GeminiClient:
    """
    Gemini generateContent client using a static API key.

    Example:
        >>> client = GeminiClient(api_key="AIza...")
        >>> request = GenerateContentRequest.for_image("image/png", b64_data)
        >>> result = await client.generate_content(request)
        >>> if result.ok:
        ...     print(result.response.first_text())
    """

    def __init__(
        self,
        api_key: str,
        config: GeminiConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize Gemini client.

        Args:
            api_key: Gemini API key
            config: Client configuration. Uses defaults if None.
            http_client: Shared HTTP client. Created lazily if None and
                then owned (closed) by this client.

        Raises:
            ConfigurationError: api_key is empty
        """
        if not api_key or not api_key.strip():
            raise ConfigurationError("Gemini API key is not configured.")

        self.config = config or GeminiConfig()
        self._api_key = api_key
        self._client = http_client
        self._owns_client = http_client is None

        logger.info("GeminiClient initialized with API URL: %s", self.endpoint)

    @property
    def endpoint(self) -> str:
        """Full generateContent URL for the configured model."""
        base = self.config.base_url.rstrip("/")
        return f"{base}/{self.config.api_version}/models/{self.config.model}:generateContent"

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient()
            self._owns_client = True
        return self._client

    async def generate_content(self, request: GenerateContentRequest) -> GenerateResult:
        """
        Send a generateContent request.

        Args:
            request: Request payload

        Returns:
            GenerateResult with the parsed response, or a TRANSPORT/DECODE failure
        """
        client = await self._get_client()

        try:
            response = await client.post(
                self.endpoint,
                json=request.to_payload(),
                headers={API_KEY_HEADER: self._api_key},
            )
        except httpx.HTTPError as e:
            return GenerateResult.failed(
                FailureKind.TRANSPORT, f"{type(e).__name__}: {e}"
            )

        if not response.is_success:
            return GenerateResult.failed(
                FailureKind.TRANSPORT,
                response.text[:_DETAIL_LIMIT],
                status_code=response.status_code,
            )

        try:
            parsed = GenerateContentResponse.model_validate_json(response.content)
        except ValidationError as e:
            return GenerateResult.failed(
                FailureKind.DECODE,
                f"{e.error_count()} validation error(s): {e.errors()[0]['msg']}",
                status_code=response.status_code,
            )

        logger.debug("generateContent returned status=%d", response.status_code)
        return GenerateResult.success(parsed, status_code=response.status_code)

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
        self._client = None
