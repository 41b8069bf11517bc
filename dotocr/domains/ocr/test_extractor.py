"""
Tests for the OCR domain extractor.
"""

from __future__ import annotations

import asyncio
import base64
import json
import logging
from collections.abc import Callable
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from dotocr.adapters.gemini import GeminiClient
from dotocr.adapters.gemini.models import FailureKind, GenerateResult

from .contracts import ContentGenerator, TextExtractor
from .extractor import GeminiTextExtractor

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image-data"


class NetworkSpy:
    """MockTransport handler that records every request it receives."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]) -> None:
        self.responder = responder
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)


def _text_body(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def _error_records(caplog: pytest.LogCaptureFixture) -> list[logging.LogRecord]:
    return [r for r in caplog.records if r.levelno == logging.ERROR]


@pytest.fixture
def make_extractor() -> Callable[..., tuple[GeminiTextExtractor, NetworkSpy]]:
    """Build an extractor whose HTTP traffic goes to a recording spy."""

    def _make(
        responder: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json=_text_body("Hello"))
        ),
    ) -> tuple[GeminiTextExtractor, NetworkSpy]:
        spy = NetworkSpy(responder)
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(spy))
        client = GeminiClient(api_key="test-key", http_client=http_client)
        return GeminiTextExtractor(client), spy

    return _make


# --- Contract Tests ---


def test_extractor_satisfies_contract(make_extractor) -> None:
    """Test GeminiTextExtractor implements TextExtractor."""
    extractor, _ = make_extractor()
    assert isinstance(extractor, TextExtractor)


def test_client_satisfies_transport_contract() -> None:
    """Test GeminiClient implements ContentGenerator."""
    assert isinstance(GeminiClient(api_key="k"), ContentGenerator)


# --- Input Guard Tests ---


@pytest.mark.parametrize("image_bytes", [b"", None])
async def test_empty_image_skips_network(
    make_extractor, caplog: pytest.LogCaptureFixture, image_bytes: bytes | None
) -> None:
    """Test empty or missing image bytes return "" without a network call."""
    extractor, spy = make_extractor()

    with caplog.at_level(logging.WARNING):
        result = await extractor.extract_text(image_bytes, "image/png")

    assert result == ""
    assert spy.requests == []
    assert any(r.levelno == logging.WARNING for r in caplog.records)


@pytest.mark.parametrize("mime_type", ["", "   ", None])
async def test_blank_mime_type_skips_network(
    make_extractor, caplog: pytest.LogCaptureFixture, mime_type: str | None
) -> None:
    """Test blank or missing MIME type returns "" without a network call."""
    extractor, spy = make_extractor()

    with caplog.at_level(logging.WARNING):
        result = await extractor.extract_text(PNG_BYTES, mime_type)

    assert result == ""
    assert spy.requests == []
    assert any("MIME type" in r.getMessage() for r in caplog.records)


# --- Success Path Tests ---


async def test_extract_text_success(make_extractor) -> None:
    """Test the first candidate's text is returned exactly."""
    extractor, spy = make_extractor()

    result = await extractor.extract_text(PNG_BYTES, "image/png")

    assert result == "Hello"
    assert len(spy.requests) == 1


async def test_extract_text_request_body(make_extractor) -> None:
    """Test the outbound body carries the instruction then the encoded image."""
    extractor, spy = make_extractor()

    await extractor.extract_text(PNG_BYTES, "image/jpeg")

    body = json.loads(spy.requests[0].content)
    assert len(body["contents"]) == 1
    parts = body["contents"][0]["parts"]
    assert parts[0] == {"text": "Extract all text from this image."}
    assert parts[1]["inlineData"]["mimeType"] == "image/jpeg"
    assert base64.b64decode(parts[1]["inlineData"]["data"]) == PNG_BYTES
    assert spy.requests[0].headers["x-goog-api-key"] == "test-key"


async def test_extract_text_not_trimmed(make_extractor) -> None:
    """Test surrounding whitespace in the API text is preserved."""
    extractor, _ = make_extractor(
        lambda request: httpx.Response(200, json=_text_body("  Line 1\nLine 2\n"))
    )

    result = await extractor.extract_text(PNG_BYTES, "image/png")

    assert result == "  Line 1\nLine 2\n"


async def test_extract_text_empty_candidates(make_extractor) -> None:
    """Test an empty candidate list yields ""."""
    extractor, spy = make_extractor(
        lambda request: httpx.Response(200, json={"candidates": []})
    )

    result = await extractor.extract_text(PNG_BYTES, "image/png")

    assert result == ""
    assert len(spy.requests) == 1


async def test_extract_text_blank_text(make_extractor) -> None:
    """Test whitespace-only text is treated as no text."""
    extractor, _ = make_extractor(
        lambda request: httpx.Response(200, json=_text_body(" \n "))
    )

    assert await extractor.extract_text(PNG_BYTES, "image/png") == ""


# --- Failure Path Tests ---


async def test_extract_text_http_500(
    make_extractor, caplog: pytest.LogCaptureFixture
) -> None:
    """Test an HTTP 500 yields "" and exactly one error record."""
    extractor, _ = make_extractor(
        lambda request: httpx.Response(500, json={"error": {"code": 500}})
    )

    with caplog.at_level(logging.INFO):
        result = await extractor.extract_text(PNG_BYTES, "image/png")

    assert result == ""
    errors = _error_records(caplog)
    assert len(errors) == 1
    assert "status=500" in errors[0].getMessage()


async def test_extract_text_non_json(
    make_extractor, caplog: pytest.LogCaptureFixture
) -> None:
    """Test a non-JSON body yields "" and exactly one error record."""
    extractor, _ = make_extractor(
        lambda request: httpx.Response(200, text="definitely not json")
    )

    with caplog.at_level(logging.INFO):
        result = await extractor.extract_text(PNG_BYTES, "image/png")

    assert result == ""
    errors = _error_records(caplog)
    assert len(errors) == 1
    assert "JSON" in errors[0].getMessage()


async def test_extract_text_network_failure(
    make_extractor, caplog: pytest.LogCaptureFixture
) -> None:
    """Test a connection failure yields "" and one error record."""

    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    extractor, _ = make_extractor(refuse)

    with caplog.at_level(logging.INFO):
        result = await extractor.extract_text(PNG_BYTES, "image/png")

    assert result == ""
    assert len(_error_records(caplog)) == 1


async def test_extract_text_unexpected_error(caplog: pytest.LogCaptureFixture) -> None:
    """Test an unexpected transport exception never escapes."""
    client = AsyncMock()
    client.generate_content.side_effect = RuntimeError("kaboom")
    extractor = GeminiTextExtractor(client)

    with caplog.at_level(logging.INFO):
        result = await extractor.extract_text(PNG_BYTES, "image/png")

    assert result == ""
    errors = _error_records(caplog)
    assert len(errors) == 1
    assert errors[0].exc_info is not None


async def test_extract_text_transport_failures_logged_once(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Test each failure kind the transport reports maps to one error record."""
    client = AsyncMock()
    extractor = GeminiTextExtractor(client)

    for kind in (FailureKind.TRANSPORT, FailureKind.DECODE):
        caplog.clear()
        client.generate_content.return_value = GenerateResult.failed(kind, "detail")
        with caplog.at_level(logging.INFO):
            assert await extractor.extract_text(PNG_BYTES, "image/png") == ""
        assert len(_error_records(caplog)) == 1


async def test_input_failure_logs_single_warning(caplog: pytest.LogCaptureFixture) -> None:
    """Test rejected input yields one warning and no error records."""
    client = AsyncMock()
    extractor = GeminiTextExtractor(client)

    with caplog.at_level(logging.INFO):
        assert await extractor.extract_text(PNG_BYTES, " ") == ""

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert _error_records(caplog) == []
    client.generate_content.assert_not_called()


async def test_unexpected_failure_routed_through_failure_logger() -> None:
    """Test the catch-all logs the UNEXPECTED kind with the exception detail."""
    client = AsyncMock()
    client.generate_content.side_effect = ValueError("bad state")
    extractor = GeminiTextExtractor(client)

    with patch.object(extractor, "_log_failure") as log_failure:
        assert await extractor.extract_text(PNG_BYTES, "image/png") == ""

    log_failure.assert_called_once_with(FailureKind.UNEXPECTED, "ValueError: bad state")


# --- Collaborator Tests ---


async def test_custom_logger_receives_records() -> None:
    """Test an injected logger is used as the log sink."""
    sink = MagicMock(spec=logging.Logger)
    client = AsyncMock()
    extractor = GeminiTextExtractor(client, logger=sink)

    await extractor.extract_text(b"", "image/png")

    sink.warning.assert_called_once()
    client.generate_content.assert_not_called()


async def test_custom_instruction_is_sent(make_extractor) -> None:
    """Test a custom instruction replaces the default prompt."""
    extractor, spy = make_extractor()
    extractor.instruction = "Transcribe the handwriting."

    await extractor.extract_text(PNG_BYTES, "image/png")

    body = json.loads(spy.requests[0].content)
    assert body["contents"][0]["parts"][0] == {"text": "Transcribe the handwriting."}


# --- Statelessness Tests ---


async def test_extract_text_idempotent(make_extractor) -> None:
    """Test identical inputs against a deterministic transport give identical results."""
    extractor, spy = make_extractor()

    first = await extractor.extract_text(PNG_BYTES, "image/png")
    second = await extractor.extract_text(PNG_BYTES, "image/png")

    assert first == second == "Hello"
    assert len(spy.requests) == 2
    assert spy.requests[0].content == spy.requests[1].content


async def test_extract_text_concurrent_calls_independent(make_extractor) -> None:
    """Test concurrent calls each get their own response."""

    def echo_mime(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        mime = body["contents"][0]["parts"][1]["inlineData"]["mimeType"]
        return httpx.Response(200, json=_text_body(f"text for {mime}"))

    extractor, spy = make_extractor(echo_mime)
    mime_types = ["image/png", "image/jpeg", "image/webp", "image/heic"]

    results = await asyncio.gather(
        *(extractor.extract_text(PNG_BYTES, mime) for mime in mime_types)
    )

    assert results == [f"text for {mime}" for mime in mime_types]
    assert len(spy.requests) == len(mime_types)
