"""
Gemini Models - Request/Response types for the generateContent REST API.

Wire field names are camelCase; Python attributes are snake_case.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_INSTRUCTION = "Extract all text from this image."


class GeminiConfig(BaseModel):
    """Configuration for Gemini client."""

    model: str = Field(default="gemini-2.0-flash")
    base_url: str = Field(default="https://generativelanguage.googleapis.com")
    api_version: str = Field(default="v1beta")

    model_config = {"frozen": True}


# --- Request ---


class InlineData(BaseModel):
    """Base64-encoded binary payload with its MIME type."""

    mime_type: str = Field(alias="mimeType")
    data: str

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class RequestPart(BaseModel):
    """A request part: either instruction text or inline data."""

    text: str | None = None
    inline_data: InlineData | None = Field(default=None, alias="inlineData")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class RequestContent(BaseModel):
    """A content block in the request."""

    role: str = "user"
    parts: list[RequestPart] = Field(default_factory=list)

    model_config = {"frozen": True}


class GenerateContentRequest(BaseModel):
    """Request payload for models/{model}:generateContent."""

    contents: list[RequestContent]

    model_config = {"frozen": True}

    @classmethod
    def for_image(
        cls,
        mime_type: str,
        data: str,
        instruction: str = DEFAULT_INSTRUCTION,
    ) -> GenerateContentRequest:
        """
        Build a single-content request ordered [instruction, image].

        Args:
            mime_type: Image MIME type (e.g. "image/png")
            data: Base64-encoded image bytes
            instruction: Text prompt sent ahead of the image

        Returns:
            Request with exactly one content block
        """
        return cls(
            contents=[
                RequestContent(
                    parts=[
                        RequestPart(text=instruction),
                        RequestPart(inline_data=InlineData(mime_type=mime_type, data=data)),
                    ]
                )
            ]
        )

    def to_payload(self) -> dict:
        """Serialize with wire aliases, dropping unset parts."""
        return self.model_dump(by_alias=True, exclude_none=True)


# --- Response ---


class ResponsePart(BaseModel):
    """A generated part; only text is consumed."""

    text: str | None = None

    model_config = ConfigDict(extra="ignore")


class ResponseContent(BaseModel):
    parts: list[ResponsePart] | None = None

    model_config = ConfigDict(extra="ignore")


class Candidate(BaseModel):
    content: ResponseContent | None = None

    model_config = ConfigDict(extra="ignore")


class GenerateContentResponse(BaseModel):
    """Response body of generateContent. Every level may be absent."""

    candidates: list[Candidate] | None = None

    model_config = ConfigDict(extra="ignore")

    def first_text(self) -> str:
        """
        Text of the first part of the first candidate.

        Returns:
            The text exactly as sent, or "" when any link in
            candidates[0].content.parts[0].text is missing or blank.
        """
        if not self.candidates:
            return ""
        content = self.candidates[0].content
        if content is None or not content.parts:
            return ""
        text = content.parts[0].text
        if text is None or not text.strip():
            return ""
        return text


# --- Call result ---


class FailureKind(str, Enum):
    """Why a text extraction produced no result."""

    INPUT = "input"
    TRANSPORT = "transport"
    DECODE = "decode"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class GenerateResult:
    """Outcome of one generateContent call: a response or a tagged failure."""

    response: GenerateContentResponse | None = None
    failure: FailureKind | None = None
    status_code: int | None = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.failure is None and self.response is not None

    @classmethod
    def success(
        cls, response: GenerateContentResponse, status_code: int | None = None
    ) -> GenerateResult:
        return cls(response=response, status_code=status_code)

    @classmethod
    def failed(
        cls,
        kind: FailureKind,
        detail: str,
        status_code: int | None = None,
    ) -> GenerateResult:
        return cls(failure=kind, status_code=status_code, detail=detail)
