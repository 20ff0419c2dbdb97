"""Error types raised by the client."""

from __future__ import annotations


class GeminiError(Exception):
    """Base class for every error raised by the client."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidCredentialError(GeminiError, ValueError):
    """API key or project credentials are empty or malformed."""


class InvalidArgumentError(GeminiError, ValueError):
    """A required call argument is missing."""


class InvalidStateError(GeminiError):
    """An option was toggled before its prerequisite."""


class UnsupportedFeatureError(GeminiError):
    """The request uses a feature the target model does not support."""


class RequestBuildError(GeminiError):
    """The request builder has no prompt and no chat history."""


class TransportError(GeminiError):
    """Sending the request or reading the response body failed."""

    def __init__(self, message: str, request_json: str | None = None):
        super().__init__(message)
        self.request_json = request_json


class UpstreamError(GeminiError):
    """The API answered with a non-success HTTP status."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        status: str | None = None,
        code: int | None = None,
        raw_body: str | None = None,
        request_json: str | None = None,
    ):
        super().__init__(message)
        self.http_status = http_status
        self.status = status
        self.code = code
        self.raw_body = raw_body
        self.request_json = request_json


class ResponseParseError(GeminiError):
    """A response body could not be mapped to a result."""

    def __init__(
        self,
        message: str,
        raw_body: str | None = None,
        request_json: str | None = None,
    ):
        super().__init__(message)
        self.raw_body = raw_body
        self.request_json = request_json
