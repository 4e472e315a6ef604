"""Errors raised while talking to the remote API."""

from __future__ import annotations


class ApiError(Exception):
    """Base class of every API error."""


class _DetailedApiError(ApiError):
    """An API error that carries a free-form detail message."""

    _template = "{}"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(self._template.format(detail))


class ClientCreationError(_DetailedApiError):
    """The HTTP client could not be built."""

    _template = "Failed to create API client: {}"


class RequestError(_DetailedApiError):
    """Sending the request failed."""

    _template = "Request error: {}"


class ResponseParseError(_DetailedApiError):
    """The response body could not be decoded."""

    _template = "Failed to parse API response: {}"


class ResourceNotFound(ApiError):
    """HTTP 404."""

    def __init__(self) -> None:
        super().__init__("Resource not found")


class Unauthorized(ApiError):
    """HTTP 401."""

    def __init__(self) -> None:
        super().__init__("Authentication required")


class Forbidden(ApiError):
    """HTTP 403."""

    def __init__(self) -> None:
        super().__init__("Access forbidden")


class RateLimitExceeded(ApiError):
    """HTTP 429."""

    def __init__(self) -> None:
        super().__init__("API rate limit exceeded")


class ServerError(ApiError):
    """Any other unsuccessful status, with the response text."""

    def __init__(self, status: int, message: str) -> None:
        self.status = status
        self.message = message
        super().__init__(f"Server error {status}: {message}")


class UnsupportedMethod(ApiError):
    """The request uses a method the client cannot send."""

    def __init__(self) -> None:
        super().__init__("Unsupported HTTP method")


class MaxRetriesExceeded(ApiError):
    """All retry attempts were used up."""

    def __init__(self) -> None:
        super().__init__("Maximum retry count exceeded")


class NetworkError(_DetailedApiError):
    """A network-level failure."""

    _template = "Network error: {}"


class RequestTimeout(ApiError):
    """The request took longer than the configured timeout."""

    def __init__(self) -> None:
        super().__init__("Request timed out")


class ConnectionFailed(_DetailedApiError):
    """The server could not be reached."""

    _template = "Failed to connect: {}"


class UnknownApiError(_DetailedApiError):
    """An error that fits no other category."""

    _template = "Unknown error: {}"