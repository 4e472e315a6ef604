"""Errors of the business logic and their presentation to users."""

from __future__ import annotations

import logging

from .api_errors import ApiError

logger = logging.getLogger(__name__)


class CoreError(Exception):
    """Base class of every business-logic error."""


class _DetailedCoreError(CoreError):
    """A core error that carries a free-form detail message."""

    _template = "{}"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(self._template.format(detail))


class GeneralError(_DetailedCoreError):
    """A failure with no more specific category."""

    _template = "Core error: {}"


class ValidationFailed(_DetailedCoreError):
    """Input data did not pass validation."""

    _template = "Validation error: {}"


class NotFound(_DetailedCoreError):
    """The requested resource does not exist."""

    _template = "Resource not found: {}"


class AlreadyExists(_DetailedCoreError):
    """The resource exists already."""

    _template = "Resource already exists: {}"


class PermissionDenied(_DetailedCoreError):
    """The caller may not perform the action."""

    _template = "Permission denied: {}"


class ProcessingError(_DetailedCoreError):
    """Processing of data failed."""

    _template = "Processing error: {}"


class ConfigurationError(_DetailedCoreError):
    """The configuration is unusable."""

    _template = "Configuration error: {}"


class ExternalServiceError(_DetailedCoreError):
    """An external service failed or is unavailable."""

    _template = "External service error: {}"


class DatabaseError(_DetailedCoreError):
    """The database reported a failure."""

    _template = "Database error: {}"


class ApiFailure(CoreError):
    """Wraps an :class:`ApiError` raised by the API layer."""

    def __init__(self, error: ApiError) -> None:
        self.error = error
        super().__init__(f"API error: {error}")


_FRIENDLY_MESSAGES: tuple[tuple[type[CoreError], str], ...] = (
    (ValidationFailed, "The provided data is invalid. Please check your input and try again."),
    (NotFound, "The requested resource could not be found."),
    (AlreadyExists, "This resource already exists."),
    (PermissionDenied, "You don't have permission to perform this action."),
    (
        ExternalServiceError,
        "An external service is currently unavailable. Please try again later.",
    ),
)
_FALLBACK_MESSAGE = "An error occurred. Our team has been notified."


class DefaultErrorHandler:
    """Logs errors and turns them into messages fit for end users."""

    def handle_error(self, error: CoreError) -> None:
        """Log ``error``, with extra attention for service and database failures."""
        logger.error("Error occurred: %s", error)
        if isinstance(error, ExternalServiceError):
            logger.warning("External service issue: %s", error.detail)
        elif isinstance(error, DatabaseError):
            logger.error("Database error requires attention: %s", error.detail)

    def user_friendly_message(self, error: CoreError) -> str:
        """A message that reveals no internal detail."""
        for error_type, message in _FRIENDLY_MESSAGES:
            if isinstance(error, error_type):
                return message
        return _FALLBACK_MESSAGE