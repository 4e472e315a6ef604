import logging

import pytest

from resourcehub.api_errors import ResourceNotFound
from resourcehub.core_errors import (
    AlreadyExists,
    ApiFailure,
    ConfigurationError,
    CoreError,
    DatabaseError,
    DefaultErrorHandler,
    ExternalServiceError,
    GeneralError,
    NotFound,
    PermissionDenied,
    ProcessingError,
    ValidationFailed,
)


@pytest.mark.parametrize(
    "error_type, prefix",
    [
        (GeneralError, "Core error: "),
        (ValidationFailed, "Validation error: "),
        (NotFound, "Resource not found: "),
        (AlreadyExists, "Resource already exists: "),
        (PermissionDenied, "Permission denied: "),
        (ProcessingError, "Processing error: "),
        (ConfigurationError, "Configuration error: "),
        (ExternalServiceError, "External service error: "),
        (DatabaseError, "Database error: "),
    ],
)
def test_messages_carry_prefix_and_detail(error_type, prefix):
    error = error_type("detail-text")
    assert str(error) == prefix + "detail-text"
    assert error.detail == "detail-text"
    assert isinstance(error, CoreError)


def test_api_failure_wraps_api_error():
    inner = ResourceNotFound()
    error = ApiFailure(inner)
    assert error.error is inner
    assert str(error) == "API error: Resource not found"


@pytest.mark.parametrize(
    "error, expected",
    [
        (
            ValidationFailed("x"),
            "The provided data is invalid. Please check your input and try again.",
        ),
        (NotFound("x"), "The requested resource could not be found."),
        (AlreadyExists("x"), "This resource already exists."),
        (PermissionDenied("x"), "You don't have permission to perform this action."),
        (
            ExternalServiceError("x"),
            "An external service is currently unavailable. Please try again later.",
        ),
        (DatabaseError("x"), "An error occurred. Our team has been notified."),
        (GeneralError("x"), "An error occurred. Our team has been notified."),
        (ApiFailure(ResourceNotFound()), "An error occurred. Our team has been notified."),
    ],
)
def test_user_friendly_message(error, expected):
    assert DefaultErrorHandler().user_friendly_message(error) == expected


def test_friendly_message_hides_detail():
    message = DefaultErrorHandler().user_friendly_message(DatabaseError("secret table"))
    assert "secret table" not in message


def test_handle_error_logs_database_attention(caplog):
    caplog.set_level(logging.DEBUG, logger="resourcehub.core_errors")
    error = DatabaseError("disk full")
    DefaultErrorHandler().handle_error(error)
    assert f"Error occurred: {error}" in caplog.messages
    assert "Database error requires attention: disk full" in caplog.messages
    assert all(record.levelno == logging.ERROR for record in caplog.records)


def test_handle_error_warns_on_external_service(caplog):
    caplog.set_level(logging.DEBUG, logger="resourcehub.core_errors")
    DefaultErrorHandler().handle_error(ExternalServiceError("gateway down"))
    warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert warnings == ["External service issue: gateway down"]


def test_handle_error_logs_once_for_other_errors(caplog):
    caplog.set_level(logging.DEBUG, logger="resourcehub.core_errors")
    error = NotFound("abc")
    DefaultErrorHandler().handle_error(error)
    assert caplog.messages == [f"Error occurred: {error}"]