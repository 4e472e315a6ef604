"""Field validation helpers that raise on invalid input."""

from __future__ import annotations

import re
from typing import Any, Callable, Iterable, Mapping

_EMAIL = re.compile(
    r"[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*"
)
_URL = re.compile(r"(https?|ftp)://[^\s/$.?#].[^\s]*")
_USERNAME = re.compile(r"[a-zA-Z0-9_-]{3,20}")


class ValidationError(Exception):
    """Base class of every validation failure."""


class RequiredFieldMissing(ValidationError):
    """A required field is absent or empty."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"Required field missing: {field_name}")


class _FieldError(ValidationError):
    _template = "{}: {}"

    def __init__(self, field_name: str, reason: str) -> None:
        self.field_name = field_name
        self.reason = reason
        super().__init__(self._template.format(field_name, reason))


class InvalidFieldValue(_FieldError):
    """A field holds an unacceptable value."""

    _template = "Invalid field value: {} - {}"


class InvalidFieldLength(_FieldError):
    """A field is too short or too long."""

    _template = "Invalid field length: {} - {}"


class InvalidFieldFormat(_FieldError):
    """A field does not have the expected format."""

    _template = "Invalid field format: {} - {}"


class OutOfRange(_FieldError):
    """A value lies outside its allowed range."""

    _template = "Field value out of range: {} - {}"


class MultipleErrors(ValidationError):
    """Several validations failed at once."""

    def __init__(self, errors: list[ValidationError]) -> None:
        self.errors = list(errors)
        super().__init__(f"Multiple validation errors: {len(self.errors)} errors")


def validate_not_empty(field: str, field_name: str) -> None:
    """Require ``field`` to hold something other than whitespace."""
    if not field.strip():
        raise RequiredFieldMissing(field_name)


def validate_length(field: str, field_name: str, min_length: int, max_length: int) -> None:
    """Require the UTF-8 length of ``field`` to lie within the bounds, inclusive."""
    length = len(field.encode("utf-8"))
    if length < min_length or length > max_length:
        raise InvalidFieldLength(
            field_name, f"Length must be between {min_length} and {max_length}"
        )


def validate_range(value: Any, field_name: str, min_value: Any, max_value: Any) -> None:
    """Require ``min_value <= value <= max_value``."""
    if value < min_value or value > max_value:
        raise OutOfRange(field_name, f"Value must be between {min_value} and {max_value}")


def validate_email(email: str, field_name: str) -> None:
    if not _EMAIL.fullmatch(email):
        raise InvalidFieldFormat(field_name, "Invalid email format")


def validate_url(url: str, field_name: str) -> None:
    if not _URL.fullmatch(url):
        raise InvalidFieldFormat(field_name, "Invalid URL format")


def validate_username(username: str, field_name: str) -> None:
    if not _USERNAME.fullmatch(username):
        raise InvalidFieldFormat(
            field_name,
            "Username must be 3-20 characters and contain only letters, numbers, "
            "underscores, and hyphens",
        )


def _raise_collected(errors: list[ValidationError]) -> None:
    if len(errors) == 1:
        raise errors[0]
    if errors:
        raise MultipleErrors(errors)


def validate_all(validations: Iterable[Callable[[], None]]) -> None:
    """Run every check and raise what failed.

    One failure is raised as it is; several are raised together as
    :class:`MultipleErrors`.
    """
    errors: list[ValidationError] = []
    for check in validations:
        try:
            check()
        except ValidationError as exc:
            errors.append(exc)
    _raise_collected(errors)


def validate_required_fields(data: Mapping[str, str], required_fields: Iterable[str]) -> None:
    """Require each named field to be present in ``data`` and non-empty."""
    _raise_collected(
        [RequiredFieldMissing(name) for name in required_fields if not data.get(name)]
    )