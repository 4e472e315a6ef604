"""A decoded API response with status, headers and body."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Mapping

_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_unsigned(value: str | None, bits: int) -> int | None:
    if value is None or not _UNSIGNED.fullmatch(value):
        return None
    number = int(value)
    return number if number < 2**bits else None


@dataclass
class ApiResponse:
    """Status, headers (looked up case-insensitively) and decoded body."""

    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Any = None

    def __post_init__(self) -> None:
        self.headers = {str(key).lower(): value for key, value in self.headers.items()}

    def is_success(self) -> bool:
        """True for a 2xx status."""
        return 200 <= self.status < 300

    def header(self, name: str) -> str | None:
        return self.headers.get(name.lower())

    def has_header(self, name: str) -> bool:
        return name.lower() in self.headers

    def content_type(self) -> str | None:
        return self.header("content-type")

    def rate_limit_remaining(self) -> int | None:
        """Remaining requests, or None if absent or not an unsigned 32-bit number."""
        return _parse_unsigned(self.header("x-ratelimit-remaining"), 32)

    def rate_limit_reset(self) -> int | None:
        """Reset timestamp, or None if absent or not an unsigned 64-bit number."""
        return _parse_unsigned(self.header("x-ratelimit-reset"), 64)