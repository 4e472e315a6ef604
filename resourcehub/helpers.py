"""Small helpers used across the package."""

from __future__ import annotations

import asyncio
import time
from typing import Awaitable, Callable, TypeVar

T = TypeVar("T")


async def retry_with_backoff(
    operation: Callable[[], Awaitable[T]],
    max_retries: int,
    initial_delay: int,
) -> T:
    """Await ``operation()`` until it succeeds, at most ``max_retries`` extra times.

    The delay, in milliseconds, starts at ``initial_delay`` and doubles after
    every failure. The last error is re-raised when all attempts fail.
    """
    delay = initial_delay
    attempt = 0
    while True:
        try:
            return await operation()
        except Exception:
            if attempt >= max_retries:
                raise
        await asyncio.sleep(delay / 1000)
        delay *= 2
        attempt += 1


async def measure_time(operation: Callable[[], Awaitable[T]]) -> tuple[T, float]:
    """Await ``operation()`` and return its result with the elapsed seconds."""
    start = time.perf_counter()
    result = await operation()
    return result, time.perf_counter() - start


def truncate_string(s: str, max_len: int) -> str:
    """Shorten ``s`` to ``max_len`` characters, ending in an ellipsis."""
    if len(s) <= max_len:
        return s
    return s[: max(max_len - 3, 0)] + "..."


def is_valid_email(email: str) -> bool:
    """A basic check: one '@' with text on both sides and a dot in the domain."""
    parts = email.split("@")
    if len(parts) != 2:
        return False
    local, domain = parts
    return bool(local) and bool(domain) and "." in domain


def parse_key_value_pairs(s: str) -> dict[str, str]:
    """Parse ``"key1=value1,key2=value2"`` into a dict, skipping malformed pairs."""
    pairs: dict[str, str] = {}
    for pair in s.split(","):
        parts = pair.split("=")
        if len(parts) == 2:
            key, value = parts
            pairs[key.strip()] = value.strip()
    return pairs