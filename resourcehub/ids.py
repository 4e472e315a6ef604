"""Generators of identifiers."""

from __future__ import annotations

import secrets
import string
import time
import uuid

_SHORT_ID_CHARSET = string.ascii_uppercase + string.ascii_lowercase + string.digits
_SHORT_ID_LENGTH = 6


def generate_id() -> str:
    """Millisecond timestamp followed by eight random hex digits."""
    millis = time.time_ns() // 1_000_000
    return f"{millis}-{secrets.randbits(32):08x}"


def generate_uuid() -> str:
    """A random version 4 UUID in its canonical text form."""
    return str(uuid.uuid4())


def generate_short_id() -> str:
    """Six random letters and digits, for display."""
    return "".join(secrets.choice(_SHORT_ID_CHARSET) for _ in range(_SHORT_ID_LENGTH))


def generate_prefixed_id(prefix: str) -> str:
    """``prefix-XXXXXX-NNNN``: a short id and the last four digits of the epoch seconds."""
    seconds = int(time.time()) % 10000
    return f"{prefix}-{generate_short_id()}-{seconds:04d}"