"""Constants of the remote API and path construction."""

from __future__ import annotations

API_VERSION = "v1"

DEFAULT_TIMEOUT_SECS = 30

RATE_LIMIT = 100


def build_api_path(base_url: str, resource: str) -> str:
    """Join a base URL, the API version and a resource name."""
    return f"{base_url.rstrip('/')}/api/{API_VERSION}/{resource}"