"""Async API client, resource and user models, a caching service, processors,
in-memory repositories, validation and utility helpers, and a small command."""

__version__ = "0.1.0"