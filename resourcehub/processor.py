"""Processors that validate and enrich resources, and their registry."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from itertools import chain

from .core_errors import ValidationFailed
from .resource import Resource, ResourceType

logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class ResourceProcessor(ABC):
    """Inspects a resource and may modify it in place."""

    @abstractmethod
    def process(self, resource: Resource) -> None:
        """Process ``resource``; raise a CoreError if it is unacceptable."""

    @abstractmethod
    def can_handle(self, resource_type: ResourceType) -> bool:
        """Whether this processor is meant for ``resource_type``."""


class ProcessorRegistry:
    """Processors grouped by the resource type they are registered for.

    Processors registered for :attr:`ResourceType.ANY` run on every resource,
    after those registered for its own type.
    """

    def __init__(self) -> None:
        self._processors: dict[ResourceType, list[ResourceProcessor]] = {}
        self._lock = asyncio.Lock()

    async def register(self, resource_type: ResourceType, processor: ResourceProcessor) -> None:
        async with self._lock:
            self._processors.setdefault(ResourceType(resource_type), []).append(processor)

    async def process(self, resource: Resource) -> None:
        """Run every applicable processor; the first error stops the run."""
        async with self._lock:
            applicable = chain(
                self._processors.get(resource.data.resource_type, ()),
                self._processors.get(ResourceType.ANY, ()),
            )
            for processor in applicable:
                processor.process(resource)


class DocumentProcessor(ResourceProcessor):
    """Rejects empty document content and trims surrounding whitespace."""

    def process(self, resource: Resource) -> None:
        fields = resource.data.data
        content = fields.get("content")
        if content is None:
            return
        if not content:
            raise ValidationFailed("Document content cannot be empty")
        fields["content"] = content.strip()

    def can_handle(self, resource_type: ResourceType) -> bool:
        return resource_type is ResourceType.DOCUMENT


class UserProcessor(ResourceProcessor):
    """Checks the email field and stamps a creation time if missing."""

    def process(self, resource: Resource) -> None:
        fields = resource.data.data
        email = fields.get("email")
        if email is not None and ("@" not in email or "." not in email):
            raise ValidationFailed("Invalid email format")
        fields.setdefault("created_at", _now())

    def can_handle(self, resource_type: ResourceType) -> bool:
        return resource_type is ResourceType.USER


class AuditLogProcessor(ResourceProcessor):
    """Stamps a modification time on any resource and logs the change."""

    def process(self, resource: Resource) -> None:
        resource.data.data["last_modified"] = _now()
        logger.info(
            "Resource modified: id=%s, type=%s, name=%s",
            resource.id,
            resource.data.resource_type.name.capitalize(),
            resource.data.name,
        )

    def can_handle(self, resource_type: ResourceType) -> bool:
        return True