"""Resource operations against the remote API, with a short-lived cache."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

from .api_errors import (
    ApiError,
    ResourceNotFound,
    ResponseParseError,
    Unauthorized,
)
from .client import ApiClient
from .config import Config
from .core_errors import (
    CoreError,
    ExternalServiceError,
    NotFound,
    PermissionDenied,
    ProcessingError,
    ValidationFailed,
)
from .resource import Resource, ResourceData, ResourceType

_CACHE_MAX_AGE_MINUTES = 5
_MAX_NAME_LENGTH = 100
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class _ResourceCache:
    resources: list[Resource] = field(default_factory=list)
    last_updated: datetime = field(default_factory=_utcnow)

    def is_stale(self) -> bool:
        age: timedelta = _utcnow() - self.last_updated
        return int(age.total_seconds() // 60) > _CACHE_MAX_AGE_MINUTES

    def update(self, resources: list[Resource]) -> None:
        self.resources = copy.deepcopy(resources)
        self.last_updated = _utcnow()

    def get(self, resource_id: str) -> Resource | None:
        found = next((r for r in self.resources if r.id == resource_id), None)
        return None if found is None else copy.deepcopy(found)


def _parse_resource(payload: Any) -> Resource:
    try:
        return Resource.from_dict(payload)
    except ValueError as exc:
        raise ResponseParseError(str(exc)) from exc


def _api_failure(
    error: ApiError,
    *,
    unauthorized: str,
    not_found: str | None = None,
    parse_as_processing: bool = False,
) -> CoreError:
    if parse_as_processing and isinstance(error, ResponseParseError):
        return ProcessingError(error.detail)
    if not_found is not None and isinstance(error, ResourceNotFound):
        return NotFound(not_found)
    if isinstance(error, Unauthorized):
        return PermissionDenied(unauthorized)
    return ExternalServiceError(f"API error: {error}")


class ResourceService:
    """Creates, reads, updates, deletes and lists resources through an API client."""

    def __init__(self, client: ApiClient) -> None:
        self.client = client
        self._cache = _ResourceCache()

    @classmethod
    def from_config(cls, config: Config) -> ResourceService:
        """Build a service with a new client for ``config``."""
        try:
            client = ApiClient(config)
        except ApiError as exc:
            raise ExternalServiceError(f"Failed to create API client: {exc}") from exc
        return cls(client)

    async def invalidate_cache(self) -> None:
        """Mark the cache stale so that the next read goes to the API."""
        self._cache.last_updated = _EPOCH

    @staticmethod
    def _validate(data: ResourceData) -> None:
        if not data.name:
            raise ValidationFailed("Resource name cannot be empty")
        if len(data.name.encode("utf-8")) > _MAX_NAME_LENGTH:
            raise ValidationFailed("Resource name too long (max 100 characters)")
        if data.resource_type is ResourceType.DOCUMENT and "content" not in data.data:
            raise ValidationFailed("Document must have content")
        if data.resource_type is ResourceType.USER and "email" not in data.data:
            raise ValidationFailed("User must have an email")

    async def create(self, resource: Resource) -> Resource:
        """Validate and send a new resource; return what the API stored."""
        self._validate(resource.data)
        try:
            result = _parse_resource(await self.client.post("resources", resource.to_dict()))
        except ApiError as exc:
            raise _api_failure(
                exc,
                unauthorized="Not authorized to create resources",
                parse_as_processing=True,
            ) from exc
        await self.invalidate_cache()
        return result

    async def get(self, resource_id: str) -> Resource:
        """The resource with ``resource_id``, from the cache when it is fresh."""
        if not self._cache.is_stale():
            cached = self._cache.get(resource_id)
            if cached is not None:
                return cached
        try:
            return _parse_resource(await self.client.get(f"resources/{resource_id}"))
        except ApiError as exc:
            raise _api_failure(
                exc,
                unauthorized="Not authorized to access this resource",
                not_found=f"Resource not found: {resource_id}",
            ) from exc

    async def update(self, resource_id: str, resource: Resource) -> Resource:
        """Validate and send a changed resource whose id must be ``resource_id``."""
        self._validate(resource.data)
        if resource.id != resource_id:
            raise ValidationFailed("Resource ID mismatch")
        try:
            result = _parse_resource(
                await self.client.post(f"resources/{resource_id}", resource.to_dict())
            )
        except ApiError as exc:
            raise _api_failure(
                exc,
                unauthorized="Not authorized to update this resource",
                not_found=f"Resource not found: {resource_id}",
            ) from exc
        await self.invalidate_cache()
        return result

    async def delete(self, resource_id: str) -> bool:
        """Ask the API to delete the resource; return its answer."""
        try:
            payload = await self.client.get(f"resources/{resource_id}/delete")
            if not isinstance(payload, bool):
                raise ResponseParseError(f"expected a boolean, got {payload!r}")
        except ApiError as exc:
            raise _api_failure(
                exc,
                unauthorized="Not authorized to delete this resource",
                not_found=f"Resource not found: {resource_id}",
            ) from exc
        await self.invalidate_cache()
        return payload

    async def list(
        self, limit: int | None = None, name_filter: str | None = None
    ) -> list[Resource]:
        """Resources whose name contains ``name_filter``, at most ``limit`` of them.

        A fresh cache answers on its own; a stale one is refilled from the API.
        """
        if not self._cache.is_stale():
            resources = copy.deepcopy(self._cache.resources)
            if name_filter is not None:
                resources = [r for r in resources if name_filter in r.data.name]
            return resources if limit is None else resources[:limit]

        query = []
        if limit is not None:
            query.append(f"limit={limit}")
        if name_filter is not None:
            query.append(f"filter={name_filter}")
        endpoint = "resources"
        if query:
            endpoint = f"{endpoint}?{'&'.join(query)}"

        try:
            payload = await self.client.get(endpoint)
            if not isinstance(payload, list):
                raise ResponseParseError(f"expected a list, got {type(payload).__name__}")
            result = [_parse_resource(item) for item in payload]
        except ApiError as exc:
            raise _api_failure(exc, unauthorized="Not authorized to list resources") from exc

        self._cache.update(result)
        return result