"""The resource model and its JSON form."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Mapping


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class ResourceType(str, Enum):
    """Kinds of resource; ``ANY`` is the wildcard used by processors."""

    DOCUMENT = "document"
    USER = "user"
    PROJECT = "project"
    SETTINGS = "settings"
    MEDIA = "media"
    ANY = "any"

    def __str__(self) -> str:
        return self.value


@dataclass
class ResourceData:
    """Name, type, description and free-form fields of a resource.

    The ``with_*`` methods return a modified copy.
    """

    name: str
    resource_type: ResourceType
    description: str | None = None
    data: dict[str, str] = field(default_factory=dict)
    metadata: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.resource_type = ResourceType(self.resource_type)

    def with_data(self, key: str, value: str) -> ResourceData:
        return replace(self, data={**self.data, key: value}, metadata=dict(self.metadata))

    def with_metadata(self, key: str, value: str) -> ResourceData:
        return replace(self, data=dict(self.data), metadata={**self.metadata, key: value})

    def with_description(self, description: str) -> ResourceData:
        return replace(
            self, description=description, data=dict(self.data), metadata=dict(self.metadata)
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "resource_type": self.resource_type.value,
            "description": self.description,
            "data": dict(self.data),
            "metadata": dict(self.metadata),
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> ResourceData:
        """Build from the JSON form; raises ValueError if it is malformed."""
        try:
            return cls(
                name=str(payload["name"]),
                resource_type=ResourceType(payload["resource_type"]),
                description=payload.get("description"),
                data={str(k): str(v) for k, v in payload["data"].items()},
                metadata={str(k): str(v) for k, v in payload["metadata"].items()},
            )
        except (KeyError, TypeError, AttributeError, ValueError) as exc:
            raise ValueError(f"invalid resource data: {exc}") from exc


@dataclass
class Resource:
    """A resource with its id, timestamps (ISO 8601) and optional owner."""

    id: str
    data: ResourceData
    created_at: str = ""
    updated_at: str = ""
    owner_id: str | None = None

    def __post_init__(self) -> None:
        if not self.created_at or not self.updated_at:
            now = _now()
            self.created_at = self.created_at or now
            self.updated_at = self.updated_at or now

    def with_owner(self, owner_id: str) -> Resource:
        return replace(self, owner_id=owner_id)

    def touch(self) -> None:
        """Set ``updated_at`` to now."""
        self.updated_at = _now()

    def is_owned_by(self, user_id: str) -> bool:
        return self.owner_id is not None and self.owner_id == user_id

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "data": self.data.to_dict(),
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "owner_id": self.owner_id,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> Resource:
        """Build from the JSON form; raises ValueError if it is malformed."""
        try:
            return cls(
                id=str(payload["id"]),
                data=ResourceData.from_dict(payload["data"]),
                created_at=str(payload["created_at"]),
                updated_at=str(payload["updated_at"]),
                owner_id=payload.get("owner_id"),
            )
        except (KeyError, TypeError) as exc:
            raise ValueError(f"invalid resource: {exc}") from exc