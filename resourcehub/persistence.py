"""Repositories that store resources and users."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Generic, Protocol, TypeVar

from .resource import Resource
from .user import User

_KIND_PREFIXES = {
    "connection": "Connection error",
    "query": "Query error",
    "validation": "Validation error",
    "not_found": "Entity not found",
    "unique_constraint": "Unique constraint violation",
    "transaction": "Transaction error",
}


class PersistenceError(Exception):
    """A storage failure of one of the kinds a repository may report.

    ``kind`` is one of ``connection``, ``query``, ``validation``,
    ``not_found``, ``unique_constraint`` or ``transaction``.
    """

    def __init__(self, kind: str, detail: str) -> None:
        try:
            prefix = _KIND_PREFIXES[kind]
        except KeyError:
            raise ValueError(f"unknown persistence error kind: {kind!r}") from None
        self.kind = kind
        self.detail = detail
        super().__init__(f"{prefix}: {detail}")


class _Identified(Protocol):
    id: str


E = TypeVar("E", bound=_Identified)


class Repository(ABC, Generic[E]):
    """Storage of entities keyed by their ``id``."""

    @abstractmethod
    async def save(self, entity: E) -> E:
        """Store ``entity``, replacing any with the same id, and return it."""

    @abstractmethod
    async def find_by_id(self, entity_id: str) -> E | None:
        """The entity with ``entity_id``, or None."""

    @abstractmethod
    async def delete(self, entity_id: str) -> bool:
        """Remove the entity; True if it existed."""

    @abstractmethod
    async def find_all(self) -> list[E]:
        """Every stored entity."""

    @abstractmethod
    async def count(self) -> int:
        """The number of stored entities."""


class InMemoryRepository(Repository[E]):
    """A repository held in a dict; entities go in and come out as copies."""

    def __init__(self) -> None:
        self._entities: dict[str, E] = {}

    async def save(self, entity: E) -> E:
        self._entities[entity.id] = copy.deepcopy(entity)
        return copy.deepcopy(entity)

    async def find_by_id(self, entity_id: str) -> E | None:
        stored = self._entities.get(entity_id)
        return None if stored is None else copy.deepcopy(stored)

    async def delete(self, entity_id: str) -> bool:
        return self._entities.pop(entity_id, None) is not None

    async def find_all(self) -> list[E]:
        return [copy.deepcopy(entity) for entity in self._entities.values()]

    async def count(self) -> int:
        return len(self._entities)


class InMemoryResourceRepository(InMemoryRepository[Resource]):
    """In-memory storage of resources."""


class InMemoryUserRepository(InMemoryRepository[User]):
    """In-memory storage of users."""


@dataclass(frozen=True)
class RepositoryFactory:
    """Hands out the repositories the application works with."""

    resource_repository: Repository[Resource] = field(
        default_factory=InMemoryResourceRepository
    )
    user_repository: Repository[User] = field(default_factory=InMemoryUserRepository)

    @classmethod
    def in_memory(cls) -> RepositoryFactory:
        return cls(InMemoryResourceRepository(), InMemoryUserRepository())