import pytest

from resourcehub.persistence import (
    InMemoryResourceRepository,
    InMemoryUserRepository,
    PersistenceError,
    RepositoryFactory,
)
from resourcehub.resource import Resource, ResourceData, ResourceType
from resourcehub.user import User


def _resource(resource_id, name="doc"):
    return Resource(resource_id, ResourceData(name, ResourceType.DOCUMENT))


@pytest.mark.asyncio
async def test_save_and_find_resource():
    repo = InMemoryResourceRepository()
    saved = await repo.save(_resource("r1"))
    found = await repo.find_by_id("r1")
    assert saved == found
    assert found.id == "r1"
    assert await repo.count() == 1


@pytest.mark.asyncio
async def test_find_missing_returns_none():
    repo = InMemoryResourceRepository()
    assert await repo.find_by_id("absent") is None


@pytest.mark.asyncio
async def test_save_replaces_same_id():
    repo = InMemoryResourceRepository()
    await repo.save(_resource("r1", name="first"))
    await repo.save(_resource("r1", name="second"))
    assert await repo.count() == 1
    found = await repo.find_by_id("r1")
    assert found.data.name == "second"


@pytest.mark.asyncio
async def test_stored_entity_is_isolated_from_caller():
    repo = InMemoryResourceRepository()
    original = _resource("r1", name="kept")
    await repo.save(original)
    original.data.name = "changed"
    fetched = await repo.find_by_id("r1")
    fetched.data.data["extra"] = "value"
    again = await repo.find_by_id("r1")
    assert again.data.name == "kept"
    assert again.data.data == {}


@pytest.mark.asyncio
async def test_delete():
    repo = InMemoryResourceRepository()
    await repo.save(_resource("r1"))
    assert await repo.delete("r1") is True
    assert await repo.delete("r1") is False
    assert await repo.count() == 0


@pytest.mark.asyncio
async def test_find_all_returns_every_entity():
    repo = InMemoryResourceRepository()
    for resource_id in ("a", "b", "c"):
        await repo.save(_resource(resource_id))
    ids = sorted(r.id for r in await repo.find_all())
    assert ids == ["a", "b", "c"]
    assert len(await repo.find_all()) == await repo.count()


@pytest.mark.asyncio
async def test_user_repository_round_trip():
    repo = InMemoryUserRepository()
    user = User("u1", "ada@example.com", "Ada")
    await repo.save(user)
    found = await repo.find_by_id("u1")
    assert found == user
    assert found is not user


@pytest.mark.asyncio
async def test_factory_repositories_are_shared_and_separate():
    factory = RepositoryFactory.in_memory()
    assert isinstance(factory.resource_repository, InMemoryResourceRepository)
    assert isinstance(factory.user_repository, InMemoryUserRepository)
    await factory.resource_repository.save(_resource("r1"))
    assert await factory.resource_repository.count() == 1
    assert await factory.user_repository.count() == 0


@pytest.mark.asyncio
async def test_default_factory_is_in_memory_and_empty():
    factory = RepositoryFactory()
    assert isinstance(factory.user_repository, InMemoryUserRepository)
    assert await factory.resource_repository.count() == 0


def test_persistence_error_message():
    error = PersistenceError("not_found", "r1")
    assert str(error) == "Entity not found: r1"
    assert error.kind == "not_found"
    assert error.detail == "r1"


def test_persistence_error_rejects_unknown_kind():
    with pytest.raises(ValueError):
        PersistenceError("bogus", "x")