from datetime import datetime, timezone

import pytest

from resourcehub.resource import Resource, ResourceData, ResourceType


def sample_data():
    return (
        ResourceData("Report", ResourceType.DOCUMENT)
        .with_data("content", "hello")
        .with_metadata("lang", "en")
        .with_description("A report")
    )


def test_resource_type_display_and_wire_form():
    assert str(ResourceType.DOCUMENT) == "document"
    assert str(ResourceType.ANY) == "any"
    assert ResourceType("media") is ResourceType.MEDIA


def test_resource_data_builders():
    data = sample_data()
    assert data.name == "Report"
    assert data.data == {"content": "hello"}
    assert data.metadata == {"lang": "en"}
    assert data.description == "A report"


def test_with_data_leaves_original_unchanged():
    base = ResourceData("n", ResourceType.PROJECT)
    extended = base.with_data("k", "v")
    assert base.data == {}
    assert extended.data == {"k": "v"}


def test_resource_data_round_trip():
    data = sample_data()
    assert ResourceData.from_dict(data.to_dict()) == data


def test_resource_data_json_uses_lowercase_type():
    assert sample_data().to_dict()["resource_type"] == "document"


def test_resource_data_from_dict_rejects_unknown_type():
    payload = sample_data().to_dict()
    payload["resource_type"] = "bogus"
    with pytest.raises(ValueError):
        ResourceData.from_dict(payload)


def test_new_resource_timestamps_equal_and_utc():
    resource = Resource("r1", sample_data())
    assert resource.created_at == resource.updated_at
    assert datetime.fromisoformat(resource.created_at).tzinfo is not None
    assert resource.owner_id is None


def test_touch_updates_timestamp():
    resource = Resource("r1", sample_data(), created_at="2000-01-01T00:00:00+00:00",
                        updated_at="2000-01-01T00:00:00+00:00")
    resource.touch()
    updated = datetime.fromisoformat(resource.updated_at)
    assert updated > datetime(2000, 1, 2, tzinfo=timezone.utc)
    assert resource.created_at == "2000-01-01T00:00:00+00:00"


def test_ownership():
    resource = Resource("r1", sample_data())
    assert resource.is_owned_by("u1") is False
    owned = resource.with_owner("u1")
    assert owned.is_owned_by("u1") is True
    assert owned.is_owned_by("u2") is False
    assert resource.owner_id is None


def test_resource_round_trip():
    resource = Resource("r1", sample_data()).with_owner("u1")
    assert Resource.from_dict(resource.to_dict()) == resource


def test_resource_from_dict_missing_field():
    payload = Resource("r1", sample_data()).to_dict()
    del payload["created_at"]
    with pytest.raises(ValueError):
        Resource.from_dict(payload)