"""Tests for guid_repository/domain/models/entity.py."""

from datetime import datetime, timezone
from types import SimpleNamespace
from uuid import uuid4

from guid_repository.domain.models import Entity
from tests.models import Widget


def test_object_with_id_and_created_at_satisfies_entity():
    obj = SimpleNamespace(id=uuid4(), created_at=datetime.now(timezone.utc))
    assert isinstance(obj, Entity)


def test_unstamped_object_still_satisfies_entity():
    assert isinstance(SimpleNamespace(id=uuid4(), created_at=None), Entity)


def test_object_without_created_at_is_not_an_entity():
    assert not isinstance(SimpleNamespace(id=uuid4()), Entity)


def test_mapped_model_instance_satisfies_entity():
    assert isinstance(Widget(id=uuid4(), name="bolt"), Entity)
