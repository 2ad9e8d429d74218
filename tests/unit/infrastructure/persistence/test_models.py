"""Unit tests for the BaseEntity ORM base.

Verifies inherited columns, nullability and package registration.
No database connection is required.
"""

from sqlalchemy import inspect

from guid_repository.infrastructure.database import Base
from guid_repository.infrastructure.persistence.models import BaseEntity
from guid_repository.infrastructure.persistence.models import __all__ as models_all
from tests.models import Part, Widget


def _column(model, name):
    return {c.name: c for c in model.__table__.columns}[name]


def test_base_entity_is_abstract():
    assert BaseEntity.__abstract__ is True


def test_subclass_inherits_id_primary_key():
    pk_cols = [c.name for c in Widget.__table__.primary_key.columns]
    assert pk_cols == ["Id"]


def test_subclass_inherits_created_at_column():
    assert "CreatedAt" in {c.name for c in Widget.__table__.columns}


def test_mapped_attribute_names_stay_snake_case():
    mapper = inspect(Widget)
    assert mapper.get_property("id").columns[0].name == "Id"
    assert mapper.get_property("created_at").columns[0].name == "CreatedAt"


def test_created_at_is_not_nullable():
    assert _column(Widget, "CreatedAt").nullable is False


def test_created_at_falls_back_to_server_clock():
    assert _column(Widget, "CreatedAt").server_default is not None


def test_created_at_is_timezone_aware():
    assert _column(Widget, "CreatedAt").type.timezone is True


def test_id_has_client_side_default():
    assert _column(Widget, "Id").default is not None


def test_each_subclass_gets_its_own_columns():
    assert _column(Widget, "Id") is not _column(Part, "Id")


def test_subclasses_registered_in_base_metadata():
    registered = set(Base.metadata.tables.keys())
    assert {"widgets", "parts"} <= registered


def test_subclass_is_mapped():
    assert inspect(Widget).class_ is Widget


def test_models_package_exports_base_entity_only():
    assert models_all == ["BaseEntity"]
