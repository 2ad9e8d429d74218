"""Base identity contract shared by every persisted entity.

Entity is structural: any object exposing an ``id`` UUID and a
``created_at`` timestamp satisfies it.  The ORM side of the contract
(columns, defaults) lives in
guid_repository/infrastructure/persistence/models/base.py.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable
from uuid import UUID


@runtime_checkable
class Entity(Protocol):
    """An identifiable record with a write-once creation timestamp.

    id is assigned by the caller or the store and never changes afterwards.
    created_at stays None until the repository stamps it on add().
    """

    id: UUID
    created_at: datetime | None
