"""ORM side of the entity identity contract."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from guid_repository.infrastructure.database import Base


class BaseEntity(Base):
    """Abstract mapped base for every repository-managed table.

    Concrete models subclass it and declare __tablename__.  id is normally
    supplied by the caller; uuid4 fills it at flush time when left empty.
    created_at is stamped by the repository on add(); rows inserted another
    way (relationship cascades, bulk loads) fall back to the server clock.
    The database column names are "Id" and "CreatedAt".
    """

    __abstract__ = True

    id: Mapped[uuid.UUID] = mapped_column(
        "Id", Uuid, primary_key=True, default=uuid.uuid4
    )
    created_at: Mapped[Optional[datetime]] = mapped_column(
        "CreatedAt", DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id}>"
