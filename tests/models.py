"""Concrete entity models shared by the test suite."""

from __future__ import annotations

import uuid

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from guid_repository.infrastructure.persistence.models.base import BaseEntity


class Widget(BaseEntity):
    __tablename__ = "widgets"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    parts: Mapped[list["Part"]] = relationship(
        back_populates="widget", cascade="all, delete-orphan"
    )


class Part(BaseEntity):
    __tablename__ = "parts"

    widget_id: Mapped[uuid.UUID] = mapped_column(ForeignKey(Widget.id), nullable=False)
    label: Mapped[str] = mapped_column(String(100), nullable=False)

    widget: Mapped[Widget] = relationship(back_populates="parts")
