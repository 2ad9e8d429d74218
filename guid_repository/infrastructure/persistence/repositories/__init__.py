"""Concrete SQLAlchemy repository implementation and its registry.

Exports SqlRepository plus the registration helpers used at the
application boundary.
"""

from __future__ import annotations

from .registry import (
    RepositoryRegistry,
    RepositoryScope,
    add_repositories,
    repository_scope,
)
from .sql import SqlRepository

__all__ = [
    "SqlRepository",
    "RepositoryRegistry",
    "RepositoryScope",
    "add_repositories",
    "repository_scope",
]
