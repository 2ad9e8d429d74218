"""Persistence package.

Exports the ORM identity base, the raw SQL builder, the repository
implementation and the registration helpers.
"""

from guid_repository.infrastructure.persistence.models import BaseEntity
from guid_repository.infrastructure.persistence.raw_sql import RawSqlQuery, quote_identifier
from guid_repository.infrastructure.persistence.repositories import (
    RepositoryRegistry,
    RepositoryScope,
    SqlRepository,
    add_repositories,
    repository_scope,
)

__all__ = [
    "BaseEntity",
    "RawSqlQuery",
    "quote_identifier",
    "SqlRepository",
    "RepositoryRegistry",
    "RepositoryScope",
    "add_repositories",
    "repository_scope",
]
