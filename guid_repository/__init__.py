"""Generic UUID-keyed repository over async SQLAlchemy."""

from guid_repository.domain.models import Entity
from guid_repository.domain.repositories import Predicate, QueryTransform, Repository
from guid_repository.infrastructure.persistence import (
    BaseEntity,
    RawSqlQuery,
    RepositoryRegistry,
    RepositoryScope,
    SqlRepository,
    add_repositories,
    repository_scope,
)

__all__ = [
    "Entity",
    "Predicate",
    "QueryTransform",
    "Repository",
    "BaseEntity",
    "RawSqlQuery",
    "RepositoryRegistry",
    "RepositoryScope",
    "SqlRepository",
    "add_repositories",
    "repository_scope",
]
