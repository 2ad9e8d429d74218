"""ORM model registry.

Only the abstract identity base lives here; concrete entity models are
owned by the application and register themselves with Base.metadata by
subclassing BaseEntity.
"""

from guid_repository.infrastructure.persistence.models.base import BaseEntity

__all__ = ["BaseEntity"]
