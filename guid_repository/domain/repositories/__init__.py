"""Domain repository interfaces.

Import from this package rather than individual modules to avoid coupling
callers to specific repository module paths.
"""

from .base import Predicate, QueryTransform, Repository

__all__ = [
    "Predicate",
    "QueryTransform",
    "Repository",
]
