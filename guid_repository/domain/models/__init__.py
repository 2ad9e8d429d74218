"""Domain model contracts.

These are pure typing contracts — no ORM or persistence concerns.
"""

from .entity import Entity

__all__ = ["Entity"]
