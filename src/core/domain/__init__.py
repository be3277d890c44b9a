"""
Domain models.

Contains the base entity shape used by repositories and collection utilities.
"""

from src.core.domain.base_entity import BaseEntity, utc_now

__all__ = [
    "BaseEntity",
    "utc_now",
]
