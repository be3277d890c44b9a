"""
Generic-контейнеры.

Sourced, Limited, MaxHolder и коллекции, упорядоченные по размеру.
"""

from src.core.containers.comparable_collection import ComparableCollection, ComparableList
from src.core.containers.limited import Limited
from src.core.containers.max_holder import MaxHolder
from src.core.containers.sourced import Sourced

__all__ = [
    "Sourced",
    "Limited",
    "MaxHolder",
    "ComparableCollection",
    "ComparableList",
]
