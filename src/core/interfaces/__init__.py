"""
Capability-интерфейсы и общие type bounds.
"""

from src.core.interfaces.converter import Converter
from src.core.interfaces.repository import (
    FIRST_ENTITY_ID,
    CollectionRepository,
    InMemoryListRepository,
    ListRepository,
)
from src.core.interfaces.strict_processor import StrictProcessor
from src.core.interfaces.types import (
    Comparable,
    SerializableComparable,
)

__all__ = [
    # Capability types
    "Comparable",
    "SerializableComparable",
    # Contracts
    "Converter",
    "StrictProcessor",
    "CollectionRepository",
    "ListRepository",
    # Implementations
    "InMemoryListRepository",
    "FIRST_ENTITY_ID",
]
