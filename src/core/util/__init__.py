"""
Утилиты для коллекций сущностей.
"""

from src.core.util.collection_util import (
    CREATED_ON_COMPARATOR,
    LIST_ITEM_MARKER,
    EmptyCollectionError,
    PrintConfig,
    find_max,
    find_most_recently_created_entity,
    has_duplicates,
    has_new_entities,
    is_valid_collection,
    key_comparator,
    print_items,
    swap,
)

__all__ = [
    # Constants
    "LIST_ITEM_MARKER",
    "CREATED_ON_COMPARATOR",
    # Exceptions
    "EmptyCollectionError",
    # Config
    "PrintConfig",
    # Functions
    "print_items",
    "has_new_entities",
    "is_valid_collection",
    "has_duplicates",
    "key_comparator",
    "find_max",
    "find_most_recently_created_entity",
    "swap",
]
