"""
Repository: семейство generic-репозиториев

CollectionRepository[E, C]: хранение сущностей E в коллекции типа C.
ListRepository[E]: специализация с C = List[E] (generic alias, а не
отдельная иерархия).

InMemoryListRepository: list-backed реализация ListRepository.
"""

import logging
from typing import Any, Collection, Final, List, Protocol, TypeVar, runtime_checkable

from src.core.domain.base_entity import BaseEntity

LOGGER = logging.getLogger("repository")

# Первый id, назначаемый in-memory репозиторием
FIRST_ENTITY_ID: Final[int] = 1

EntityT = TypeVar("EntityT", bound=BaseEntity)
CollectionT = TypeVar("CollectionT", bound=Collection[Any], covariant=True)


# =============================================================================
# CONTRACTS
# =============================================================================


@runtime_checkable
class CollectionRepository(Protocol[EntityT, CollectionT]):
    """Репозиторий сущностей EntityT поверх коллекции CollectionT."""

    def save(self, entity: EntityT) -> None:
        """Сохранить сущность."""
        ...

    def get_entity_collection(self) -> CollectionT:
        """Все сохранённые сущности."""
        ...


# Специализация: коллекция: упорядоченный индексируемый список
ListRepository = CollectionRepository[EntityT, List[EntityT]]


# =============================================================================
# IN-MEMORY IMPLEMENTATION
# =============================================================================


class InMemoryListRepository(ListRepository[EntityT]):
    """
    ListRepository поверх обычного list.

    save() назначает последовательный id (начиная с FIRST_ENTITY_ID)
    сущностям без id и сохраняет порядок вставки. Сущность с уже
    назначенным id сохраняется как есть.
    """

    def __init__(self) -> None:
        self._entities: List[EntityT] = []
        self._next_id: int = FIRST_ENTITY_ID

    def save(self, entity: EntityT) -> None:
        """
        Сохранить сущность.

        Args:
            entity: сущность; если entity.id is None, ей назначается id
        """
        if entity.id is None:
            entity.id = self._next_id
            self._next_id += 1
        else:
            self._next_id = max(self._next_id, entity.id + 1)

        self._entities.append(entity)
        LOGGER.debug("Saved entity id=%s uuid=%s", entity.id, entity.uuid)

    def get_entity_collection(self) -> List[EntityT]:
        """
        Returns:
            Копия списка сохранённых сущностей (в порядке вставки)
        """
        return list(self._entities)

    def __len__(self) -> int:
        return len(self._entities)
