"""
CollectionUtil: утилиты для коллекций сущностей

Свободные функции без состояния:
- print_items: построчный вывод элементов с маркером
- has_new_entities / is_valid_collection / has_duplicates: проверки коллекций
- find_max: максимум по компаратору за один проход
- find_most_recently_created_entity: самая свежая сущность по created_on
- swap: обмен двух элементов списка на месте

АСИММЕТРИЯ ОШИБОК:
1. find_max на пустом входе возвращает None (не ошибка)
2. find_most_recently_created_entity на пустом входе → EmptyCollectionError
"""

import logging
import sys
from dataclasses import dataclass, field
from typing import (
    Callable,
    Collection,
    Final,
    Iterable,
    MutableSequence,
    Optional,
    TextIO,
    TypeVar,
)

from src.core.domain.base_entity import BaseEntity
from src.core.interfaces.types import C, T

LOGGER = logging.getLogger("collections")

EntityT = TypeVar("EntityT", bound=BaseEntity)

# Компаратор в стиле functools.cmp_to_key: <0, 0, >0
Comparator = Callable[[T, T], int]

# Маркер строки в print_items
LIST_ITEM_MARKER: Final[str] = " – "


# =============================================================================
# EXCEPTIONS
# =============================================================================


class EmptyCollectionError(LookupError):
    """Запрошен элемент пустой коллекции (no such element)."""

    pass


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class PrintConfig:
    """Конфигурация print_items.

    stream=None означает sys.stdout на момент вызова (а не импорта).
    """

    marker: str = LIST_ITEM_MARKER
    stream: Optional[TextIO] = field(default=None, compare=False)


# =============================================================================
# COMPARATORS
# =============================================================================


def key_comparator(key: Callable[[T], C]) -> Comparator[T]:
    """
    Компаратор по ключу.

    Args:
        key: функция извлечения упорядоченного ключа

    Returns:
        cmp(a, b) = -1 / 0 / 1 по key(a) относительно key(b)
    """

    def compare(a: T, b: T) -> int:
        ka, kb = key(a), key(b)
        return (ka > kb) - (ka < kb)

    return compare


def _compare_created_on(a: BaseEntity, b: BaseEntity) -> int:
    return (a.created_on > b.created_on) - (a.created_on < b.created_on)


CREATED_ON_COMPARATOR: Final[Comparator[BaseEntity]] = _compare_created_on


# =============================================================================
# OUTPUT
# =============================================================================


def print_items(items: Iterable[T], config: Optional[PrintConfig] = None) -> None:
    """
    Вывести каждый элемент отдельной строкой с маркером.

    Args:
        items: элементы (выводятся через str())
        config: маркер и поток вывода (default: " – " и sys.stdout)
    """
    config = config or PrintConfig()
    stream = config.stream if config.stream is not None else sys.stdout
    for item in items:
        print(f"{config.marker}{item}", file=stream)


# =============================================================================
# CHECKS
# =============================================================================


def has_new_entities(entities: Iterable[EntityT]) -> bool:
    """True, если хотя бы одна сущность ещё не сохранена (id is None)."""
    return any(entity.id is None for entity in entities)


def is_valid_collection(
    entities: Iterable[EntityT], predicate: Callable[[EntityT], bool]
) -> bool:
    """
    Все ли сущности удовлетворяют предикату.

    Для пустой коллекции: True (vacuous truth).
    """
    return all(predicate(entity) for entity in entities)


def has_duplicates(entities: Iterable[EntityT], target: EntityT) -> bool:
    """
    Есть ли в коллекции больше одной сущности с uuid как у target.

    Сам target тоже учитывается, если он есть в коллекции: список из одного
    target → False, список с target дважды (по uuid) → True.
    """
    matches = sum(1 for entity in entities if entity.uuid == target.uuid)
    return matches > 1


# =============================================================================
# SEARCH
# =============================================================================


def find_max(elements: Iterable[T], comparator: Comparator[T]) -> Optional[T]:
    """
    Максимальный элемент по компаратору.

    Один проход, без сортировки. Замена только при строго большем элементе,
    поэтому при равенстве побеждает первый увиденный.

    Args:
        elements: любая итерируемая последовательность
        comparator: cmp(a, b) → <0 / 0 / >0

    Returns:
        Максимальный элемент или None для пустого входа. Если сам максимум
        равен None (например, find_max([None], ...)), результат неотличим от
        пустого входа. Для коллекций, где None допустим, проверяйте пустоту
        заранее.

    Examples:
        >>> find_max([3, 7, 5], key_comparator(lambda x: x))
        7
        >>> find_max([], key_comparator(lambda x: x)) is None
        True
    """
    iterator = iter(elements)
    sentinel = object()
    current_max = next(iterator, sentinel)
    if current_max is sentinel:
        return None

    for element in iterator:
        if comparator(element, current_max) > 0:
            current_max = element
    return current_max


def find_most_recently_created_entity(entities: Collection[EntityT]) -> EntityT:
    """
    Сущность с наибольшим created_on.

    Raises:
        EmptyCollectionError: если коллекция пуста
    """
    latest = find_max(entities, CREATED_ON_COMPARATOR)
    if latest is None:
        LOGGER.debug("find_most_recently_created_entity called on empty collection")
        raise EmptyCollectionError("Cannot find most recently created entity: collection is empty")
    return latest


# =============================================================================
# MUTATION
# =============================================================================


def _check_index(index: int, length: int) -> None:
    if not 0 <= index < length:
        raise IndexError(f"Index {index} out of bounds for length {length}")


def swap(elements: MutableSequence[T], i: int, j: int) -> None:
    """
    Обмен элементов i и j на месте.

    Оба индекса проверяются ДО изменения списка; отрицательные индексы
    считаются выходом за границы.

    Raises:
        IndexError: если i или j вне [0, len(elements))
    """
    length = len(elements)
    _check_index(i, length)
    _check_index(j, length)

    elements[i], elements[j] = elements[j], elements[i]
    LOGGER.debug("Swapped positions %d and %d", i, j)
