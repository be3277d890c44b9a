"""
ComparableCollection: коллекция, упорядоченная по размеру

Abstract Collection, которая сравнима с любой другой sized-коллекцией
исключительно по количеству элементов (по возрастанию). Содержимое в
сравнении не участвует.

__eq__ / __hash__ НЕ переопределяются: равенство размеров не означает
равенства коллекций.
"""

from collections.abc import Collection, Sized
from typing import Any, Generic, Iterable, Iterator, List, Optional

from src.core.interfaces.types import E


class ComparableCollection(Collection, Generic[E]):
    """
    Collection[E] + порядок по len().

    Наследник обязан реализовать __len__, __iter__ и __contains__;
    compare_to и операторы <, <=, >, >= выводятся из __len__.
    """

    def compare_to(self, other: Sized) -> int:
        """
        Сравнение по количеству элементов.

        Args:
            other: любая коллекция с __len__

        Returns:
            -1, 0 или 1 (как len(self) относительно len(other))
        """
        mine, theirs = len(self), len(other)
        return (mine > theirs) - (mine < theirs)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Sized):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Sized):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Sized):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Sized):
            return NotImplemented
        return self.compare_to(other) >= 0


class ComparableList(ComparableCollection[E]):
    """Конкретная ComparableCollection поверх list."""

    def __init__(self, items: Optional[Iterable[E]] = None):
        self._items: List[E] = list(items) if items is not None else []

    def add(self, item: E) -> None:
        """Добавить элемент в конец."""
        self._items.append(item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[E]:
        return iter(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __repr__(self) -> str:
        return f"ComparableList({self._items!r})"
