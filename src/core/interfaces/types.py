"""
Capability types: общие bounds для generic-контейнеров

Protocol-определения и TypeVar'ы, которыми параметризуются контейнеры,
интерфейсы и утилиты пакета:
- Comparable: тип с полным порядком (достаточно __lt__ / __gt__)
- SerializableComparable: тип, который умеет сериализоваться и упорядочен
"""

from decimal import Decimal
from fractions import Fraction
from typing import Any, Protocol, TypeVar, runtime_checkable


# =============================================================================
# CAPABILITY PROTOCOLS
# =============================================================================


@runtime_checkable
class Comparable(Protocol):
    """Тип с полным порядком (total order)."""

    def __lt__(self, other: Any) -> bool: ...

    def __gt__(self, other: Any) -> bool: ...


@runtime_checkable
class SerializableComparable(Protocol):
    """
    Тип, одновременно сериализуемый и упорядоченный.

    Сериализуемость: наличие model_dump_json() (как у pydantic-моделей),
    порядок: наличие __lt__.
    """

    def model_dump_json(self) -> str: ...

    def __lt__(self, other: Any) -> bool: ...


# =============================================================================
# TYPE VARIABLES
# =============================================================================

# Произвольный тип значения
T = TypeVar("T")

# Результат конвертации
R = TypeVar("R")

# Упорядоченный тип (bound=Comparable)
C = TypeVar("C", bound=Comparable)

# Сериализуемый и упорядоченный тип
S = TypeVar("S", bound=SerializableComparable)

# Элемент коллекции
E = TypeVar("E")

# Числовой тип. Одинаковый тип полей Limited проверяется в самой модели:
# pydantic валидирует непараметризованный N как union по каждому полю отдельно
N = TypeVar("N", int, float, Decimal, Fraction)

