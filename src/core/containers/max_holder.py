"""
MaxHolder: накопитель максимума

Хранит наибольшее значение из всех переданных в put(). Работает с любым
упорядоченным типом. Tie-break: заменяет только строго большее значение,
при равенстве остаётся первое увиденное.
"""

from typing import Generic, Optional

from src.core.interfaces.types import C


class MaxHolder(Generic[C]):
    """Накопитель максимума по полному порядку типа C."""

    def __init__(self, initial: Optional[C] = None):
        """
        Args:
            initial: начальное значение максимума (None: пока не задан)
        """
        self._max: Optional[C] = initial

    def put(self, value: C) -> None:
        """
        Учесть новое значение.

        Args:
            value: кандидат; заменяет текущий максимум, если тот не задан
                   или value строго больше
        """
        if self._max is None or value > self._max:
            self._max = value

    @property
    def max(self) -> Optional[C]:
        """Текущий максимум (None, если ничего не было передано)."""
        return self._max

    def __repr__(self) -> str:
        return f"MaxHolder(max={self._max!r})"
