"""
Converter: конвертация T → R

Одно-методный контракт. Ошибки конвертации: обычные исключения Python
на усмотрение реализации.
"""

from typing import Protocol, runtime_checkable

from src.core.interfaces.types import R, T


@runtime_checkable
class Converter(Protocol[T, R]):
    """Конвертер из T в R."""

    def convert(self, source: T) -> R:
        """
        Args:
            source: исходное значение

        Returns:
            Сконвертированное значение
        """
        ...
