"""
Limited: число с границами min/max

Immutable generic-модель: actual, min и max одного числового типа
(int, float, Decimal, Fraction).

КОНТРАКТ СОЗДАНИЯ:
1. Все три поля одного типа (Limited(1, 0.5, Decimal("2")) отклоняется)
2. Strict-режим: строки и прочие значения не приводятся к числу
3. Инвариант min <= actual <= max ожидается, но НЕ проверяется: вызывающий
   код не должен полагаться на его соблюдение. Для явной проверки есть
   is_within_bounds() и clamped().
"""

from typing import Any, Final, Generic, Tuple

from pydantic import BaseModel, Field, model_validator

from src.core.containers.positional import merge_positional
from src.core.interfaces.types import N

LIMITED_FIELDS: Final[Tuple[str, ...]] = ("actual", "min", "max")


class Limited(BaseModel, Generic[N]):
    """
    Число с нижней и верхней границей.

    Создаётся позиционно Limited(5, 1, 10) или по именам полей.
    Immutable модель (frozen=True): присваивание полю поднимает ValidationError.
    """

    actual: N = Field(..., description="Фактическое значение")
    min: N = Field(..., description="Нижняя граница")
    max: N = Field(..., description="Верхняя граница")

    model_config = {"frozen": True, "strict": True, "arbitrary_types_allowed": True}

    def __init__(self, *args: Any, **data: Any) -> None:
        super().__init__(**merge_positional(type(self).__name__, LIMITED_FIELDS, args, data))

    @model_validator(mode="after")
    def validate_same_type(self) -> "Limited[N]":
        """actual, min и max должны быть одного числового типа."""
        types = {type(self.actual), type(self.min), type(self.max)}
        if len(types) > 1:
            raise ValueError(
                "actual, min and max must share one numeric type, got "
                f"{type(self.actual).__name__}, {type(self.min).__name__}, "
                f"{type(self.max).__name__}"
            )
        return self

    def is_within_bounds(self) -> bool:
        """
        Проверка min <= actual <= max.

        Returns:
            True, если actual лежит в [min, max] (границы включительно)
        """
        return self.min <= self.actual <= self.max

    def clamped(self) -> N:
        """
        actual, ограниченный диапазоном [min, max].

        При min > max (некорректные границы) приоритет у min: сначала
        применяется max, затем min.
        """
        result = self.actual
        if result > self.max:
            result = self.max
        if result < self.min:
            result = self.min
        return result
