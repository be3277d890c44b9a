"""
Sourced: значение с источником

Mutable generic-контейнер: хранит произвольное значение и строковую метку
его происхождения. Без инвариантов, кроме типа полей.
"""

from typing import Any, Final, Generic, Tuple

from pydantic import BaseModel, Field

from src.core.containers.positional import merge_positional
from src.core.interfaces.types import T

SOURCED_FIELDS: Final[Tuple[str, ...]] = ("value", "source")


class Sourced(BaseModel, Generic[T]):
    """
    Контейнер значения с источником.

    Создаётся позиционно Sourced(42, "sensor") или по именам полей.
    Чтение атрибута: get, присваивание: set.

        >>> s = Sourced(42, "sensor")
        >>> s.value = 43
        >>> s.source
        'sensor'

    Параметризованный Sourced[int] валидирует value при создании и
    присваивании; непараметризованный принимает любое значение.
    """

    value: T = Field(..., description="Значение")
    source: str = Field(..., description="Источник значения")

    model_config = {"validate_assignment": True, "arbitrary_types_allowed": True}

    def __init__(self, *args: Any, **data: Any) -> None:
        super().__init__(**merge_positional(type(self).__name__, SOURCED_FIELDS, args, data))
