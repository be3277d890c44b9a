"""
BaseEntity: базовая модель сущности

Минимальная форма сущности, с которой работают репозитории и утилиты
коллекций:
- id: идентификатор (None: сущность ещё не сохранена)
- uuid: стабильный ключ дедупликации
- created_on: время создания (UTC), задаёт порядок "самой свежей" сущности

Модель mutable (validate_assignment=True): репозиторий назначает id при save.
"""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, field_validator


def utc_now() -> datetime:
    """Текущее время в UTC (timezone-aware)."""
    return datetime.now(timezone.utc)


class BaseEntity(BaseModel):
    """
    Базовая сущность с идентичностью, ключом дедупликации и временем создания.

    Наследники добавляют собственные поля; утилиты из src.core.util
    опираются только на id, uuid и created_on.
    """

    id: Optional[int] = Field(default=None, ge=1, description="Идентификатор (None до сохранения)")
    uuid: UUID = Field(default_factory=uuid4, description="Ключ дедупликации")
    created_on: datetime = Field(default_factory=utc_now, description="Время создания (UTC)")

    model_config = {"validate_assignment": True}

    @field_validator("created_on")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        """
        Naive datetime трактуется как UTC.

        Иначе сравнение naive и aware значений в find_max упадёт с TypeError.
        """
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    @property
    def is_new(self) -> bool:
        """True, если сущность ещё не получила id."""
        return self.id is None
