"""
StrictProcessor: обработчик сериализуемых и упорядоченных объектов

Контракт без реализации: process() принимает только типы, удовлетворяющие
SerializableComparable (model_dump_json + __lt__).
"""

from typing import Protocol, runtime_checkable

from src.core.interfaces.types import S


@runtime_checkable
class StrictProcessor(Protocol[S]):
    """Обработчик объектов типа S (serializable & comparable)."""

    def process(self, obj: S) -> None: ...
