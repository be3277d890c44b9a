"""
Позиционные аргументы для pydantic-контейнеров.

pydantic принимает поля только по имени; контейнеры с фиксированным
порядком полей (Sourced, Limited) разрешают и позиционную форму.
"""

from typing import Any, Dict, Sequence, Tuple


def merge_positional(
    model_name: str,
    field_names: Sequence[str],
    args: Tuple[Any, ...],
    data: Dict[str, Any],
) -> Dict[str, Any]:
    """
    Слить позиционные аргументы с именованными.

    Args:
        model_name: имя модели (для сообщений об ошибках)
        field_names: поля в позиционном порядке
        args: позиционные аргументы конструктора
        data: именованные аргументы конструктора

    Returns:
        Именованные аргументы для BaseModel.__init__

    Raises:
        TypeError: лишние позиционные аргументы или поле задано дважды
    """
    if len(args) > len(field_names):
        raise TypeError(
            f"{model_name}() takes at most {len(field_names)} positional arguments "
            f"({len(args)} given)"
        )

    merged = dict(data)
    for name, value in zip(field_names, args):
        if name in merged:
            raise TypeError(f"{model_name}() got multiple values for argument '{name}'")
        merged[name] = value
    return merged
