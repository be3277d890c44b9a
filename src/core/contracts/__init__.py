"""
Contract Validation Module

Валидация JSON-представления сущностей по JSON Schema контрактам.
"""

from .validators import (
    BaseEntityValidator,
    ContractValidator,
    DEFAULT_SCHEMA_DIR,
    SchemaLoader,
    get_default_loader,
    validate_base_entity,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BaseEntityValidator",
    # Constants
    "DEFAULT_SCHEMA_DIR",
    # Functions
    "get_default_loader",
    "validate_base_entity",
]
