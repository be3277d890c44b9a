"""
Tests for JSON Schema Contract Validators

Тестирование валидации сериализованных сущностей:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей, типов и constraints
- Интеграция с Pydantic моделью BaseEntity
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError

import src.core.contracts.validators as validators_module
from src.core.contracts import (
    DEFAULT_SCHEMA_DIR,
    BaseEntityValidator,
    ContractValidator,
    SchemaLoader,
    get_default_loader,
    validate_base_entity,
)
from src.core.domain import BaseEntity


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_entity_payload():
    """Валидная сериализованная сущность."""
    return {
        "id": 7,
        "uuid": "2f1c7a8e-5b0d-4a3e-9c51-0d4a1f6b9e22",
        "created_on": "2024-01-01T12:00:00Z",
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_load_base_entity_schema(self) -> None:
        schema = SchemaLoader().load_schema("base_entity")
        assert schema["title"] == "BaseEntity"
        assert set(schema["required"]) == {"id", "uuid", "created_on"}

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("base_entity") is loader.load_schema("base_entity")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nowhere")

    def test_default_dir_is_package_data(self) -> None:
        """Схемы лежат внутри пакета, а не в корне проекта"""
        package_dir = Path(validators_module.__file__).parent
        assert DEFAULT_SCHEMA_DIR == package_dir / "schema"
        assert SchemaLoader().schema_dir == DEFAULT_SCHEMA_DIR
        assert (DEFAULT_SCHEMA_DIR / "base_entity.json").is_file()

    def test_default_loader_created_lazily(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Общий загрузчик создаётся при первом обращении и переиспользуется"""
        monkeypatch.setattr(validators_module, "_SCHEMA_LOADER", None)
        loader = get_default_loader()
        assert validators_module._SCHEMA_LOADER is loader
        assert get_default_loader() is loader

    def test_invalid_schema_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema in broken.json"):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_custom_loader_for_validator(self, tmp_path: Path) -> None:
        (tmp_path / "tag.json").write_text(
            json.dumps({"type": "object", "required": ["name"]}), encoding="utf-8"
        )
        validator = ContractValidator("tag", loader=SchemaLoader(tmp_path))
        assert validator.is_valid({"name": "x"})
        assert not validator.is_valid({})


# =============================================================================
# BASE ENTITY CONTRACT
# =============================================================================


class TestBaseEntityContract:
    """Тесты контракта base_entity"""

    def test_valid_payload(self, valid_entity_payload) -> None:
        validate_base_entity(valid_entity_payload)

    def test_unsaved_entity_null_id(self, valid_entity_payload) -> None:
        valid_entity_payload["id"] = None
        validate_base_entity(valid_entity_payload)

    def test_extra_fields_allowed(self, valid_entity_payload) -> None:
        valid_entity_payload["title"] = "extra"
        assert BaseEntityValidator().is_valid(valid_entity_payload)

    @pytest.mark.parametrize("field", ["id", "uuid", "created_on"])
    def test_required_fields(self, valid_entity_payload, field: str) -> None:
        del valid_entity_payload[field]
        with pytest.raises(ValidationError):
            validate_base_entity(valid_entity_payload)

    def test_id_minimum(self, valid_entity_payload) -> None:
        valid_entity_payload["id"] = 0
        with pytest.raises(ValidationError):
            validate_base_entity(valid_entity_payload)

    def test_uuid_pattern(self, valid_entity_payload) -> None:
        valid_entity_payload["uuid"] = "not-a-uuid"
        with pytest.raises(ValidationError):
            validate_base_entity(valid_entity_payload)

    def test_iter_errors_reports_all(self) -> None:
        errors = list(BaseEntityValidator().iter_errors({"id": "x"}))
        # type error на id + два отсутствующих required поля
        assert len(errors) == 3

    def test_pydantic_dump_conforms(self) -> None:
        """model_dump(mode='json') соответствует контракту"""
        validate_base_entity(BaseEntity().model_dump(mode="json"))
        validate_base_entity(BaseEntity(id=3).model_dump(mode="json"))
