"""
Тесты для модели BaseEntity и настройки логирования
"""

import logging
from datetime import datetime, timedelta, timezone
from uuid import UUID

import pytest
from pydantic import ValidationError

import src.common.logging as logging_setup
from src.core.domain import BaseEntity


class TestBaseEntity:
    """Тесты для BaseEntity"""

    def test_defaults(self) -> None:
        """Новая сущность: без id, со сгенерированным uuid и текущим временем"""
        before = datetime.now(timezone.utc)
        entity = BaseEntity()
        after = datetime.now(timezone.utc)

        assert entity.id is None
        assert entity.is_new
        assert isinstance(entity.uuid, UUID)
        assert before <= entity.created_on <= after

    def test_unique_uuids(self) -> None:
        assert BaseEntity().uuid != BaseEntity().uuid

    def test_id_assignment_validated(self) -> None:
        """Присваивание id валидируется"""
        entity = BaseEntity()
        entity.id = 5
        assert not entity.is_new

        with pytest.raises(ValidationError):
            entity.id = 0

    def test_naive_created_on_is_utc(self) -> None:
        entity = BaseEntity(created_on=datetime(2024, 1, 1, 12, 0))
        assert entity.created_on.tzinfo is not None
        assert entity.created_on == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def test_aware_created_on_converted_to_utc(self) -> None:
        plus_three = timezone(timedelta(hours=3))
        entity = BaseEntity(created_on=datetime(2024, 1, 1, 15, 0, tzinfo=plus_three))
        assert entity.created_on.utcoffset() == timedelta(0)
        assert entity.created_on.hour == 12

    def test_uuid_from_string(self) -> None:
        entity = BaseEntity(uuid="2f1c7a8e-5b0d-4a3e-9c51-0d4a1f6b9e22")
        assert entity.uuid == UUID("2f1c7a8e-5b0d-4a3e-9c51-0d4a1f6b9e22")


class TestConfigureLogging:
    """Тесты для configure_logging"""

    @pytest.fixture
    def basic_config_calls(self, monkeypatch: pytest.MonkeyPatch) -> list:
        calls: list = []
        monkeypatch.setattr(logging_setup, "_LOGGING_CONFIGURED", False)
        monkeypatch.setattr(logging_setup.logging, "basicConfig", lambda **kw: calls.append(kw))
        return calls

    def test_level_from_env(self, basic_config_calls: list, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(logging_setup.LOG_LEVEL_ENV_VAR, "debug")
        logging_setup.configure_logging()

        assert basic_config_calls == [
            {"level": logging.DEBUG, "format": logging_setup.LOG_FORMAT}
        ]

    def test_configured_once(self, basic_config_calls: list) -> None:
        logging_setup.configure_logging("WARNING")
        logging_setup.configure_logging("DEBUG")

        assert len(basic_config_calls) == 1
        assert basic_config_calls[0]["level"] == logging.WARNING

    def test_unknown_level_falls_back_to_info(self, basic_config_calls: list) -> None:
        logging_setup.configure_logging("chatty")
        assert basic_config_calls[0]["level"] == logging.INFO
