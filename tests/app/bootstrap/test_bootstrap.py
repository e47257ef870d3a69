"""Testes do composition root (app.bootstrap)."""

from __future__ import annotations

import logging

import pytest

from app.bootstrap import (
    create_whatsapp_normalizer,
    initialize_app,
    validate_runtime_settings,
)
from app.bootstrap.whatsapp_adapters import GraphApiNormalizer
from config.logging import CorrelationIdFilter
from config.settings import get_base_settings, get_whatsapp_settings
from config.settings.whatsapp import WhatsAppSettings


@pytest.fixture(autouse=True)
def _isolate(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "ENVIRONMENT",
        "LOG_LEVEL",
        "SERVICE_NAME",
        "WHATSAPP_BUSINESS_ACCOUNT_ID",
        "WHATSAPP_PHONE_NUMBER_ID",
        "WHATSAPP_ACCESS_TOKEN",
    ):
        monkeypatch.delenv(name, raising=False)
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    get_base_settings.cache_clear()
    get_whatsapp_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_whatsapp_settings.cache_clear()
    root.handlers = handlers
    root.setLevel(level)


def _set_tenant_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WHATSAPP_BUSINESS_ACCOUNT_ID", "BIZ1")
    monkeypatch.setenv("WHATSAPP_PHONE_NUMBER_ID", "PH1")
    monkeypatch.setenv("WHATSAPP_ACCESS_TOKEN", "token")


class TestInitializeApp:
    def test_configures_root_logger_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "warning")
        initialize_app()
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)


class TestValidateRuntimeSettings:
    def test_development_only_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="app.bootstrap"):
            validate_runtime_settings()
        assert any(r.message == "settings_validation_failed" for r in caplog.records)

    def test_production_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        with pytest.raises(RuntimeError, match="WHATSAPP_ACCESS_TOKEN"):
            validate_runtime_settings()

    def test_production_ok(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        _set_tenant_env(monkeypatch)
        validate_runtime_settings()


class TestCreateWhatsAppNormalizer:
    def test_uses_env_tenant(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _set_tenant_env(monkeypatch)
        raw = (
            '{"object":"whatsapp_business_account","entry":[{"id":"BIZ1","changes":'
            '[{"value":{"metadata":{"phone_number_id":"PH1"},"messages":'
            '[{"type":"text","text":{"body":"oi"}}]}}]}]}'
        )
        success, errors = create_whatsapp_normalizer().normalize(raw)
        assert errors == []
        assert success[0]["text"] == {"body": "oi"}

    def test_explicit_settings_cover_statuses(self) -> None:
        settings = WhatsAppSettings(business_account_id="BIZ1", phone_number_id="PH1")
        raw = (
            '{"object":"whatsapp_business_account","entry":[{"id":"BIZ1","changes":'
            '[{"value":{"metadata":{"phone_number_id":"PH1"},"statuses":'
            '[{"id":"wamid.1","status":"read"}]}}]}]}'
        )
        normalizer = create_whatsapp_normalizer(settings)
        assert isinstance(normalizer, GraphApiNormalizer)
        assert normalizer.normalize(raw) == ([], [])
        assert normalizer.normalize_statuses(raw) == ([{"id": "wamid.1", "status": "read"}], [])
