"""Testes para config.settings (base e tenant WhatsApp)."""

from __future__ import annotations

import pytest

from config.settings import (
    GRAPH_API_BASE_URL,
    GRAPH_API_VERSION,
    BaseSettings,
    WhatsAppSettings,
    get_base_settings,
    get_whatsapp_settings,
)
from config.settings.base.core import _parse_environment


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_whatsapp_settings.cache_clear()
    get_base_settings.cache_clear()
    yield
    get_whatsapp_settings.cache_clear()
    get_base_settings.cache_clear()


class TestWhatsAppSettings:
    """Testes para WhatsAppSettings."""

    def test_defaults(self) -> None:
        settings = WhatsAppSettings()
        assert settings.api_base_url == GRAPH_API_BASE_URL == "https://graph.facebook.com"
        assert settings.api_version == GRAPH_API_VERSION == "v17.0"
        assert settings.request_timeout_seconds == 30.0

    def test_from_values(self) -> None:
        settings = WhatsAppSettings.from_values(
            "https://example.test", "v18.0", "WABA", "PHONE", "TOKEN"
        )
        assert settings.api_base_url == "https://example.test"
        assert settings.api_version == "v18.0"
        assert settings.business_account_id == "WABA"
        assert settings.phone_number_id == "PHONE"
        assert settings.access_token == "TOKEN"

    def test_messages_endpoint(self) -> None:
        settings = WhatsAppSettings(phone_number_id="123")
        assert settings.api_endpoint == "https://graph.facebook.com/v17.0"
        assert settings.get_messages_endpoint() == "https://graph.facebook.com/v17.0/123/messages"

    def test_messages_endpoint_requires_phone_number_id(self) -> None:
        with pytest.raises(ValueError, match="phone_number_id"):
            WhatsAppSettings().get_messages_endpoint()

    def test_is_immutable(self) -> None:
        settings = WhatsAppSettings()
        with pytest.raises(AttributeError):
            settings.phone_number_id = "other"  # type: ignore[misc]

    def test_validate_ok(self) -> None:
        settings = WhatsAppSettings(
            business_account_id="WABA", phone_number_id="PHONE", access_token="TOKEN"
        )
        assert settings.validate() == []

    def test_validate_reports_each_problem(self) -> None:
        errors = WhatsAppSettings(request_timeout_seconds=0).validate()
        assert len(errors) == 4
        assert any("WHATSAPP_BUSINESS_ACCOUNT_ID" in error for error in errors)
        assert any("WHATSAPP_REQUEST_TIMEOUT_SECONDS" in error for error in errors)

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WHATSAPP_BUSINESS_ACCOUNT_ID", "WABA")
        monkeypatch.setenv("WHATSAPP_PHONE_NUMBER_ID", "PHONE")
        monkeypatch.setenv("WHATSAPP_ACCESS_TOKEN", "TOKEN")
        monkeypatch.setenv("WHATSAPP_API_VERSION", "v19.0")
        monkeypatch.setenv("WHATSAPP_REQUEST_TIMEOUT_SECONDS", "5")

        settings = get_whatsapp_settings()

        assert settings.business_account_id == "WABA"
        assert settings.phone_number_id == "PHONE"
        assert settings.api_version == "v19.0"
        assert settings.request_timeout_seconds == 5.0
        assert get_whatsapp_settings() is settings


class TestBaseSettings:
    """Testes para BaseSettings."""

    def test_defaults(self) -> None:
        settings = BaseSettings()
        assert settings.environment == "development"
        assert settings.service_name == "wa_webhook_bridge"
        assert settings.is_production is False
        assert settings.validate() == []

    def test_empty_service_name_is_invalid(self) -> None:
        assert BaseSettings(service_name="").validate() == ["SERVICE_NAME não pode ser vazio"]

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("prod", "production"),
            ("PRODUCTION", "production"),
            ("stage", "staging"),
            ("qualquer", "development"),
        ],
    )
    def test_parse_environment(self, raw: str, expected: str) -> None:
        assert _parse_environment(raw) == expected

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        settings = get_base_settings()
        assert settings.is_production is True
        assert settings.log_level == "DEBUG"
