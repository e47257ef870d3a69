"""Testes para config.logging e app.observability.correlation.

Cobre: configure_logging, get_logger, CorrelationIdFilter,
create_json_formatter e o ContextVar de correlation_id.
"""

from __future__ import annotations

import json
import logging

import pytest

from app.observability import (
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


def _record(msg: str = "msg", level: int = logging.INFO, name: str = "test") -> logging.LogRecord:
    return logging.LogRecord(
        name=name,
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_default_level_is_info(self) -> None:
        """Nível padrão INFO."""
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
        ],
    )
    def test_levels_case_insensitive(self, level: str, expected: int) -> None:
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_invalid_level_raises(self) -> None:
        """Nível inválido levanta ValueError."""
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="VERBOSE")

    def test_replaces_existing_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_handler_has_correlation_filter(self) -> None:
        configure_logging(correlation_id_getter=lambda: "custom-corr-id")
        handler = logging.getLogger().handlers[0]
        assert any(isinstance(f, CorrelationIdFilter) for f in handler.filters)

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "wa_webhook_bridge"


class TestGetLogger:
    """Testes para get_logger."""

    def test_returns_named_logger(self) -> None:
        logger = get_logger("test.module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.module"
        assert get_logger("test.module") is logger


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_adds_correlation_id_from_getter(self) -> None:
        filter_ = CorrelationIdFilter("my_service", lambda: "corr-123")
        record = _record()
        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "my_service"

    def test_explicit_correlation_id_wins(self) -> None:
        """correlation_id passado via extra é preservado."""
        filter_ = CorrelationIdFilter("svc", lambda: "from-getter")
        record = _record()
        record.correlation_id = "explicit-id"
        filter_.filter(record)
        assert record.correlation_id == "explicit-id"

    def test_empty_without_getter(self) -> None:
        filter_ = CorrelationIdFilter("service_name")
        record = _record(level=logging.ERROR)
        assert filter_.filter(record) is True
        assert record.correlation_id == ""


class TestCreateJsonFormatter:
    """Testes para create_json_formatter e constantes."""

    def test_field_constants(self) -> None:
        assert set(REQUIRED_LOG_FIELDS) == {
            "asctime",
            "levelname",
            "name",
            "message",
            "correlation_id",
            "service",
        }
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_returns_json_formatter(self) -> None:
        from pythonjsonlogger.json import JsonFormatter

        assert isinstance(create_json_formatter(), JsonFormatter)

    def test_output_is_json_with_renamed_fields(self) -> None:
        """Saída é um objeto JSON com level/logger renomeados e extras."""
        record = _record(msg="webhook_entry_rejected", name="api.normalizers")
        record.correlation_id = "abc-123"
        record.service = "test_service"
        record.entry_index = 0

        output = json.loads(create_json_formatter().format(record))

        assert output["message"] == "webhook_entry_rejected"
        assert output["level"] == "INFO"
        assert output["logger"] == "api.normalizers"
        assert output["correlation_id"] == "abc-123"
        assert output["service"] == "test_service"
        assert output["entry_index"] == 0


class TestCorrelationContext:
    """Testes para o correlation_id em ContextVar."""

    def test_default_is_empty(self) -> None:
        assert get_correlation_id() == ""

    def test_set_and_reset(self) -> None:
        token = set_correlation_id("req-42")
        try:
            assert get_correlation_id() == "req-42"
        finally:
            reset_correlation_id(token)
        assert get_correlation_id() == ""

    def test_set_without_value_generates_uuid(self) -> None:
        token = set_correlation_id()
        try:
            assert len(get_correlation_id()) == 36
        finally:
            reset_correlation_id(token)

    def test_generate_is_unique(self) -> None:
        assert generate_correlation_id() != generate_correlation_id()


class TestLoggingIntegration:
    """Fluxo completo: configure, get_logger, log."""

    def test_full_flow_emits_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(
            level="DEBUG",
            service_name="integration_test",
            correlation_id_getter=lambda: "int-test-001",
        )
        get_logger("integration.test").info("event_logged", extra={"latency_ms": 42})

        line = capsys.readouterr().err.strip().splitlines()[-1]
        output = json.loads(line)
        assert output["message"] == "event_logged"
        assert output["service"] == "integration_test"
        assert output["correlation_id"] == "int-test-001"
        assert output["latency_ms"] == 42
