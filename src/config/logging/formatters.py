"""Formatter JSON (python-json-logger) com campos padronizados."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria JsonFormatter com os campos obrigatórios.

    Exemplo de output:
        {"asctime": "...", "level": "INFO", "logger": "api.normalizers.whatsapp.normalizer",
         "message": "webhook_entry_rejected", "correlation_id": "abc-123",
         "service": "wa_webhook_bridge", "entry_index": 0}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
