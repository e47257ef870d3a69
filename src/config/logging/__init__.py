"""Logging estruturado em JSON.

Uso:
    from config.logging import configure_logging

    # Uma vez, na inicialização do processo
    configure_logging(level="INFO", service_name="wa_webhook_bridge")

    # Nos módulos
    logger = logging.getLogger(__name__)
    logger.info("webhook_entry_rejected", extra={"entry_index": 0})

Todo record sai com: asctime, level, logger, message, correlation_id, service.
Nunca logar corpo de mensagem, telefone ou token.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
