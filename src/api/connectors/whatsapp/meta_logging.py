"""Logs de envio para a API Meta/WhatsApp (sem PII)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .meta_errors import WhatsAppApiError

logger = logging.getLogger(__name__)


def log_send_failure(
    endpoint: str,
    status_code: int | None,
    meta_error: WhatsAppApiError | None,
) -> None:
    """Loga falha de envio sem payload nem token."""
    extra: dict[str, object] = {"endpoint": endpoint, "status_code": status_code}
    if meta_error is not None:
        extra.update(
            error_type=meta_error.error_type,
            error_code=meta_error.error_code,
            is_permanent=meta_error.is_permanent,
            fbtrace_id=meta_error.fbtrace_id,
        )
    logger.warning("whatsapp_send_failed", extra=extra)


def log_success(endpoint: str, status_code: int) -> None:
    logger.debug(
        "whatsapp_send_succeeded",
        extra={"endpoint": endpoint, "status_code": status_code},
    )
