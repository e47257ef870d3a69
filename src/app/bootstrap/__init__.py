"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging e conecta
implementações concretas (camada api) aos protocolos do app.

Uso:
    from app.bootstrap import initialize_app, create_whatsapp_normalizer

    initialize_app()
    normalizer = create_whatsapp_normalizer()
    messages, errors = normalizer.normalize(raw_body)
"""

from __future__ import annotations

import logging

from app.bootstrap.whatsapp_factory import (
    create_whatsapp_normalizer,
    create_whatsapp_outbound_use_case,
    send,
)
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_whatsapp_settings

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação (logging JSON com correlation_id).

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Raises:
        RuntimeError: Se houver erros em ambiente estrito.
    """
    base = get_base_settings()
    strict_mode = base.environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"whatsapp: {error}" for error in get_whatsapp_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


__all__ = [
    "create_whatsapp_normalizer",
    "create_whatsapp_outbound_use_case",
    "initialize_app",
    "send",
    "validate_runtime_settings",
]
