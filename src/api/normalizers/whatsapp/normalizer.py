"""Normalização de lotes do webhook WhatsApp.

Fluxo: JSON bruto → envelope (fatal se inválido) → conferência do tenant
(por entry/change) → decode tolerante item a item.

Contrato público: normalize_messages / normalize_statuses devolvem
(sucessos, erros) como duas listas independentes. A ordem dentro de cada
lista segue a travessia entry → change → item, mas não há ligação
posicional entre as duas. iter_*_outcomes expõe a sequência ordenada
completa, com os índices de origem de cada resultado.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .envelope import EnvelopeRejection, iter_accepted_changes, parse_webhook_payload
from .extractor import decode_message

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from config.settings.whatsapp import WhatsAppSettings

    from .envelope import WebhookPayload

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NormalizationOutcome:
    """Resultado de um item (ou de um entry/change rejeitado).

    Exatamente um entre value e error vem preenchido. Rejeições de
    envelope têm item_index None (e change_index None se for o entry).
    """

    entry_index: int
    change_index: int | None
    item_index: int | None
    value: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _rejected(rejection: EnvelopeRejection) -> NormalizationOutcome:
    return NormalizationOutcome(
        entry_index=rejection.entry_index,
        change_index=rejection.change_index,
        item_index=None,
        error=rejection.message,
    )


def iter_message_outcomes(
    settings: WhatsAppSettings,
    raw_json: str | bytes,
) -> Iterator[NormalizationOutcome]:
    """Gera o resultado de cada mensagem do lote, em ordem.

    Itens sem `type` não geram resultado.

    Raises:
        EnvelopeDecodeError: antes de qualquer item, se o envelope for inválido
    """
    payload = parse_webhook_payload(raw_json)
    return _message_outcomes(payload, settings)


def _message_outcomes(
    payload: WebhookPayload,
    settings: WhatsAppSettings,
) -> Iterator[NormalizationOutcome]:
    for accepted in iter_accepted_changes(payload, settings):
        if isinstance(accepted, EnvelopeRejection):
            yield _rejected(accepted)
            continue
        for item_index, item in enumerate(accepted.change.value.messages):
            result = decode_message(item)
            if result.skipped:
                continue
            yield NormalizationOutcome(
                entry_index=accepted.entry_index,
                change_index=accepted.change_index,
                item_index=item_index,
                value=result.value,
                error=result.error,
            )


def iter_status_outcomes(
    settings: WhatsAppSettings,
    raw_json: str | bytes,
) -> Iterator[NormalizationOutcome]:
    """Gera o resultado de cada status do lote, em ordem.

    Status têm um único shape e seguem sem reshape (JSON opaco).

    Raises:
        EnvelopeDecodeError: antes de qualquer item, se o envelope for inválido
    """
    payload = parse_webhook_payload(raw_json)
    return _status_outcomes(payload, settings)


def _status_outcomes(
    payload: WebhookPayload,
    settings: WhatsAppSettings,
) -> Iterator[NormalizationOutcome]:
    for accepted in iter_accepted_changes(payload, settings):
        if isinstance(accepted, EnvelopeRejection):
            yield _rejected(accepted)
            continue
        for item_index, status in enumerate(accepted.change.value.statuses):
            yield NormalizationOutcome(
                entry_index=accepted.entry_index,
                change_index=accepted.change_index,
                item_index=item_index,
                value=status,
            )


def split_outcomes(outcomes: Iterable[NormalizationOutcome]) -> tuple[list[Any], list[str]]:
    """Separa a sequência ordenada nas listas de sucesso e de erro."""
    success: list[Any] = []
    errors: list[str] = []
    for outcome in outcomes:
        if outcome.error is None:
            success.append(outcome.value)
        else:
            errors.append(outcome.error)
    return success, errors


def normalize_messages(
    settings: WhatsAppSettings,
    raw_json: str | bytes,
) -> tuple[list[dict[str, Any]], list[str]]:
    """Normaliza as mensagens de um webhook.

    Args:
        settings: Tenant (business_account_id e phone_number_id conferidos)
        raw_json: Corpo bruto do webhook

    Returns:
        (mensagens normalizadas, diagnósticos)

    Raises:
        EnvelopeDecodeError: Se o corpo não tiver o shape de envelope
    """
    success, errors = split_outcomes(iter_message_outcomes(settings, raw_json))
    logger.debug(
        "webhook_messages_normalized",
        extra={"success_count": len(success), "error_count": len(errors)},
    )
    return success, errors


def normalize_statuses(
    settings: WhatsAppSettings,
    raw_json: str | bytes,
) -> tuple[list[Any], list[str]]:
    """Extrai os status de entrega de um webhook.

    Returns:
        (status como recebidos, diagnósticos)

    Raises:
        EnvelopeDecodeError: Se o corpo não tiver o shape de envelope
    """
    success, errors = split_outcomes(iter_status_outcomes(settings, raw_json))
    logger.debug(
        "webhook_statuses_normalized",
        extra={"success_count": len(success), "error_count": len(errors)},
    )
    return success, errors
