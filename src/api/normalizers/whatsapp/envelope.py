"""Envelope do webhook: parse estrutural e conferência do tenant.

O envelope é a única parte validada de forma estrita. Se não tiver o
shape esperado, a chamada inteira falha com EnvelopeDecodeError. Os itens
(messages/statuses) ficam como JSON bruto para o decode tolerante.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, ValidationError

from api.normalizers.meta_shared import identifiers_match

if TYPE_CHECKING:
    from collections.abc import Iterator

    from config.settings.whatsapp import WhatsAppSettings

logger = logging.getLogger(__name__)

ENTRY_NOT_RECOGNIZED = "Entry id not recognized index: {index}"
PHONE_NUMBER_NOT_RECOGNIZED = "Metadata phone_number_id not recognized index: {index}"


class EnvelopeDecodeError(ValueError):
    """Payload não é JSON ou não tem o shape de envelope esperado."""


class Metadata(BaseModel):
    display_phone_number: str = ""
    phone_number_id: str


class ChangeValue(BaseModel):
    messaging_product: str = ""
    metadata: Metadata
    messages: list[Any] = Field(default_factory=list)
    statuses: list[Any] = Field(default_factory=list)


class Change(BaseModel):
    value: ChangeValue
    field: str = ""


class Entry(BaseModel):
    id: str
    changes: list[Change]


class WebhookPayload(BaseModel):
    object: str
    entry: list[Entry]


@dataclass(frozen=True)
class EnvelopeRejection:
    """Entry ou change descartado por identificador desconhecido."""

    entry_index: int
    change_index: int | None
    message: str


@dataclass(frozen=True)
class AcceptedChange:
    """Change cujo entry e phone_number_id conferem com o tenant."""

    entry_index: int
    change_index: int
    change: Change


def parse_webhook_payload(raw_json: str | bytes) -> WebhookPayload:
    """Parseia o corpo do webhook no modelo de envelope.

    Raises:
        EnvelopeDecodeError: JSON inválido ou shape de envelope inválido
    """
    try:
        data = json.loads(raw_json)
    # JSONDecodeError e UnicodeDecodeError são ValueError; inteiros acima do
    # limite de dígitos também. Aninhamento profundo estoura a recursão.
    except (ValueError, RecursionError) as exc:
        raise EnvelopeDecodeError("invalid_json") from exc

    try:
        return WebhookPayload.model_validate(data)
    except ValidationError as exc:
        raise EnvelopeDecodeError(f"invalid_envelope ({exc.error_count()} errors)") from exc


def iter_accepted_changes(
    payload: WebhookPayload,
    settings: WhatsAppSettings,
) -> Iterator[AcceptedChange | EnvelopeRejection]:
    """Percorre entries/changes na ordem do batch conferindo o tenant.

    Entry com id diferente do business_account_id é pulado inteiro; change
    com phone_number_id diferente é pulado sem afetar os irmãos.
    """
    for entry_index, entry in enumerate(payload.entry):
        if not identifiers_match(entry.id, settings.business_account_id):
            logger.info("webhook_entry_rejected", extra={"entry_index": entry_index})
            yield EnvelopeRejection(
                entry_index=entry_index,
                change_index=None,
                message=ENTRY_NOT_RECOGNIZED.format(index=entry_index),
            )
            continue

        for change_index, change in enumerate(entry.changes):
            phone_number_id = change.value.metadata.phone_number_id
            if not identifiers_match(phone_number_id, settings.phone_number_id):
                logger.info(
                    "webhook_change_rejected",
                    extra={"entry_index": entry_index, "change_index": change_index},
                )
                yield EnvelopeRejection(
                    entry_index=entry_index,
                    change_index=change_index,
                    message=PHONE_NUMBER_NOT_RECOGNIZED.format(index=change_index),
                )
                continue

            yield AcceptedChange(
                entry_index=entry_index,
                change_index=change_index,
                change=change,
            )
