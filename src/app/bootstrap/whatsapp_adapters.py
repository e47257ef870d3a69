"""Adapters concretos para WhatsApp (wiring em app/bootstrap).

Este módulo é o único autorizado a acoplar app <-> api.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.normalizers.whatsapp.normalizer import normalize_messages, normalize_statuses
from api.payload_builders.whatsapp.factory import build_outbound_payload
from app.protocols.normalizer import MessageNormalizerProtocol
from app.protocols.payload_builder import PayloadBuilderProtocol

if TYPE_CHECKING:
    from app.domain.outbound_messages import OutboundBase
    from config.settings.whatsapp import WhatsAppSettings


class GraphApiNormalizer(MessageNormalizerProtocol):
    """Normalizador de webhook Graph API ligado a um tenant."""

    def __init__(self, settings: WhatsAppSettings) -> None:
        self._settings = settings

    def normalize(self, raw_json: str | bytes) -> tuple[list[dict[str, Any]], list[str]]:
        return normalize_messages(self._settings, raw_json)

    def normalize_statuses(self, raw_json: str | bytes) -> tuple[list[Any], list[str]]:
        return normalize_statuses(self._settings, raw_json)


class GraphApiPayloadBuilder(PayloadBuilderProtocol):
    """Builder de payload para Graph API."""

    def build_full_payload(self, message: OutboundBase) -> dict[str, Any]:
        return build_outbound_payload(message)
