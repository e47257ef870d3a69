"""Protocolos de construção de payload outbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.outbound_messages import OutboundBase


class PayloadBuilderProtocol(Protocol):
    """Contrato mínimo para serializar a mensagem outbound."""

    def build_full_payload(self, message: OutboundBase) -> dict[str, Any]: ...
