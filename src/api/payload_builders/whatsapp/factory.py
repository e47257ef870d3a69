"""Serialização da união outbound para o formato da API Meta."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter

from app.domain.outbound_messages import OutboundMessage

if TYPE_CHECKING:
    from app.domain.outbound_messages import OutboundBase

_OUTBOUND_ADAPTER: TypeAdapter[OutboundMessage] = TypeAdapter(OutboundMessage)


def parse_outbound_message(data: dict[str, Any]) -> OutboundBase:
    """Valida um dict na variante outbound correspondente.

    Args:
        data: Mensagem no formato da API (com `type` explícito)

    Returns:
        Instância da variante selecionada pelo discriminador

    Raises:
        pydantic.ValidationError: Se tag desconhecida ou campo obrigatório ausente
    """
    return _OUTBOUND_ADAPTER.validate_python(data)


def build_outbound_payload(message: OutboundBase) -> dict[str, Any]:
    """Constrói o corpo JSON de envio a partir da variante.

    Campos opcionais não informados (None) não vão para o payload.
    """
    return message.model_dump(mode="json", exclude_none=True)
