"""Factory de wiring para WhatsApp (bootstrap)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.connectors.whatsapp.http_client import create_whatsapp_http_client
from app.bootstrap.whatsapp_adapters import GraphApiNormalizer, GraphApiPayloadBuilder
from app.use_cases.whatsapp.send_outbound_message import SendOutboundMessageUseCase
from config.settings import get_whatsapp_settings

if TYPE_CHECKING:
    import httpx

    from app.domain.outbound_messages import OutboundBase
    from app.protocols.http_client import WhatsAppHttpClientProtocol
    from config.settings.whatsapp import WhatsAppSettings


def create_whatsapp_outbound_use_case(
    settings: WhatsAppSettings | None = None,
    client: WhatsAppHttpClientProtocol | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> SendOutboundMessageUseCase:
    """Cria use case outbound com dependências injetadas.

    Sem settings, usa o tenant carregado do ambiente.
    """
    tenant = settings or get_whatsapp_settings()
    return SendOutboundMessageUseCase(
        settings=tenant,
        builder=GraphApiPayloadBuilder(),
        client=client or create_whatsapp_http_client(tenant, transport=transport),
    )


def create_whatsapp_normalizer(settings: WhatsAppSettings | None = None) -> GraphApiNormalizer:
    """Cria normalizador inbound Graph API."""
    return GraphApiNormalizer(settings or get_whatsapp_settings())


async def send(
    settings: WhatsAppSettings,
    message: OutboundBase,
    client: WhatsAppHttpClientProtocol | None = None,
) -> Any:
    """Envia uma mensagem outbound e devolve o JSON da resposta.

    Raises:
        ValueError: phone_number_id ou access_token ausentes
        HttpError: falha de transporte, status não-2xx ou corpo não-JSON
    """
    use_case = create_whatsapp_outbound_use_case(settings, client=client)
    return await use_case.execute(message)
