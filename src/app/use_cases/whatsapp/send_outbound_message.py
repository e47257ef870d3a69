"""Use case para envio outbound WhatsApp."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.domain.outbound_messages import OutboundBase
    from app.protocols.http_client import WhatsAppHttpClientProtocol
    from app.protocols.payload_builder import PayloadBuilderProtocol
    from config.settings.whatsapp import WhatsAppSettings

logger = logging.getLogger(__name__)


class SendOutboundMessageUseCase:
    """Orquestra build e envio outbound para um tenant.

    Uma tentativa por chamada. Erros de transporte e respostas não-2xx
    sobem para quem chamou.
    """

    def __init__(
        self,
        settings: WhatsAppSettings,
        builder: PayloadBuilderProtocol,
        client: WhatsAppHttpClientProtocol,
    ) -> None:
        self._settings = settings
        self._builder = builder
        self._client = client

    async def execute(self, message: OutboundBase) -> Any:
        """Serializa a mensagem e faz o POST no endpoint do tenant.

        Returns:
            Corpo JSON da resposta da API, sem interpretação

        Raises:
            ValueError: phone_number_id ou access_token ausentes
            HttpError: falha de transporte, status não-2xx ou corpo não-JSON
        """
        endpoint = self._settings.get_messages_endpoint()
        payload = self._builder.build_full_payload(message)

        response = await self._client.send_message(
            endpoint=endpoint,
            access_token=self._settings.access_token,
            payload=payload,
        )

        logger.info(
            "message_sent_to_whatsapp_api",
            extra={
                "message_type": payload.get("type"),
                "message_id": _first_message_id(response),
            },
        )
        return response


def _first_message_id(response: Any) -> str | None:
    # Só para log; a resposta volta intacta para quem chamou
    if not isinstance(response, dict):
        return None
    messages = response.get("messages")
    if not isinstance(messages, list) or not messages or not isinstance(messages[0], dict):
        return None
    message_id = messages[0].get("id")
    return message_id if isinstance(message_id, str) else None
