"""Cliente HTTP especializado para a API de mensagens WhatsApp.

Estende HttpClient com:
- Header Authorization Bearer + Content-Type JSON
- Validação de access_token antes de usar
- Resposta não-2xx ou não-JSON vira HttpError (com erro Meta anexado)
- Logging estruturado sem PII (sem token, sem corpo de mensagem)
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from .http_base import HttpClient, HttpClientConfig, HttpError
from .meta_errors import parse_meta_error
from .meta_logging import log_send_failure, log_success

if TYPE_CHECKING:
    import httpx

    from config.settings.whatsapp import WhatsAppSettings

logger: logging.Logger = logging.getLogger(__name__)


class WhatsAppHttpClient(HttpClient):
    """Cliente HTTP para POST /{phone_number_id}/messages."""

    async def send_message(
        self,
        endpoint: str,
        access_token: str,
        payload: dict[str, Any],
    ) -> Any:
        """Envia mensagem via WhatsApp API.

        Args:
            endpoint: URL do endpoint (ex: .../messages)
            access_token: Bearer token para autenticação
            payload: Payload JSON da mensagem

        Returns:
            Corpo JSON da resposta, sem interpretação

        Raises:
            ValueError: Se access_token está vazio
            HttpError: Falha de transporte, status não-2xx ou corpo não-JSON
        """
        if not access_token or not access_token.strip():
            logger.error("whatsapp_access_token_missing", extra={"endpoint": endpoint})
            raise ValueError("access_token é obrigatório para envio de mensagens")

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {access_token}",
        }
        response = await self.post(endpoint, json=payload, headers=headers)
        return self._process_response(response, endpoint)

    def _process_response(self, response: httpx.Response, endpoint: str) -> Any:
        try:
            body = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            body = None
            body_is_json = False
        else:
            body_is_json = True

        if not response.is_success:
            meta_error = parse_meta_error(body)
            log_send_failure(endpoint, response.status_code, meta_error)
            raise HttpError(
                f"http_status_{response.status_code}",
                status_code=response.status_code,
                meta_error=meta_error,
            )

        if not body_is_json:
            log_send_failure(endpoint, response.status_code, None)
            raise HttpError("invalid_json_response", status_code=response.status_code)

        log_success(endpoint, response.status_code)
        return body


def create_whatsapp_http_client(
    settings: WhatsAppSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> WhatsAppHttpClient:
    """Cria cliente com timeout do tenant."""
    config = HttpClientConfig(timeout_seconds=settings.request_timeout_seconds)
    return WhatsAppHttpClient(config=config, transport=transport)
