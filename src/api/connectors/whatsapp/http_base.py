"""Cliente HTTP base (httpx assíncrono) para conectores da camada API.

Uma requisição por chamada: sem retry e sem backoff. Falhas de transporte
viram HttpError e sobem direto para quem chamou.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

if TYPE_CHECKING:
    from .meta_errors import WhatsAppApiError


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
    """Falha de envio sem dados sensíveis na mensagem.

    Attributes:
        status_code: Status HTTP quando houve resposta
        meta_error: Erro da Graph API extraído do corpo, se presente
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        meta_error: WhatsAppApiError | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.meta_error = meta_error


class HttpClient:
    """Cliente HTTP simples para chamadas externas."""

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """POST JSON; qualquer resposta HTTP é devolvida sem interpretação.

        Raises:
            HttpError: timeout ou erro de conexão/protocolo
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            async with httpx.AsyncClient(
                verify=self._config.verify_ssl,
                transport=self._transport,
            ) as client:
                return await client.post(
                    url,
                    json=json,
                    headers=merged_headers,
                    timeout=self._config.timeout_seconds,
                )
        except httpx.TimeoutException as exc:
            raise HttpError("http_timeout") from exc
        except httpx.HTTPError as exc:
            raise HttpError("http_connection_error") from exc
