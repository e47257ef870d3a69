"""Settings do tenant WhatsApp.

Identificadores do tenant (WABA e phone_number_id), credencial de envio e
endereço da Graph API. Os valores são strings opacas: só são usados em
comparação direta (webhook) ou para montar a URL de envio.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes do Graph API
GRAPH_API_VERSION: str = "v17.0"
GRAPH_API_BASE_URL: str = "https://graph.facebook.com"


@dataclass(frozen=True)
class WhatsAppSettings:
    """Configuração de um tenant WhatsApp.

    Attributes:
        api_base_url: URL base da Graph API
        api_version: Versão da Graph API (ex: v17.0)
        business_account_id: ID da conta de negócios (WABA), comparado com entry.id
        phone_number_id: ID do número, comparado com metadata.phone_number_id
        access_token: Bearer token para envio de mensagens
        request_timeout_seconds: Timeout da requisição HTTP de envio
    """

    api_base_url: str = GRAPH_API_BASE_URL
    api_version: str = GRAPH_API_VERSION
    business_account_id: str = ""
    phone_number_id: str = ""
    access_token: str = ""

    request_timeout_seconds: float = 30.0

    @classmethod
    def from_values(
        cls,
        api_base_url: str,
        api_version: str,
        business_account_id: str,
        phone_number_id: str,
        access_token: str,
    ) -> WhatsAppSettings:
        """Cria settings a partir dos cinco valores do tenant."""
        return cls(
            api_base_url=api_base_url,
            api_version=api_version,
            business_account_id=business_account_id,
            phone_number_id=phone_number_id,
            access_token=access_token,
        )

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.api_base_url}/{self.api_version}"

    def get_messages_endpoint(self) -> str:
        """Retorna URL para envio de mensagens.

        Returns:
            URL completa no formato: https://graph.facebook.com/v17.0/{id}/messages

        Raises:
            ValueError: Se phone_number_id não configurado.
        """
        if not self.phone_number_id:
            raise ValueError("phone_number_id é obrigatório")
        return f"{self.api_endpoint}/{self.phone_number_id}/messages"

    def validate(self) -> list[str]:
        """Valida configurações mínimas do tenant.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.business_account_id:
            errors.append("WHATSAPP_BUSINESS_ACCOUNT_ID não configurado")

        if not self.phone_number_id:
            errors.append("WHATSAPP_PHONE_NUMBER_ID não configurado")

        if not self.access_token:
            errors.append("WHATSAPP_ACCESS_TOKEN não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("WHATSAPP_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> WhatsAppSettings:
    """Carrega WhatsAppSettings a partir de variáveis de ambiente."""
    return WhatsAppSettings(
        api_base_url=os.getenv("WHATSAPP_API_BASE_URL", GRAPH_API_BASE_URL),
        api_version=os.getenv("WHATSAPP_API_VERSION", GRAPH_API_VERSION),
        business_account_id=os.getenv("WHATSAPP_BUSINESS_ACCOUNT_ID", ""),
        phone_number_id=os.getenv("WHATSAPP_PHONE_NUMBER_ID", ""),
        access_token=os.getenv("WHATSAPP_ACCESS_TOKEN", ""),
        request_timeout_seconds=float(
            os.getenv("WHATSAPP_REQUEST_TIMEOUT_SECONDS", "30")
        ),
    )


@lru_cache(maxsize=1)
def get_whatsapp_settings() -> WhatsAppSettings:
    """Retorna instância cacheada de WhatsAppSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
