"""Conector WhatsApp — único ponto de IO com a Graph API.

Responsabilidades:
- HTTP client para POST de mensagens
- Erros da Graph API (somente leitura, sem retry)
"""

from .http_base import HttpClient, HttpClientConfig, HttpError
from .http_client import WhatsAppHttpClient, create_whatsapp_http_client
from .meta_errors import WhatsAppApiError, is_permanent_error, parse_meta_error

__all__ = [
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "WhatsAppApiError",
    "WhatsAppHttpClient",
    "create_whatsapp_http_client",
    "is_permanent_error",
    "parse_meta_error",
]
