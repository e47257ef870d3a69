"""Protocolos e contratos do core da aplicação."""

from .http_client import WhatsAppHttpClientProtocol
from .normalizer import MessageNormalizerProtocol
from .payload_builder import PayloadBuilderProtocol

__all__ = [
    "MessageNormalizerProtocol",
    "PayloadBuilderProtocol",
    "WhatsAppHttpClientProtocol",
]
