"""Normalizers — conversão de payloads externos para modelos internos.

Estrutura:
- meta_shared/: sanitização e conferência de identificadores Meta
- whatsapp/: normalizer do webhook WhatsApp Business API
"""

from .whatsapp import normalize_messages, normalize_statuses

__all__ = [
    "normalize_messages",
    "normalize_statuses",
]
