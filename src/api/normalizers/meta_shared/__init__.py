"""Utilitários compartilhados para payloads da Graph API (Meta).

- Sanitização de identificadores do envelope
- Conferência de identificadores contra a configuração do tenant
"""

from .sanitizer import normalize_identifier
from .validator import identifiers_match

__all__ = [
    "identifiers_match",
    "normalize_identifier",
]
