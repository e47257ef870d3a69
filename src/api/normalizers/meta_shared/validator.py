"""Conferência de identificadores do envelope contra o tenant."""

from __future__ import annotations

from .sanitizer import normalize_identifier


def identifiers_match(received: str, expected: str) -> bool:
    """Compara ID recebido (sanitizado) com o configurado.

    Comparação exata e case-sensitive; o valor configurado é usado como está.
    """
    return normalize_identifier(received) == expected
