"""Sanitização de identificadores vindos em payloads Meta."""

from __future__ import annotations


def normalize_identifier(value: str) -> str:
    """Remove espaços e aspas que envolvem o identificador.

    Alguns emissores mandam o ID duplamente codificado (ex: '"123"').

    Args:
        value: ID recebido no webhook (entry.id, phone_number_id)

    Returns:
        ID limpo, comparável com o valor configurado
    """
    return value.strip().strip('"')
