"""Protocolos de normalização inbound."""

from __future__ import annotations

from typing import Any, Protocol


class MessageNormalizerProtocol(Protocol):
    """Contrato mínimo para normalizar o corpo bruto de um webhook.

    Retorna (sucessos, diagnósticos) como listas independentes.
    """

    def normalize(self, raw_json: str | bytes) -> tuple[list[dict[str, Any]], list[str]]: ...

    def normalize_statuses(self, raw_json: str | bytes) -> tuple[list[Any], list[str]]: ...
