"""Erro da Graph API (objeto `error` do corpo de resposta)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

_PERMANENT_CODES = frozenset({400, 401, 403, 404, 413})
_PERMANENT_TYPES = frozenset({"OAuthException", "InvalidRequest"})


@dataclass(frozen=True)
class WhatsAppApiError:
    """Erro retornado pela API Meta/WhatsApp.

    Apenas informativo: esta camada não reenvia nem trata o erro.
    """

    error_type: str
    error_code: int
    error_message: str
    error_subcode: int | None = None
    fbtrace_id: str | None = None

    @property
    def is_permanent(self) -> bool:
        return is_permanent_error(self.error_code, self.error_type)


def is_permanent_error(error_code: int, error_type: str) -> bool:
    """Erro que não muda com novo envio (credencial, payload inválido)."""
    return error_code in _PERMANENT_CODES or error_type in _PERMANENT_TYPES


def parse_meta_error(response_data: Any) -> WhatsAppApiError | None:
    """Extrai o objeto `error` da resposta.

    Args:
        response_data: Corpo JSON já parseado (qualquer valor)

    Returns:
        WhatsAppApiError se houver erro, None caso contrário
    """
    if not isinstance(response_data, dict):
        return None
    error_obj = response_data.get("error")
    if not isinstance(error_obj, dict):
        return None

    code = error_obj.get("code")
    subcode = error_obj.get("error_subcode")
    trace_id = error_obj.get("fbtrace_id")
    return WhatsAppApiError(
        error_type=str(error_obj.get("type", "unknown")),
        error_code=code if isinstance(code, int) else 0,
        error_message=str(error_obj.get("message", "")),
        error_subcode=subcode if isinstance(subcode, int) else None,
        fbtrace_id=trace_id if isinstance(trace_id, str) else None,
    )
