"""Base comum das mensagens inbound normalizadas.

Toda variante carrega from, id, timestamp e type. `from` é palavra
reservada em Python: o campo se chama `from_` e serializa com alias.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class InboundModel(BaseModel):
    """Modelo imutável; serializar com model_dump(by_alias=True, exclude_none=True)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class MessageContext(InboundModel):
    """Mensagem à qual o usuário respondeu (context do webhook)."""

    from_: str = Field("", alias="from")
    id: str = ""


class InboundMessageBase(InboundModel):
    """Campos de envelope presentes em todas as variantes."""

    from_: str = Field("", alias="from")
    id: str = ""
    timestamp: str = ""
    type: str = ""
