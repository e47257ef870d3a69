"""Dispatch de itens do webhook para o decoder da variante.

Responsabilidades:
- Ler o discriminador `type` do item bruto
- Escolher o decoder pela tabela fechada MESSAGE_DECODERS
- Serializar a variante de volta para JSON (preenche defaults, descarta extras)

Único ponto onde o diagnóstico de formato não reconhecido é produzido.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from app.constants.whatsapp import InboundMessageType

from ._contacts_helpers import decode_contacts
from ._extraction_helpers import (
    decode_button,
    decode_interactive,
    decode_location,
    decode_order,
    decode_reaction,
    decode_text,
    decode_unknown,
)
from ._media_helpers import (
    decode_audio,
    decode_document,
    decode_image,
    decode_sticker,
    decode_video,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.domain.inbound_messages import NormalizedMessage

logger = logging.getLogger(__name__)

UNRECOGNIZED_MESSAGE_ERROR = "Message format could not be recognized"

MESSAGE_DECODERS: dict[str, Callable[[dict[str, Any]], NormalizedMessage]] = {
    InboundMessageType.ORDER: decode_order,
    InboundMessageType.TEXT: decode_text,
    InboundMessageType.UNKNOWN: decode_unknown,
    InboundMessageType.LOCATION: decode_location,
    InboundMessageType.CONTACTS: decode_contacts,
    InboundMessageType.REACTION: decode_reaction,
    InboundMessageType.BUTTON: decode_button,
    InboundMessageType.STICKER: decode_sticker,
    InboundMessageType.VIDEO: decode_video,
    InboundMessageType.AUDIO: decode_audio,
    InboundMessageType.DOCUMENT: decode_document,
    InboundMessageType.IMAGE: decode_image,
    InboundMessageType.INTERACTIVE: decode_interactive,
}


@dataclass(frozen=True)
class DecodeResult:
    """Resultado de um item: valor normalizado, diagnóstico ou nada.

    Os dois vazios significa item ignorado (sem `type`).
    """

    value: dict[str, Any] | None = None
    error: str | None = None

    @property
    def skipped(self) -> bool:
        return self.value is None and self.error is None


def decode_message(msg: Any) -> DecodeResult:
    """Decodifica um item de `messages` conforme seu `type`.

    Args:
        msg: Item bruto (qualquer valor JSON)

    Returns:
        DecodeResult com value (dict JSON da variante), error ou vazio
    """
    if not isinstance(msg, dict) or "type" not in msg:
        logger.debug("message_without_type_skipped")
        return DecodeResult()

    message_type = msg["type"]
    decoder = MESSAGE_DECODERS.get(message_type) if isinstance(message_type, str) else None
    if decoder is None:
        logger.info(
            "unsupported_message_type_received",
            extra={"message_type": str(message_type)[:64]},
        )
        return DecodeResult(error=UNRECOGNIZED_MESSAGE_ERROR)

    return DecodeResult(value=decoder(msg).model_dump(by_alias=True, exclude_none=True))
