"""Normalizer WhatsApp — envelope, dispatch e normalização de lotes.

Responsabilidades:
- Validar o envelope do webhook contra o tenant configurado
- Decodificar cada mensagem em uma das 13 variantes conhecidas
- Repassar status de entrega sem reshape
- Acumular sucessos e diagnósticos sem abortar o lote

Tipos suportados: order, text, unknown, location, contacts, reaction,
button, sticker, video, audio, document, image, interactive.
"""

from .envelope import EnvelopeDecodeError, WebhookPayload, parse_webhook_payload
from .extractor import MESSAGE_DECODERS, UNRECOGNIZED_MESSAGE_ERROR, DecodeResult, decode_message
from .normalizer import (
    NormalizationOutcome,
    iter_message_outcomes,
    iter_status_outcomes,
    normalize_messages,
    normalize_statuses,
)

__all__ = [
    "MESSAGE_DECODERS",
    "UNRECOGNIZED_MESSAGE_ERROR",
    "DecodeResult",
    "EnvelopeDecodeError",
    "NormalizationOutcome",
    "WebhookPayload",
    "decode_message",
    "iter_message_outcomes",
    "iter_status_outcomes",
    "normalize_messages",
    "normalize_statuses",
    "parse_webhook_payload",
]
