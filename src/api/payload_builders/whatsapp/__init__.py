"""Builders de payload outbound para a API Meta/WhatsApp.

Cada builder devolve uma variante tipada da união OutboundMessage;
build_outbound_payload a converte no JSON enviado ao transporte.
"""

from api.payload_builders.whatsapp.factory import (
    build_outbound_payload,
    parse_outbound_message,
)
from api.payload_builders.whatsapp.interactive import (
    build_list_message,
    build_reply_buttons_message,
)
from api.payload_builders.whatsapp.media import (
    build_audio_message,
    build_document_message,
    build_image_message,
    build_sticker_message,
    build_video_message,
)
from api.payload_builders.whatsapp.text import build_text_message

__all__ = [
    "build_audio_message",
    "build_document_message",
    "build_image_message",
    "build_list_message",
    "build_outbound_payload",
    "build_reply_buttons_message",
    "build_sticker_message",
    "build_text_message",
    "build_video_message",
    "parse_outbound_message",
]
