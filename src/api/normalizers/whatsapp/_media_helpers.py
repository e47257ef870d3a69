"""Decoders de mensagens de mídia (image, video, audio, document, sticker).

O bloco de mídia é lido da chave com o mesmo nome do type.
"""

from __future__ import annotations

from typing import Any

from app.constants.whatsapp import InboundMessageType
from app.domain.inbound_media import (
    AudioData,
    AudioMessage,
    CaptionedMediaData,
    DocumentData,
    DocumentMessage,
    ImageMessage,
    StickerData,
    StickerMessage,
    VideoMessage,
)

from ._extraction_helpers import envelope_fields
from ._field_access import get_bool, get_object, get_str


def _media_fields(media: dict[str, Any]) -> dict[str, str]:
    return {
        "id": get_str(media, "id"),
        "mime_type": get_str(media, "mime_type"),
        "sha256": get_str(media, "sha256"),
    }


def _captioned(media: dict[str, Any]) -> CaptionedMediaData:
    return CaptionedMediaData(**_media_fields(media), caption=get_str(media, "caption"))


def decode_image(msg: dict[str, Any]) -> ImageMessage:
    return ImageMessage(
        **envelope_fields(msg, InboundMessageType.IMAGE),
        image=_captioned(get_object(msg, "image")),
    )


def decode_video(msg: dict[str, Any]) -> VideoMessage:
    return VideoMessage(
        **envelope_fields(msg, InboundMessageType.VIDEO),
        video=_captioned(get_object(msg, "video")),
    )


def decode_audio(msg: dict[str, Any]) -> AudioMessage:
    audio = get_object(msg, "audio")
    return AudioMessage(
        **envelope_fields(msg, InboundMessageType.AUDIO),
        audio=AudioData(**_media_fields(audio), voice=get_bool(audio, "voice")),
    )


def decode_document(msg: dict[str, Any]) -> DocumentMessage:
    document = get_object(msg, "document")
    return DocumentMessage(
        **envelope_fields(msg, InboundMessageType.DOCUMENT),
        document=DocumentData(
            **_media_fields(document),
            caption=get_str(document, "caption"),
            filename=get_str(document, "filename"),
        ),
    )


def decode_sticker(msg: dict[str, Any]) -> StickerMessage:
    sticker = get_object(msg, "sticker")
    return StickerMessage(
        **envelope_fields(msg, InboundMessageType.STICKER),
        sticker=StickerData(**_media_fields(sticker), animated=get_bool(sticker, "animated")),
    )
