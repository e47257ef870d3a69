"""Builders para mensagens de mídia por link (image, video, audio, document, sticker)."""

from __future__ import annotations

from app.domain.outbound_messages import (
    CaptionedLinkContent,
    DocumentLinkContent,
    LinkContent,
    OutboundAudio,
    OutboundDocument,
    OutboundImage,
    OutboundSticker,
    OutboundVideo,
)


def build_image_message(to: str, link: str, caption: str | None = None) -> OutboundImage:
    return OutboundImage(to=to, image=CaptionedLinkContent(link=link, caption=caption))


def build_video_message(to: str, link: str, caption: str | None = None) -> OutboundVideo:
    return OutboundVideo(to=to, video=CaptionedLinkContent(link=link, caption=caption))


def build_audio_message(to: str, link: str) -> OutboundAudio:
    return OutboundAudio(to=to, audio=LinkContent(link=link))


def build_document_message(
    to: str,
    link: str,
    caption: str | None = None,
    filename: str | None = None,
) -> OutboundDocument:
    """Documento por link; filename aparece para o destinatário."""
    return OutboundDocument(
        to=to,
        document=DocumentLinkContent(link=link, caption=caption, filename=filename),
    )


def build_sticker_message(to: str, link: str) -> OutboundSticker:
    return OutboundSticker(to=to, sticker=LinkContent(link=link))
