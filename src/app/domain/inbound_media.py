"""Variantes inbound de mídia: image, video, audio, document, sticker.

O conteúdo fica em um bloco com o mesmo nome do type
(ex: type="video" → campo "video").
"""

from __future__ import annotations

from app.domain.inbound_base import InboundMessageBase, InboundModel


class MediaData(InboundModel):
    id: str = ""
    mime_type: str = ""
    sha256: str = ""


class CaptionedMediaData(MediaData):
    caption: str = ""


class DocumentData(CaptionedMediaData):
    filename: str = ""


class AudioData(MediaData):
    voice: bool = False


class StickerData(MediaData):
    animated: bool = False


class ImageMessage(InboundMessageBase):
    image: CaptionedMediaData = CaptionedMediaData()


class VideoMessage(InboundMessageBase):
    video: CaptionedMediaData = CaptionedMediaData()


class AudioMessage(InboundMessageBase):
    audio: AudioData = AudioData()


class DocumentMessage(InboundMessageBase):
    document: DocumentData = DocumentData()


class StickerMessage(InboundMessageBase):
    sticker: StickerData = StickerData()
