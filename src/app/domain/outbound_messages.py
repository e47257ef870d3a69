"""Mensagens outbound (união fechada e explicitamente discriminada).

Oito variantes: text, image, video, audio, document, sticker e as duas
interativas (button, list). O discriminador é `type`; para `interactive`
o subtipo vem de `interactive.type`. Nenhuma inferência por presença de
campos.

Ordem dos campos no JSON: to, messaging_product, recipient_type, type,
bloco de conteúdo.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Tag


class OutboundModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class OutboundBase(OutboundModel):
    to: str
    messaging_product: Literal["whatsapp"] = "whatsapp"
    recipient_type: str = "individual"


# --- Conteúdo -----------------------------------------------------------------


class TextContent(OutboundModel):
    body: str
    preview_url: bool = False


class LinkContent(OutboundModel):
    link: str


class CaptionedLinkContent(LinkContent):
    caption: str | None = None


class DocumentLinkContent(CaptionedLinkContent):
    filename: str | None = None


class InteractiveText(OutboundModel):
    text: str


class ReplyDetail(OutboundModel):
    id: str
    title: str


class ReplyButton(OutboundModel):
    type: Literal["reply"] = "reply"
    reply: ReplyDetail


class ButtonAction(OutboundModel):
    buttons: list[ReplyButton]


class ButtonInteractive(OutboundModel):
    type: Literal["button"] = "button"
    body: InteractiveText
    action: ButtonAction


class ListHeader(OutboundModel):
    type: Literal["text"] = "text"
    text: str


class ListRow(OutboundModel):
    id: str
    title: str
    description: str = ""


class ListSection(OutboundModel):
    title: str
    rows: list[ListRow]


class ListAction(OutboundModel):
    button: str
    sections: list[ListSection]


class ListInteractive(OutboundModel):
    type: Literal["list"] = "list"
    header: ListHeader
    body: InteractiveText
    footer: InteractiveText
    action: ListAction


# --- Variantes ----------------------------------------------------------------


class OutboundText(OutboundBase):
    type: Literal["text"] = "text"
    text: TextContent


class OutboundImage(OutboundBase):
    type: Literal["image"] = "image"
    image: CaptionedLinkContent


class OutboundVideo(OutboundBase):
    type: Literal["video"] = "video"
    video: CaptionedLinkContent


class OutboundAudio(OutboundBase):
    type: Literal["audio"] = "audio"
    audio: LinkContent


class OutboundDocument(OutboundBase):
    type: Literal["document"] = "document"
    document: DocumentLinkContent


class OutboundSticker(OutboundBase):
    type: Literal["sticker"] = "sticker"
    sticker: LinkContent


class OutboundInteractiveButton(OutboundBase):
    type: Literal["interactive"] = "interactive"
    interactive: ButtonInteractive


class OutboundInteractiveList(OutboundBase):
    type: Literal["interactive"] = "interactive"
    interactive: ListInteractive


def outbound_tag(value: Any) -> str | None:
    """Tag da variante para dict bruto ou instância já construída."""
    if isinstance(value, dict):
        message_type = value.get("type")
        interactive = value.get("interactive")
        interactive_type = interactive.get("type") if isinstance(interactive, dict) else None
    else:
        message_type = getattr(value, "type", None)
        interactive_type = getattr(getattr(value, "interactive", None), "type", None)

    if message_type == "interactive":
        return f"interactive_{interactive_type}" if interactive_type else None
    return message_type


OutboundMessage = Annotated[
    Union[
        Annotated[OutboundText, Tag("text")],
        Annotated[OutboundImage, Tag("image")],
        Annotated[OutboundVideo, Tag("video")],
        Annotated[OutboundAudio, Tag("audio")],
        Annotated[OutboundDocument, Tag("document")],
        Annotated[OutboundSticker, Tag("sticker")],
        Annotated[OutboundInteractiveButton, Tag("interactive_button")],
        Annotated[OutboundInteractiveList, Tag("interactive_list")],
    ],
    Discriminator(outbound_tag),
]
