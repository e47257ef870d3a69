"""Mensagens inbound normalizadas (união fechada de 13 variantes).

Cada variante espelha o shape que a Meta envia no webhook para o type
correspondente. Campos ausentes já chegam aqui preenchidos com o valor
zero do tipo (string vazia, 0, False, lista vazia).
"""

from __future__ import annotations

from pydantic import Field

from app.constants.whatsapp import InboundMessageType
from app.domain.inbound_base import InboundMessageBase, InboundModel, MessageContext
from app.domain.inbound_contacts import ContactsMessage
from app.domain.inbound_media import (
    AudioMessage,
    DocumentMessage,
    ImageMessage,
    StickerMessage,
    VideoMessage,
)


class TextBody(InboundModel):
    body: str = ""


class TextMessage(InboundMessageBase):
    text: TextBody = TextBody()


class ReactionPayload(InboundModel):
    message_id: str = ""
    emoji: str = ""


class ReactionMessage(InboundMessageBase):
    reaction: ReactionPayload = ReactionPayload()


class ButtonPayload(InboundModel):
    text: str = ""
    payload: str = ""


class ButtonMessage(InboundMessageBase):
    """Clique em quick reply de template."""

    context: MessageContext = MessageContext()
    button: ButtonPayload = ButtonPayload()


class LocationPayload(InboundModel):
    latitude: float = 0.0
    longitude: float = 0.0
    name: str = ""
    address: str = ""


class LocationMessage(InboundMessageBase):
    location: LocationPayload = LocationPayload()


class ErrorDetail(InboundModel):
    code: int = 0
    title: str = ""
    details: str = ""


class UnknownMessage(InboundMessageBase):
    """Mensagem que a própria Meta não suporta (type="unknown")."""

    errors: list[ErrorDetail] = Field(default_factory=list)


class ProductItem(InboundModel):
    product_retailer_id: str = ""
    quantity: int = 0
    item_price: float = 0.0
    currency: str = ""


class OrderDetails(InboundModel):
    catalog_id: str = ""
    text: str = ""
    product_items: list[ProductItem] = Field(default_factory=list)


class OrderMessage(InboundMessageBase):
    """Pedido enviado a partir do catálogo."""

    context: MessageContext = MessageContext()
    order: OrderDetails = OrderDetails()


class ButtonReply(InboundModel):
    id: str = ""
    title: str = ""


class ListReply(InboundModel):
    id: str = ""
    title: str = ""
    description: str = ""


class InteractiveReply(InboundModel):
    """Resposta a botão/lista; bloco ausente no item fica None e some no dump."""

    type: str = ""
    button_reply: ButtonReply | None = None
    list_reply: ListReply | None = None


class InteractiveMessage(InboundMessageBase):
    context: MessageContext = MessageContext()
    interactive: InteractiveReply = InteractiveReply()


NormalizedMessage = (
    OrderMessage
    | TextMessage
    | UnknownMessage
    | LocationMessage
    | ContactsMessage
    | ReactionMessage
    | ButtonMessage
    | StickerMessage
    | VideoMessage
    | AudioMessage
    | DocumentMessage
    | ImageMessage
    | InteractiveMessage
)

KNOWN_MESSAGE_TYPES = frozenset(member.value for member in InboundMessageType)
