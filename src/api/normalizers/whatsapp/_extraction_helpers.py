"""Decoders por tipo de mensagem WhatsApp.

Cada função recebe o item bruto do webhook e devolve a variante tipada.
Nenhuma levanta exceção: campos ausentes caem no default (ver _field_access).
Mídia e contatos ficam em módulos próprios.
"""

from __future__ import annotations

from typing import Any

from app.constants.whatsapp import InboundMessageType
from app.domain.inbound_base import MessageContext
from app.domain.inbound_messages import (
    ButtonMessage,
    ButtonPayload,
    ButtonReply,
    ErrorDetail,
    InteractiveMessage,
    InteractiveReply,
    ListReply,
    LocationMessage,
    LocationPayload,
    OrderDetails,
    OrderMessage,
    ProductItem,
    ReactionMessage,
    ReactionPayload,
    TextBody,
    TextMessage,
    UnknownMessage,
)

from ._field_access import get_float, get_int, get_object, get_str, map_records


def envelope_fields(msg: dict[str, Any], message_type: str) -> dict[str, str]:
    """Campos comuns a todas as variantes.

    `type` recebe a chave de dispatch, nunca o valor lido do item.
    """
    return {
        "from_": get_str(msg, "from"),
        "id": get_str(msg, "id"),
        "timestamp": get_str(msg, "timestamp"),
        "type": str(message_type),
    }


def _decode_context(msg: dict[str, Any]) -> MessageContext:
    context = get_object(msg, "context")
    return MessageContext(from_=get_str(context, "from"), id=get_str(context, "id"))


def decode_text(msg: dict[str, Any]) -> TextMessage:
    text = get_object(msg, "text")
    return TextMessage(
        **envelope_fields(msg, InboundMessageType.TEXT),
        text=TextBody(body=get_str(text, "body")),
    )


def decode_reaction(msg: dict[str, Any]) -> ReactionMessage:
    reaction = get_object(msg, "reaction")
    return ReactionMessage(
        **envelope_fields(msg, InboundMessageType.REACTION),
        reaction=ReactionPayload(
            message_id=get_str(reaction, "message_id"),
            emoji=get_str(reaction, "emoji"),
        ),
    )


def decode_button(msg: dict[str, Any]) -> ButtonMessage:
    button = get_object(msg, "button")
    return ButtonMessage(
        **envelope_fields(msg, InboundMessageType.BUTTON),
        context=_decode_context(msg),
        button=ButtonPayload(
            text=get_str(button, "text"),
            payload=get_str(button, "payload"),
        ),
    )


def decode_location(msg: dict[str, Any]) -> LocationMessage:
    location = get_object(msg, "location")
    return LocationMessage(
        **envelope_fields(msg, InboundMessageType.LOCATION),
        location=LocationPayload(
            latitude=get_float(location, "latitude"),
            longitude=get_float(location, "longitude"),
            name=get_str(location, "name"),
            address=get_str(location, "address"),
        ),
    )


def _decode_error_detail(error: dict[str, Any]) -> ErrorDetail:
    return ErrorDetail(
        code=get_int(error, "code"),
        title=get_str(error, "title"),
        details=get_str(error, "details"),
    )


def decode_unknown(msg: dict[str, Any]) -> UnknownMessage:
    return UnknownMessage(
        **envelope_fields(msg, InboundMessageType.UNKNOWN),
        errors=map_records(msg, "errors", _decode_error_detail),
    )


def _decode_product_item(item: dict[str, Any]) -> ProductItem:
    return ProductItem(
        product_retailer_id=get_str(item, "product_retailer_id"),
        quantity=get_int(item, "quantity"),
        item_price=get_float(item, "item_price"),
        currency=get_str(item, "currency"),
    )


def decode_order(msg: dict[str, Any]) -> OrderMessage:
    order = get_object(msg, "order")
    return OrderMessage(
        **envelope_fields(msg, InboundMessageType.ORDER),
        context=_decode_context(msg),
        order=OrderDetails(
            catalog_id=get_str(order, "catalog_id"),
            text=get_str(order, "text"),
            product_items=map_records(order, "product_items", _decode_product_item),
        ),
    )


def _decode_button_reply(interactive: dict[str, Any]) -> ButtonReply | None:
    if not isinstance(interactive.get("button_reply"), dict):
        return None
    reply = get_object(interactive, "button_reply")
    return ButtonReply(id=get_str(reply, "id"), title=get_str(reply, "title"))


def _decode_list_reply(interactive: dict[str, Any]) -> ListReply | None:
    if not isinstance(interactive.get("list_reply"), dict):
        return None
    reply = get_object(interactive, "list_reply")
    return ListReply(
        id=get_str(reply, "id"),
        title=get_str(reply, "title"),
        description=get_str(reply, "description"),
    )


def decode_interactive(msg: dict[str, Any]) -> InteractiveMessage:
    """Só os blocos de resposta presentes no item entram no resultado."""
    interactive = get_object(msg, "interactive")
    return InteractiveMessage(
        **envelope_fields(msg, InboundMessageType.INTERACTIVE),
        context=_decode_context(msg),
        interactive=InteractiveReply(
            type=get_str(interactive, "type"),
            button_reply=_decode_button_reply(interactive),
            list_reply=_decode_list_reply(interactive),
        ),
    )
