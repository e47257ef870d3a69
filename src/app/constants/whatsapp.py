"""Enums de domínio para tipos de mensagem WhatsApp."""

from __future__ import annotations

from enum import StrEnum


class InboundMessageType(StrEnum):
    """Discriminadores (`type`) de mensagens recebidas via webhook."""

    ORDER = "order"
    TEXT = "text"
    UNKNOWN = "unknown"
    LOCATION = "location"
    CONTACTS = "contacts"
    REACTION = "reaction"
    BUTTON = "button"
    STICKER = "sticker"
    VIDEO = "video"
    AUDIO = "audio"
    DOCUMENT = "document"
    IMAGE = "image"
    INTERACTIVE = "interactive"
