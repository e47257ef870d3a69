"""Decoder de mensagens `contacts` (um ou mais cartões de contato)."""

from __future__ import annotations

from typing import Any

from app.constants.whatsapp import InboundMessageType
from app.domain.inbound_contacts import (
    ContactAddress,
    ContactCard,
    ContactEmail,
    ContactName,
    ContactOrg,
    ContactPhone,
    ContactsMessage,
    ContactUrl,
)

from ._extraction_helpers import envelope_fields
from ._field_access import get_object, get_str, map_records

_ADDRESS_FIELDS = ("street", "city", "state", "zip", "country", "country_code", "type")
_NAME_FIELDS = ("formatted_name", "first_name", "last_name", "middle_name", "suffix", "prefix")
_ORG_FIELDS = ("company", "department", "title")


def _strings(obj: dict[str, Any], keys: tuple[str, ...]) -> dict[str, str]:
    return {key: get_str(obj, key) for key in keys}


def _decode_address(address: dict[str, Any]) -> ContactAddress:
    return ContactAddress(**_strings(address, _ADDRESS_FIELDS))


def _decode_email(email: dict[str, Any]) -> ContactEmail:
    return ContactEmail(email=get_str(email, "email"), type=get_str(email, "type"))


def _decode_phone(phone: dict[str, Any]) -> ContactPhone:
    return ContactPhone(
        phone=get_str(phone, "phone"),
        wa_id=get_str(phone, "wa_id"),
        type=get_str(phone, "type"),
    )


def _decode_url(url: dict[str, Any]) -> ContactUrl:
    return ContactUrl(url=get_str(url, "url"), type=get_str(url, "type"))


def _decode_card(card: dict[str, Any]) -> ContactCard:
    return ContactCard(
        name=ContactName(**_strings(get_object(card, "name"), _NAME_FIELDS)),
        birthday=get_str(card, "birthday"),
        org=ContactOrg(**_strings(get_object(card, "org"), _ORG_FIELDS)),
        addresses=map_records(card, "addresses", _decode_address),
        emails=map_records(card, "emails", _decode_email),
        phones=map_records(card, "phones", _decode_phone),
        urls=map_records(card, "urls", _decode_url),
    )


def decode_contacts(msg: dict[str, Any]) -> ContactsMessage:
    return ContactsMessage(
        **envelope_fields(msg, InboundMessageType.CONTACTS),
        contacts=map_records(msg, "contacts", _decode_card),
    )
