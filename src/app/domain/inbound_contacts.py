"""Variante inbound `contacts` (cartões de contato compartilhados)."""

from __future__ import annotations

from pydantic import Field

from app.domain.inbound_base import InboundMessageBase, InboundModel


class ContactAddress(InboundModel):
    street: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    country: str = ""
    country_code: str = ""
    type: str = ""


class ContactEmail(InboundModel):
    email: str = ""
    type: str = ""


class ContactPhone(InboundModel):
    phone: str = ""
    wa_id: str = ""
    type: str = ""


class ContactUrl(InboundModel):
    url: str = ""
    type: str = ""


class ContactName(InboundModel):
    formatted_name: str = ""
    first_name: str = ""
    last_name: str = ""
    middle_name: str = ""
    suffix: str = ""
    prefix: str = ""


class ContactOrg(InboundModel):
    company: str = ""
    department: str = ""
    title: str = ""


class ContactCard(InboundModel):
    """Um cartão de contato; listas ausentes viram listas vazias."""

    name: ContactName = ContactName()
    birthday: str = ""
    org: ContactOrg = ContactOrg()
    addresses: list[ContactAddress] = Field(default_factory=list)
    emails: list[ContactEmail] = Field(default_factory=list)
    phones: list[ContactPhone] = Field(default_factory=list)
    urls: list[ContactUrl] = Field(default_factory=list)


class ContactsMessage(InboundMessageBase):
    contacts: list[ContactCard] = Field(default_factory=list)
