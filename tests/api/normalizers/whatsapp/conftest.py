"""Fixtures de payloads do webhook WhatsApp."""

from __future__ import annotations

import json
from typing import Any

import pytest

from config.settings.whatsapp import WhatsAppSettings

BUSINESS_ID = "BIZ1"
PHONE_NUMBER_ID = "PH1"


def _envelope(message_type: str, **content: Any) -> dict[str, Any]:
    return {
        "from": "5511999990000",
        "id": f"wamid.{message_type}",
        "timestamp": "1700000000",
        "type": message_type,
        **content,
    }


_CONTEXT = {"from": "5511888880000", "id": "wamid.original"}

# Um item por discriminador, com todos os campos que a variante modela.
FULL_MESSAGES: dict[str, dict[str, Any]] = {
    "order": _envelope(
        "order",
        context=_CONTEXT,
        order={
            "catalog_id": "cat-1",
            "text": "pedido",
            "product_items": [
                {
                    "product_retailer_id": "sku-1",
                    "quantity": 2,
                    "item_price": 19.9,
                    "currency": "BRL",
                }
            ],
        },
    ),
    "text": _envelope("text", text={"body": "oi"}),
    "unknown": _envelope(
        "unknown",
        errors=[{"code": 131051, "title": "Message type unknown", "details": "não suportado"}],
    ),
    "location": _envelope(
        "location",
        location={
            "latitude": -23.55,
            "longitude": -46.63,
            "name": "Escritório",
            "address": "Av. Paulista, 1000",
        },
    ),
    "contacts": _envelope(
        "contacts",
        contacts=[
            {
                "name": {
                    "formatted_name": "Maria Silva",
                    "first_name": "Maria",
                    "last_name": "Silva",
                    "middle_name": "A",
                    "suffix": "Jr",
                    "prefix": "Sra",
                },
                "birthday": "1990-01-31",
                "org": {"company": "Acme", "department": "Vendas", "title": "Gerente"},
                "addresses": [
                    {
                        "street": "Rua A",
                        "city": "São Paulo",
                        "state": "SP",
                        "zip": "01000-000",
                        "country": "Brasil",
                        "country_code": "BR",
                        "type": "WORK",
                    }
                ],
                "emails": [{"email": "maria@example.com", "type": "WORK"}],
                "phones": [
                    {"phone": "+55 11 99999-0000", "wa_id": "5511999990000", "type": "CELL"}
                ],
                "urls": [{"url": "https://example.com", "type": "WORK"}],
            }
        ],
    ),
    "reaction": _envelope("reaction", reaction={"message_id": "wamid.original", "emoji": "👍"}),
    "button": _envelope(
        "button",
        context=_CONTEXT,
        button={"text": "Sim", "payload": "CONFIRM"},
    ),
    "sticker": _envelope(
        "sticker",
        sticker={"id": "m-1", "mime_type": "image/webp", "sha256": "abc", "animated": True},
    ),
    "video": _envelope(
        "video",
        video={"id": "m-2", "mime_type": "video/mp4", "sha256": "def", "caption": "clip"},
    ),
    "audio": _envelope(
        "audio",
        audio={"id": "m-3", "mime_type": "audio/ogg", "sha256": "ghi", "voice": True},
    ),
    "document": _envelope(
        "document",
        document={
            "id": "m-4",
            "mime_type": "application/pdf",
            "sha256": "jkl",
            "caption": "contrato",
            "filename": "contrato.pdf",
        },
    ),
    "image": _envelope(
        "image",
        image={"id": "m-5", "mime_type": "image/jpeg", "sha256": "mno", "caption": "foto"},
    ),
    "interactive": _envelope(
        "interactive",
        context=_CONTEXT,
        interactive={
            "type": "button_reply",
            "button_reply": {"id": "btn-1", "title": "Agendar"},
        },
    ),
}


@pytest.fixture
def tenant() -> WhatsAppSettings:
    return WhatsAppSettings(
        business_account_id=BUSINESS_ID,
        phone_number_id=PHONE_NUMBER_ID,
        access_token="token",
    )


@pytest.fixture
def full_messages() -> dict[str, dict[str, Any]]:
    return json.loads(json.dumps(FULL_MESSAGES))


@pytest.fixture
def make_webhook():
    """Monta o corpo bruto (str) de um webhook a partir dos changes."""

    def _make(
        *changes: dict[str, Any],
        business_id: str = BUSINESS_ID,
        extra_entries: list[dict[str, Any]] | None = None,
    ) -> str:
        entries = [{"id": business_id, "changes": list(changes)}]
        entries.extend(extra_entries or [])
        return json.dumps({"object": "whatsapp_business_account", "entry": entries})

    return _make


@pytest.fixture
def make_change():
    """Monta um change com messages/statuses para o phone_number_id dado."""

    def _make(
        messages: list[Any] | None = None,
        statuses: list[Any] | None = None,
        phone_number_id: str = PHONE_NUMBER_ID,
    ) -> dict[str, Any]:
        value: dict[str, Any] = {
            "messaging_product": "whatsapp",
            "metadata": {"display_phone_number": "1", "phone_number_id": phone_number_id},
            "contacts": [],
        }
        if messages is not None:
            value["messages"] = messages
        if statuses is not None:
            value["statuses"] = statuses
        return {"value": value, "field": "messages"}

    return _make
