"""Builder para mensagens de texto."""

from __future__ import annotations

from app.domain.outbound_messages import OutboundText, TextContent


def build_text_message(to: str, body: str, preview_url: bool = False) -> OutboundText:
    """Monta mensagem de texto simples.

    Args:
        to: Número de destino (formato internacional)
        body: Corpo da mensagem
        preview_url: Se a Meta deve gerar preview de links

    Returns:
        Variante OutboundText
    """
    return OutboundText(to=to, text=TextContent(body=body, preview_url=preview_url))
