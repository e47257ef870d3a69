"""Connectors — adapters de borda para APIs externas.

Estrutura:
- whatsapp/: envio para a API de mensagens WhatsApp (Graph API)
"""

__all__: list[str] = []
