"""Payload builders — construção de payloads para APIs externas.

Estrutura:
- whatsapp/: variantes outbound e serialização para a API de mensagens
"""

__all__: list[str] = []
