"""API — camada de borda do canal WhatsApp.

Responsabilidades:
- Validar o envelope do webhook contra o tenant
- Normalizar mensagens/status para os modelos internos
- Construir payloads outbound
- Enviar via Graph API (único ponto de IO)

Subpastas:
- connectors/: cliente HTTP da Graph API
- normalizers/: conversão de payloads do webhook → modelos internos
- payload_builders/: construção de payloads para a API de mensagens

NÃO PODE conter: orquestração de use cases nem estado de sessão.
"""
