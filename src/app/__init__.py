"""App — orquestração, casos de uso e contratos.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (sem IO direto, dependem de protocolos)
- protocols/: contratos/interfaces implementados pela camada api
- domain/: modelos inbound/outbound (pydantic)
- observability/: correlation_id para logs estruturados
- constants/: discriminadores de mensagem

Padrão: app orquestra; api adapta; config configura.
"""
