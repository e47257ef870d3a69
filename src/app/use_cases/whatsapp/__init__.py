"""Use cases específicos de WhatsApp."""

from .send_outbound_message import SendOutboundMessageUseCase

__all__ = [
    "SendOutboundMessageUseCase",
]
