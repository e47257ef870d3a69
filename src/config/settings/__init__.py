"""Agregador de settings do wa-webhook-bridge.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Tenant WhatsApp
from config.settings.whatsapp import (
    GRAPH_API_BASE_URL,
    GRAPH_API_VERSION,
    WhatsAppSettings,
    get_whatsapp_settings,
)

__all__ = [
    # Constants
    "GRAPH_API_BASE_URL",
    "GRAPH_API_VERSION",
    # Base
    "BaseSettings",
    "Environment",
    # Channels
    "WhatsAppSettings",
    "get_base_settings",
    "get_whatsapp_settings",
]
