"""Agregador de settings do gateway de Flows.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    VALID_LOG_LEVELS,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Flow endpoint settings
from config.settings.flows import FlowSettings, get_flow_settings

__all__ = [
    "VALID_LOG_LEVELS",
    # Base
    "BaseSettings",
    "Environment",
    # Flows
    "FlowSettings",
    "get_base_settings",
    "get_flow_settings",
]
