"""
Exports públicos do módulo fsm/manager.

Máquina de estados do Flow.
"""

from fsm.manager.machine import (
    HEALTH_RESPONSE,
    FlowStateMachine,
)

__all__ = [
    "HEALTH_RESPONSE",
    "FlowStateMachine",
]
