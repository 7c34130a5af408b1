"""
Exports públicos do módulo fsm/transitions.

Tabela de transições do Flow.
"""

from fsm.transitions.rules import (
    SCREEN_BOUND_ACTIONS,
    VALID_TRANSITIONS,
    get_target,
    validate_transition_map,
)

__all__ = [
    "SCREEN_BOUND_ACTIONS",
    "VALID_TRANSITIONS",
    "get_target",
    "validate_transition_map",
]
