"""
Exports públicos do módulo fsm/states.

Ações e etapas canônicas do Flow.
"""

from fsm.states.flow import (
    TERMINAL_STEPS,
    FlowAction,
    FlowStep,
    is_terminal,
    parse_action,
)

__all__ = [
    "TERMINAL_STEPS",
    "FlowAction",
    "FlowStep",
    "is_terminal",
    "parse_action",
]
