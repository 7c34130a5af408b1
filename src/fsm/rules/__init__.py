"""
Exports públicos do módulo fsm/rules.

Guards aplicados antes de avançar o Flow.
"""

from fsm.rules.guards import (
    GuardResult,
    guard_choice_fields,
    guard_email_fields,
    guard_required_fields,
)

__all__ = [
    "GuardResult",
    "guard_choice_fields",
    "guard_email_fields",
    "guard_required_fields",
]
