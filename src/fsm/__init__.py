"""
Módulo FSM — Máquina de estados do Flow de data exchange.

Função pura que mapeia (ação, tela) do payload descriptografado para a
resposta em plaintext.

Estrutura:
    - states/: Ações e etapas (FlowAction, FlowStep)
    - transitions/: Tabela (ação, origem) → destino
    - rules/: Guards (campos obrigatórios, e-mail, escolhas)
    - screens/: Registro injetável de templates de tela
    - manager/: Máquina de estados (FlowStateMachine)
    - types/: Payload, templates e erros de despacho
"""

# Manager
from fsm.manager import (
    HEALTH_RESPONSE,
    FlowStateMachine,
)

# Guards/Rules
from fsm.rules import (
    GuardResult,
    guard_choice_fields,
    guard_email_fields,
    guard_required_fields,
)

# Telas
from fsm.screens import ScreenRegistry, get_default_registry, load_screen_registry

# Estados
from fsm.states import TERMINAL_STEPS, FlowAction, FlowStep, is_terminal, parse_action

# Transições
from fsm.transitions import VALID_TRANSITIONS, get_target, validate_transition_map

# Types
from fsm.types import (
    DecryptedPayload,
    EmptyResponseError,
    FlowDecision,
    FlowDispatchError,
    InvalidFieldsError,
    InvalidPayloadError,
    MissingFieldsError,
    ScreenResponse,
    UnhandledScreenError,
)

__all__ = [
    "HEALTH_RESPONSE",
    "TERMINAL_STEPS",
    "VALID_TRANSITIONS",
    "DecryptedPayload",
    "EmptyResponseError",
    "FlowAction",
    "FlowDecision",
    "FlowDispatchError",
    "FlowStateMachine",
    "FlowStep",
    "GuardResult",
    "InvalidFieldsError",
    "InvalidPayloadError",
    "MissingFieldsError",
    "ScreenRegistry",
    "ScreenResponse",
    "UnhandledScreenError",
    "get_default_registry",
    "get_target",
    "guard_choice_fields",
    "guard_email_fields",
    "guard_required_fields",
    "is_terminal",
    "load_screen_registry",
    "parse_action",
    "validate_transition_map",
]
