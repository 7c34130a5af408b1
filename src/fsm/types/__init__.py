"""
Exports públicos do módulo fsm/types.

Payload de entrada, templates de resposta e erros de despacho.
"""

from fsm.types.errors import (
    EmptyResponseError,
    FlowDispatchError,
    InvalidFieldsError,
    InvalidPayloadError,
    MissingFieldsError,
    UnhandledScreenError,
)
from fsm.types.payload import DecryptedPayload, FlowDecision, ScreenResponse

__all__ = [
    "DecryptedPayload",
    "EmptyResponseError",
    "FlowDecision",
    "FlowDispatchError",
    "InvalidFieldsError",
    "InvalidPayloadError",
    "MissingFieldsError",
    "ScreenResponse",
    "UnhandledScreenError",
]
