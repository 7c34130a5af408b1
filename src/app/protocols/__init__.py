"""Protocolos e contratos do core da aplicação."""

from .crypto import FlowEnvelopeCodecProtocol
from .flow_submission import FlowSubmissionHookProtocol

__all__ = [
    "FlowEnvelopeCodecProtocol",
    "FlowSubmissionHookProtocol",
]
