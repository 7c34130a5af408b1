"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    FlowError,
    FlowErrorKind,
    MalformedRequestError,
    SignatureInvalidError,
)

__all__ = [
    "FlowError",
    "FlowErrorKind",
    "MalformedRequestError",
    "SignatureInvalidError",
]
