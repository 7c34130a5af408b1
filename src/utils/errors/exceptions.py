"""Erros tipados do gateway de Flows.

Cada erro carrega um `FlowErrorKind`. Codec e FSM apenas levantam o erro;
somente o dispatcher traduz o kind para status HTTP.
"""

from __future__ import annotations

from enum import StrEnum


class FlowErrorKind(StrEnum):
    """Categorias disjuntas de falha no processamento de um request."""

    SIGNATURE_INVALID = "signature_invalid"
    DECRYPTION_FAILED = "decryption_failed"
    UNHANDLED_SCREEN = "unhandled_screen"
    ENCODING_FAILED = "encoding_failed"
    MALFORMED_REQUEST = "malformed_request"

    def __str__(self) -> str:
        return self.value


class FlowError(Exception):
    """Base para falhas do gateway. Subclasses fixam `kind`."""

    kind: FlowErrorKind = FlowErrorKind.ENCODING_FAILED


class SignatureInvalidError(FlowError):
    """Assinatura HMAC ausente ou divergente."""

    kind = FlowErrorKind.SIGNATURE_INVALID


class MalformedRequestError(FlowError):
    """Envelope externo não é JSON válido ou está incompleto."""

    kind = FlowErrorKind.MALFORMED_REQUEST
