"""Protocolo do codec de envelope usado pelo dispatcher de Flows.

O dispatcher depende desta abstração; a implementação concreta fica em
app/infra/crypto e é ligada no bootstrap.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.infra.crypto.envelope import DecryptedEnvelope, FlowEnvelope


class FlowEnvelopeCodecProtocol(Protocol):
    """Interface mínima para abrir e selar envelopes de Flow."""

    def decrypt(self, envelope: FlowEnvelope) -> DecryptedEnvelope: ...

    def encrypt(self, response: dict[str, Any], aes_key: bytes, iv: bytes) -> str: ...
