"""Erros de criptografia do envelope de Flows.

`DecryptionError` sinaliza ao chamador que a chave pública em cache dele está
desatualizada (421). `EncryptionError` é falha interna de resposta (500).
"""

from __future__ import annotations

from utils.errors import FlowError, FlowErrorKind


class FlowCryptoError(FlowError):
    """Erro em operação criptográfica de Flow."""


class DecryptionError(FlowCryptoError):
    """Falha ao abrir o envelope (chave, passphrase, ciphertext ou tag)."""

    kind = FlowErrorKind.DECRYPTION_FAILED


class EncryptionError(FlowCryptoError):
    """Falha ao selar a resposta."""

    kind = FlowErrorKind.ENCODING_FAILED
