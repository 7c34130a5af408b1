"""Criptografia e assinatura do endpoint de WhatsApp Flows.

Localizado em app/infra/ para manter boundaries corretas:
- api/ adapta HTTP e delega ao dispatcher
- este módulo não conhece status HTTP, apenas levanta erros tipados
"""

from .constants import AES_KEY_SIZE, IV_SIZE, SIGNATURE_PREFIX, TAG_SIZE
from .envelope import (
    DecryptedEnvelope,
    FlowEnvelope,
    FlowEnvelopeCodec,
    decrypt_envelope,
    encrypt_response,
    invert_iv,
)
from .errors import DecryptionError, EncryptionError, FlowCryptoError
from .keys import KeyMaterial, decrypt_aes_key, load_private_key
from .signature import verify_signature

__all__ = [
    "AES_KEY_SIZE",
    "IV_SIZE",
    "SIGNATURE_PREFIX",
    "TAG_SIZE",
    "DecryptedEnvelope",
    "DecryptionError",
    "EncryptionError",
    "FlowCryptoError",
    "FlowEnvelope",
    "FlowEnvelopeCodec",
    "KeyMaterial",
    "decrypt_aes_key",
    "decrypt_envelope",
    "encrypt_response",
    "invert_iv",
    "load_private_key",
    "verify_signature",
]
