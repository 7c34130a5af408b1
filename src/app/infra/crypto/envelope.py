"""Codec do envelope criptografado de WhatsApp Flows (data exchange).

Request: chave AES-128 embrulhada com RSA-OAEP(SHA-256), corpo AES-128-GCM
com a tag de 16 bytes no final, IV de 12 bytes.
Response: mesma chave AES, IV invertido (cada byte XOR 0xFF), devolvida como
texto base64(ciphertext + tag).
"""

from __future__ import annotations

import base64
import json
from dataclasses import dataclass, field
from typing import Any

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from pydantic import BaseModel, ConfigDict, Field

from .constants import AES_KEY_SIZE, IV_SIZE, TAG_SIZE
from .errors import DecryptionError, EncryptionError
from .keys import KeyMaterial, decode_base64, decrypt_aes_key, load_private_key_cached


class FlowEnvelope(BaseModel):
    """Corpo JSON recebido no endpoint de Flow."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    encrypted_aes_key: str = Field(..., min_length=1, description="Chave AES embrulhada (base64).")
    encrypted_flow_data: str = Field(..., min_length=1, description="Ciphertext + tag (base64).")
    initial_vector: str = Field(..., min_length=1, description="IV AES-GCM (base64).")


@dataclass(frozen=True, slots=True)
class DecryptedEnvelope:
    """Payload descriptografado + material para a resposta criptografada."""

    payload: dict[str, Any]
    aes_key: bytes = field(repr=False)
    iv: bytes = field(repr=False)


def invert_iv(iv: bytes) -> bytes:
    """Retorna o complemento bit a bit de cada byte do IV."""
    return bytes(byte ^ 0xFF for byte in iv)


def decrypt_envelope(
    envelope: FlowEnvelope,
    private_key_pem: str,
    passphrase: str | None = None,
) -> DecryptedEnvelope:
    """Descriptografa o envelope recebido da Meta.

    Args:
        envelope: Envelope com os três campos base64
        private_key_pem: Chave privada RSA em PEM
        passphrase: Senha da chave (opcional)

    Returns:
        DecryptedEnvelope com payload, chave AES e IV original

    Raises:
        DecryptionError: Qualquer falha de chave, base64, tamanho, tag ou JSON
    """
    private_key = load_private_key_cached(private_key_pem, passphrase or None)
    aes_key = decrypt_aes_key(private_key, envelope.encrypted_aes_key)

    flow_data = decode_base64(envelope.encrypted_flow_data)
    if len(flow_data) < TAG_SIZE:
        raise DecryptionError("Flow data shorter than authentication tag")

    iv = decode_base64(envelope.initial_vector)
    if len(iv) != IV_SIZE:
        raise DecryptionError(f"Invalid IV size: {len(iv)}")

    try:
        plaintext = AESGCM(aes_key).decrypt(iv, flow_data, None)
    except InvalidTag as exc:
        raise DecryptionError("Flow payload authentication failed") from exc

    try:
        payload = json.loads(plaintext.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DecryptionError(f"Flow payload is not valid JSON: {type(exc).__name__}") from exc

    if not isinstance(payload, dict):
        raise DecryptionError("Flow payload must be a JSON object")

    return DecryptedEnvelope(payload=payload, aes_key=aes_key, iv=iv)


def encrypt_response(response: dict[str, Any], aes_key: bytes, request_iv: bytes) -> str:
    """Criptografa a resposta e retorna o corpo HTTP (base64 puro, sem JSON).

    Raises:
        EncryptionError: Resposta não serializável ou tamanhos de chave/IV inválidos
    """
    if len(aes_key) != AES_KEY_SIZE:
        raise EncryptionError(f"Invalid AES key size: {len(aes_key)}")
    if len(request_iv) != IV_SIZE:
        raise EncryptionError(f"Invalid IV size: {len(request_iv)}")

    try:
        plaintext = json.dumps(response, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise EncryptionError(f"Flow response is not serializable: {exc}") from exc

    encrypted = AESGCM(aes_key).encrypt(invert_iv(request_iv), plaintext, None)
    return base64.b64encode(encrypted).decode("utf-8")


class FlowEnvelopeCodec:
    """Codec ligado ao material de chaves do processo."""

    __slots__ = ("_keys",)

    def __init__(self, keys: KeyMaterial) -> None:
        self._keys = keys

    def decrypt(self, envelope: FlowEnvelope) -> DecryptedEnvelope:
        return decrypt_envelope(envelope, self._keys.private_key_pem, self._keys.passphrase)

    def encrypt(self, response: dict[str, Any], aes_key: bytes, iv: bytes) -> str:
        return encrypt_response(response, aes_key, iv)
