"""Operações de chave RSA e material de chaves do processo."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.hashes import SHA256

from .constants import AES_KEY_SIZE
from .errors import DecryptionError


@dataclass(frozen=True, slots=True)
class KeyMaterial:
    """Chave privada, passphrase e secret HMAC do endpoint.

    Construído uma vez no bootstrap e compartilhado somente para leitura.
    Nenhum campo aparece em `repr`.

    Attributes:
        private_key_pem: Chave privada RSA em PEM
        passphrase: Senha da chave (vazia se a chave não é criptografada)
        app_secret: Secret para HMAC-SHA256 do corpo bruto (None = sem verificação)
    """

    private_key_pem: str = field(repr=False)
    passphrase: str = field(default="", repr=False)
    app_secret: str | None = field(default=None, repr=False)

    @property
    def has_app_secret(self) -> bool:
        """True se a verificação de assinatura está configurada."""
        return bool(self.app_secret)


def decode_base64(raw_value: str) -> bytes:
    """Decodifica base64 padrão, tolerando padding ausente.

    Raises:
        DecryptionError: Se o valor não é base64 válido
    """
    value = raw_value.strip()
    padded = value + ("=" * (-len(value) % 4))
    try:
        return base64.b64decode(padded, validate=True)
    except (ValueError, binascii.Error) as exc:
        raise DecryptionError(f"Invalid base64 payload: {exc}") from exc


def load_private_key(private_key_pem: str, passphrase: str | None = None) -> Any:
    """Carrega chave privada RSA em formato PEM.

    Args:
        private_key_pem: Chave privada em formato PEM
        passphrase: Senha da chave (opcional)

    Returns:
        Objeto de chave privada RSA

    Raises:
        DecryptionError: Se chave ou passphrase inválidas
    """
    passphrase_bytes = passphrase.encode("utf-8") if passphrase and passphrase.strip() else None

    def _load(password: bytes | None) -> Any:
        return serialization.load_pem_private_key(
            private_key_pem.encode("utf-8"),
            password=password,
        )

    try:
        return _load(passphrase_bytes)
    except Exception as exc:
        # Permite fallback quando a chave não está criptografada, mas uma
        # passphrase foi injetada por configuração.
        exc_text = str(exc).lower()
        if passphrase_bytes and "not encrypted" in exc_text:
            try:
                return _load(None)
            except Exception as retry_exc:
                raise DecryptionError(f"Invalid private key: {retry_exc}") from retry_exc
        raise DecryptionError(f"Invalid private key: {exc}") from exc


@lru_cache(maxsize=4)
def load_private_key_cached(private_key_pem: str, passphrase: str | None = None) -> Any:
    """Versão cacheada de `load_private_key`.

    O material de chave é imutável durante o processo; falhas não são cacheadas.
    """
    return load_private_key(private_key_pem, passphrase)


def decrypt_aes_key(private_key: Any, encrypted_aes_key: str) -> bytes:
    """Descriptografa a chave AES de sessão (RSA-OAEP, SHA-256).

    Args:
        private_key: Chave privada RSA
        encrypted_aes_key: Chave AES criptografada (base64)

    Returns:
        Chave AES bruta (128 bits)

    Raises:
        DecryptionError: Se a decriptografia falhar ou o tamanho for inválido
    """
    aes_key_encrypted = decode_base64(encrypted_aes_key)
    try:
        aes_key = private_key.decrypt(
            aes_key_encrypted,
            padding.OAEP(
                mgf=padding.MGF1(algorithm=SHA256()),
                algorithm=SHA256(),
                label=None,
            ),
        )
    except Exception as exc:
        raise DecryptionError(f"AES key decryption failed: {type(exc).__name__}") from exc

    if len(aes_key) != AES_KEY_SIZE:
        raise DecryptionError(f"Invalid AES key size: {len(aes_key)}")
    return aes_key
