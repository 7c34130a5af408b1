"""Constantes criptográficas do envelope de Flows."""

AES_KEY_SIZE = 16  # AES-128
IV_SIZE = 12  # 96 bits (GCM)
TAG_SIZE = 16  # 128 bits, anexado ao final do ciphertext
SIGNATURE_PREFIX = "sha256="
