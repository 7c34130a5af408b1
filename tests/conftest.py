"""Configuração do pytest para o gateway de Flows."""

import sys
from pathlib import Path

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

# Adiciona src/ (imports absolutos) e a raiz (tests.fakes) ao PYTHONPATH
root_path = Path(__file__).parent.parent
for path in (root_path, root_path / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from tests.fakes.flow_platform import (  # noqa: E402
    TEST_APP_SECRET,
    TEST_PASSPHRASE,
    FakeFlowPlatform,
)


@pytest.fixture(scope="session")
def rsa_private_key() -> rsa.RSAPrivateKey:
    """Chave RSA 2048 gerada uma vez por sessão."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def private_pem(rsa_private_key: rsa.RSAPrivateKey) -> str:
    """PEM PKCS8 sem criptografia."""
    return rsa_private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("utf-8")


@pytest.fixture(scope="session")
def encrypted_private_pem(rsa_private_key: rsa.RSAPrivateKey) -> str:
    """PEM PKCS8 protegido por TEST_PASSPHRASE."""
    return rsa_private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.BestAvailableEncryption(TEST_PASSPHRASE.encode()),
    ).decode("utf-8")


@pytest.fixture
def platform(rsa_private_key: rsa.RSAPrivateKey) -> FakeFlowPlatform:
    """Plataforma fake com chave AES e IV novos por teste."""
    return FakeFlowPlatform(rsa_private_key.public_key(), app_secret=TEST_APP_SECRET)
