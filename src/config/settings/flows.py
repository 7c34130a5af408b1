"""Settings do endpoint de WhatsApp Flows.

Credenciais do envelope criptografado e do HMAC. Este módulo é o único ponto
que lê essas variáveis do ambiente; o núcleo recebe o material de chaves
já montado pelo bootstrap.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

PEM_HEADER = "-----BEGIN"


@dataclass(frozen=True)
class FlowSettings:
    """Configurações do endpoint de Flow.

    Attributes:
        private_key_pem: Chave privada RSA em PEM (FLOW_PRIVATE_KEY ou arquivo)
        private_key_passphrase: Senha da chave privada
        app_secret: Secret do app para validar X-Hub-Signature-256
        screens_path: YAML alternativo com os templates de tela
    """

    private_key_pem: str = field(default="", repr=False)
    private_key_passphrase: str = field(default="", repr=False)
    app_secret: str = field(default="", repr=False)
    screens_path: str = ""

    @property
    def signature_verification_enabled(self) -> bool:
        """False quando nenhum app secret foi configurado (modo aberto)."""
        return bool(self.app_secret)

    def validate(self) -> list[str]:
        """Valida configurações mínimas do endpoint.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.private_key_pem:
            errors.append("FLOW_PRIVATE_KEY não configurado")
        elif PEM_HEADER not in self.private_key_pem:
            errors.append("FLOW_PRIVATE_KEY não parece um PEM")

        if not self.app_secret:
            errors.append("FLOW_APP_SECRET não configurado (assinatura não será verificada)")

        if self.screens_path and not Path(self.screens_path).is_file():
            errors.append(f"FLOW_SCREENS_PATH não encontrado: {self.screens_path}")

        return errors


def _normalize_pem(raw: str) -> str:
    """Expande '\\n' literais (comum em variáveis de ambiente de uma linha)."""
    value = raw.strip()
    if "\\n" in value and "\n" not in value:
        value = value.replace("\\n", "\n")
    return value


def _read_private_key() -> str:
    inline = os.getenv("FLOW_PRIVATE_KEY", "")
    if inline:
        return _normalize_pem(inline)
    key_path = os.getenv("FLOW_PRIVATE_KEY_PATH", "")
    if key_path:
        return Path(key_path).read_text(encoding="utf-8").strip()
    return ""


def _load_from_env() -> FlowSettings:
    """Carrega FlowSettings a partir de variáveis de ambiente."""
    return FlowSettings(
        private_key_pem=_read_private_key(),
        private_key_passphrase=os.getenv("FLOW_PRIVATE_KEY_PASSPHRASE", ""),
        app_secret=os.getenv("FLOW_APP_SECRET", ""),
        screens_path=os.getenv("FLOW_SCREENS_PATH", ""),
    )


@lru_cache(maxsize=1)
def get_flow_settings() -> FlowSettings:
    """Retorna instância cacheada de FlowSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
