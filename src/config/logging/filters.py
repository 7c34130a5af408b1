"""Filters de logging para injeção de contexto e proteção de segredos.

Campos injetados:
- correlation_id: ID de rastreamento do request
- service: Nome do serviço (ex: flow_gateway)

Campos removidos:
- qualquer `extra` cujo nome indique material de chave ou segredo
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# Nomes de atributos que nunca podem chegar ao log
SENSITIVE_FIELDS = frozenset(
    {
        "aes_key",
        "app_secret",
        "iv",
        "passphrase",
        "private_key",
        "private_key_pem",
        "plaintext",
        "payload",
        "secret",
    }
)

REDACTED = "[REDACTED]"


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia como fallback.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id e service ao record.

        Se correlation_id já foi passado via `extra`, preserva o valor.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SecretRedactionFilter(logging.Filter):
    """Substitui por REDACTED atributos sensíveis passados via `extra`.

    Não filtra records; apenas sanitiza.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        for name in SENSITIVE_FIELDS:
            if name in record.__dict__:
                setattr(record, name, REDACTED)
        return True
