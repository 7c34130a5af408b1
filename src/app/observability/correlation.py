"""Correlation id por request do endpoint de Flow.

O middleware HTTP define o id (header x-request-id ou UUID novo) e o filter
de logging o injeta em cada record. Usa ContextVar, seguro entre tasks.
"""

from __future__ import annotations

import re
import uuid
from contextvars import ContextVar, Token

CORRELATION_HEADER = "x-request-id"

# Aceita apenas ids curtos e imprimíveis vindos de fora
_SAFE_ID = re.compile(r"[A-Za-z0-9._:-]{1,128}")

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (vazio se não definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Valores ausentes ou fora do formato seguro são trocados por um UUID novo.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    value = correlation_id if correlation_id and _SAFE_ID.fullmatch(correlation_id) else None
    return _correlation_id.set(value or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    """Gera um novo correlation_id (UUID v4)."""
    return str(uuid.uuid4())
