"""
Guards aplicados antes de avançar o Flow.

Um guard recebe o data da tela e devolve GuardResult; a máquina converte
negações em erro de despacho usando `reason` como mensagem.
"""

import re
from collections.abc import Mapping
from typing import Any

# Mesmo formato de e-mail usado na sanitização de PII
_EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")


class GuardResult:
    """
    Resultado da avaliação de um guard.

    Attributes:
        allowed: Se o avanço é permitido
        reason: Motivo do bloqueio (se allowed=False)
        fields: Campos que causaram o bloqueio
    """

    __slots__ = ("allowed", "fields", "reason")

    def __init__(
        self,
        allowed: bool,
        reason: str | None = None,
        fields: tuple[str, ...] = (),
    ) -> None:
        self.allowed = allowed
        self.reason = reason
        self.fields = fields

    @classmethod
    def allow(cls) -> "GuardResult":
        """Cria resultado permitindo o avanço."""
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str, fields: tuple[str, ...] = ()) -> "GuardResult":
        """Cria resultado negando o avanço."""
        return cls(allowed=False, reason=reason, fields=fields)


def _is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def guard_required_fields(
    data: Mapping[str, Any],
    required_fields: tuple[str, ...],
) -> GuardResult:
    """
    Guard: todos os campos obrigatórios presentes e não vazios.

    Args:
        data: Campos enviados pela tela
        required_fields: Nomes obrigatórios

    Returns:
        GuardResult com os campos ausentes quando negado
    """
    missing = tuple(name for name in required_fields if not _is_present(data.get(name)))
    if missing:
        return GuardResult.deny(f"Missing required fields: {', '.join(missing)}", missing)
    return GuardResult.allow()


def guard_email_fields(
    data: Mapping[str, Any],
    email_fields: tuple[str, ...],
) -> GuardResult:
    """Guard: campos de e-mail presentes têm formato válido."""
    invalid = tuple(
        name
        for name in email_fields
        if _is_present(data.get(name))
        and not (isinstance(data[name], str) and _EMAIL_PATTERN.fullmatch(data[name].strip()))
    )
    if invalid:
        return GuardResult.deny(f"Invalid email fields: {', '.join(invalid)}", invalid)
    return GuardResult.allow()


def guard_choice_fields(
    data: Mapping[str, Any],
    choice_fields: Mapping[str, tuple[str, ...]],
) -> GuardResult:
    """Guard: campos de escolha presentes trazem um dos valores aceitos."""
    invalid = tuple(
        name
        for name, accepted in choice_fields.items()
        if data.get(name) is not None and data[name] not in accepted
    )
    if invalid:
        return GuardResult.deny(f"Invalid choice fields: {', '.join(invalid)}", invalid)
    return GuardResult.allow()
