"""
Tipos de entrada e saída da máquina de estados do Flow.
"""

import copy
from dataclasses import dataclass, field
from typing import Any

from fsm.states.flow import FlowAction, FlowStep
from fsm.types.errors import InvalidPayloadError


def _optional_str(raw: dict[str, Any], key: str) -> str | None:
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidPayloadError(f"{key} must be a string")
    return value


@dataclass(frozen=True, slots=True)
class DecryptedPayload:
    """
    Payload descriptografado de um request de Flow.

    Attributes:
        action: ping | INIT | data_exchange
        data: Campos enviados pela tela (vazio se ausente)
        screen: Tela que originou o request (ausente em ping/INIT)
        version: Versão do protocolo
        flow_token: Token de correlação emitido pela plataforma
    """

    action: str
    data: dict[str, Any] = field(default_factory=dict)
    screen: str | None = None
    version: str = ""
    flow_token: str = ""

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "DecryptedPayload":
        """
        Constrói o payload a partir do JSON descriptografado.

        screen e data só são validados em data_exchange; nas demais ações
        (ping, INIT) valores malformados são descartados.

        Raises:
            InvalidPayloadError: Se action ausente ou campos com tipo errado
        """
        action = raw.get("action")
        if not isinstance(action, str) or not action:
            raise InvalidPayloadError("action is required")

        screen_bound = action == FlowAction.DATA_EXCHANGE
        data = raw.get("data")
        if data is None or (not screen_bound and not isinstance(data, dict)):
            data = {}
        if not isinstance(data, dict):
            raise InvalidPayloadError("data must be an object")

        screen = raw.get("screen")
        if screen_bound:
            screen = _optional_str(raw, "screen")
        elif not isinstance(screen, str):
            screen = None

        return cls(
            action=action,
            data=data,
            screen=screen,
            version=_optional_str(raw, "version") or "",
            flow_token=_optional_str(raw, "flow_token") or "",
        )


@dataclass(frozen=True, slots=True)
class ScreenResponse:
    """
    Template de resposta para uma tela.

    Attributes:
        screen: Identificador da tela de destino
        data: Dados exibidos na tela
    """

    screen: str
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Retorna cópia profunda, segura para alterar por request."""
        return {"screen": self.screen, "data": copy.deepcopy(self.data)}


@dataclass(frozen=True, slots=True)
class FlowDecision:
    """
    Resultado do despacho: etapa alcançada e resposta em plaintext.

    Attributes:
        step: Etapa de destino
        response: Objeto a ser criptografado e devolvido
    """

    step: FlowStep
    response: dict[str, Any]
