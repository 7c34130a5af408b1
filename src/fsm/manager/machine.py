"""
Máquina de estados do Flow de data exchange.

Função pura de (ação, tela) para resposta em plaintext. Não guarda estado
entre requests e não faz IO; persistir o que o usuário enviou é papel de quem
chama (hook de submissão no dispatcher).
"""

from typing import Any

from fsm.rules.guards import guard_choice_fields, guard_email_fields, guard_required_fields
from fsm.screens.registry import ScreenRegistry, get_default_registry
from fsm.states.flow import FlowStep, parse_action
from fsm.transitions.rules import SCREEN_BOUND_ACTIONS, get_target
from fsm.types.errors import (
    EmptyResponseError,
    InvalidFieldsError,
    InvalidPayloadError,
    MissingFieldsError,
    UnhandledScreenError,
)
from fsm.types.payload import DecryptedPayload, FlowDecision

HEALTH_RESPONSE: dict[str, Any] = {"data": {"status": "active"}}


class FlowStateMachine:
    """
    Máquina de estados linear ENTRY → INTERMEDIATE → SUCCESS.

    Attributes:
        registry: Templates das telas (injetável)
    """

    __slots__ = ("_registry",)

    def __init__(self, registry: ScreenRegistry | None = None) -> None:
        """
        Inicializa a máquina.

        Args:
            registry: Registro de telas (usa o padrão cacheado se None)
        """
        self._registry = registry or get_default_registry()

    def source_step(self, screen: str | None) -> FlowStep:
        """
        Identifica a etapa correspondente à tela de origem.

        Raises:
            UnhandledScreenError: Se a tela não tem regra
        """
        if screen == self._registry.entry.screen:
            return FlowStep.ENTRY
        if screen == self._registry.intermediate.screen:
            return FlowStep.INTERMEDIATE
        raise UnhandledScreenError(screen)

    def resolve_step(self, payload: DecryptedPayload) -> FlowStep:
        """
        Resolve a etapa de destino para o payload.

        Raises:
            UnhandledScreenError: data_exchange de tela desconhecida
            EmptyResponseError: Ação sem regra
        """
        action = parse_action(payload.action)
        if action is None:
            raise EmptyResponseError(payload.action)

        source = self.source_step(payload.screen) if action in SCREEN_BOUND_ACTIONS else None
        target = get_target(action, source)
        if target is None:
            raise EmptyResponseError(payload.action)
        return target

    def decide(self, payload: DecryptedPayload) -> FlowDecision:
        """
        Calcula etapa e resposta para o payload.

        Returns:
            FlowDecision com a etapa alcançada e a resposta (cópia nova)
        """
        step = self.resolve_step(payload)

        if step is FlowStep.HEALTH:
            response = {"data": dict(HEALTH_RESPONSE["data"])}
        elif step is FlowStep.ENTRY:
            response = self._registry.entry_response()
        elif step is FlowStep.INTERMEDIATE:
            required = guard_required_fields(payload.data, self._registry.required_fields)
            if not required.allowed:
                raise MissingFieldsError(required.fields, required.reason)
            emails = guard_email_fields(payload.data, self._registry.email_fields)
            if not emails.allowed:
                raise InvalidFieldsError(emails.fields, emails.reason)
            response = self._registry.intermediate_response()
        else:
            if not payload.flow_token:
                raise InvalidPayloadError("flow_token is required to finish the flow")
            choices = guard_choice_fields(payload.data, self._registry.choice_fields)
            if not choices.allowed:
                raise InvalidFieldsError(choices.fields, choices.reason)
            response = self._registry.success_response(payload.flow_token)

        return FlowDecision(step=step, response=response)

    def dispatch(self, payload: DecryptedPayload) -> dict[str, Any]:
        """Retorna apenas a resposta em plaintext para o payload."""
        return self.decide(payload).response
