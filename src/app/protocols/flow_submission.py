"""Protocolo do colaborador que recebe os dados enviados no Flow.

Persistir inscrições é responsabilidade externa; a máquina de estados não faz
IO. O dispatcher chama o hook depois de um data_exchange bem-sucedido.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from fsm.states.flow import FlowStep


class FlowSubmissionHookProtocol(Protocol):
    """Recebe os campos de uma tela já aceita pela máquina de estados."""

    def on_submission(self, step: FlowStep, flow_token: str, data: dict[str, Any]) -> None: ...
