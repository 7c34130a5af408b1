"""Hook padrão de submissão do Flow.

Não persiste nada: registra apenas a etapa e os nomes dos campos recebidos,
nunca os valores (podem conter PII).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fsm.states.flow import FlowStep

logger = logging.getLogger(__name__)


class LoggingSubmissionHook:
    """Implementação de FlowSubmissionHookProtocol baseada em log."""

    def on_submission(self, step: FlowStep, flow_token: str, data: dict[str, Any]) -> None:
        logger.info(
            "flow_submission_received",
            extra={
                "component": "flow_submission",
                "step": str(step),
                "fields": sorted(data),
                "has_flow_token": bool(flow_token),
            },
        )
