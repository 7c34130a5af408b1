"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.flow_submission import LoggingSubmissionHook

__all__ = [
    "LoggingSubmissionHook",
]
