"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e agregadas depois pelo
coletor de logs.

Uso:
    start = time.perf_counter()
    # ... operação ...
    record_latency("flow_dispatcher", "handle", (time.perf_counter() - start) * 1000)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    outcome: str = "ok",
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "flow_dispatcher")
        operation: Nome da operação (ex: "handle")
        latency_ms: Latência em milissegundos
        outcome: "ok" ou o kind do erro
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "outcome": outcome,
        },
    )
