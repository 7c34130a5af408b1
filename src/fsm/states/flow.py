"""
Ações e etapas canônicas do Flow de data exchange.

O Flow é linear: ENTRY → INTERMEDIATE → SUCCESS. HEALTH responde ao ping da
plataforma e não participa da sequência. Não há memória entre requests; a
única correlação é o flow_token, devolvido pelo cliente a cada passo.
"""

from enum import StrEnum


class FlowAction(StrEnum):
    """
    Ações enviadas pela plataforma no payload descriptografado.

    Os valores seguem exatamente a grafia do protocolo.
    """

    PING = "ping"
    INIT = "INIT"
    DATA_EXCHANGE = "data_exchange"

    def __str__(self) -> str:
        return self.value


class FlowStep(StrEnum):
    """
    Etapas do Flow.

    Etapas não-terminais:
        - ENTRY: Tela inicial (formulário)
        - INTERMEDIATE: Confirmação dos dados enviados

    Etapas terminais:
        - SUCCESS: Flow concluído, devolve o flow_token
        - HEALTH: Resposta ao ping
    """

    ENTRY = "ENTRY"
    INTERMEDIATE = "INTERMEDIATE"
    SUCCESS = "SUCCESS"
    HEALTH = "HEALTH"

    def __str__(self) -> str:
        return self.value


TERMINAL_STEPS: frozenset[FlowStep] = frozenset({
    FlowStep.SUCCESS,
    FlowStep.HEALTH,
})


def parse_action(value: str) -> FlowAction | None:
    """Converte a string recebida em FlowAction (None se desconhecida)."""
    try:
        return FlowAction(value)
    except ValueError:
        return None


def is_terminal(step: FlowStep) -> bool:
    """Verifica se a etapa encerra o Flow."""
    return step in TERMINAL_STEPS
