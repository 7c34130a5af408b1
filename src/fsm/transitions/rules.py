"""
Tabela de transições do Flow.

Chave: (ação, etapa de origem). Etapa de origem é None para ações que não
dependem de tela (ping, INIT). Valor: etapa de destino.
"""

from fsm.states.flow import TERMINAL_STEPS, FlowAction, FlowStep

TransitionKey = tuple[FlowAction, FlowStep | None]
TransitionMap = dict[TransitionKey, FlowStep]

VALID_TRANSITIONS: TransitionMap = {
    # ping: health check, ignora a tela
    (FlowAction.PING, None): FlowStep.HEALTH,
    # INIT: abre o Flow na tela de entrada
    (FlowAction.INIT, None): FlowStep.ENTRY,
    # data_exchange: entrada → confirmação → sucesso
    (FlowAction.DATA_EXCHANGE, FlowStep.ENTRY): FlowStep.INTERMEDIATE,
    (FlowAction.DATA_EXCHANGE, FlowStep.INTERMEDIATE): FlowStep.SUCCESS,
}

# Ações cuja transição depende da tela de origem
SCREEN_BOUND_ACTIONS: frozenset[FlowAction] = frozenset({FlowAction.DATA_EXCHANGE})


def get_target(action: FlowAction, source: FlowStep | None) -> FlowStep | None:
    """
    Retorna a etapa de destino para (ação, origem).

    Returns:
        FlowStep de destino ou None se não há regra
    """
    return VALID_TRANSITIONS.get((action, source))


def validate_transition_map() -> list[str]:
    """
    Valida a integridade da tabela de transições.

    Verifica:
    - Nenhuma transição parte de etapa terminal
    - Ações ligadas a tela sempre têm origem
    - Ações sem tela nunca têm origem

    Returns:
        Lista de erros encontrados (vazia se válida)
    """
    errors: list[str] = []
    for (action, source), _target in VALID_TRANSITIONS.items():
        if source in TERMINAL_STEPS:
            errors.append(f"Transição parte de etapa terminal: {action} {source}")
        if action in SCREEN_BOUND_ACTIONS and source is None:
            errors.append(f"Ação {action} exige etapa de origem")
        if action not in SCREEN_BOUND_ACTIONS and source is not None:
            errors.append(f"Ação {action} não deveria depender de tela")
    return errors
