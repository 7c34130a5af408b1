"""
Erros da máquina de estados do Flow.

Todos resultam em falha de processamento (500) no dispatcher.
"""

from utils.errors import FlowError, FlowErrorKind


class FlowDispatchError(FlowError):
    """Base para falhas de despacho do Flow."""

    kind = FlowErrorKind.UNHANDLED_SCREEN


class UnhandledScreenError(FlowDispatchError):
    """data_exchange recebido para tela sem regra."""

    def __init__(self, screen: str | None) -> None:
        super().__init__(f"Unhandled screen: {screen}")
        self.screen = screen


class EmptyResponseError(FlowDispatchError):
    """Nenhuma regra produziu resposta para a ação recebida."""

    def __init__(self, action: str) -> None:
        super().__init__(f"No response generated for action: {action}")
        self.action = action


class MissingFieldsError(FlowDispatchError):
    """Campos obrigatórios ausentes no data da tela de entrada."""

    def __init__(self, missing: tuple[str, ...], reason: str | None = None) -> None:
        super().__init__(reason or f"Missing required fields: {', '.join(missing)}")
        self.missing = missing


class InvalidFieldsError(FlowDispatchError):
    """Campos presentes com formato ou valor não aceito."""

    def __init__(self, invalid: tuple[str, ...], reason: str | None = None) -> None:
        super().__init__(reason or f"Invalid fields: {', '.join(invalid)}")
        self.invalid = invalid


class InvalidPayloadError(FlowDispatchError):
    """Payload descriptografado não tem a forma esperada."""

    kind = FlowErrorKind.MALFORMED_REQUEST
