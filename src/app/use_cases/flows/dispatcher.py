"""Use case do endpoint de Flow: assinatura → envelope → FSM → resposta.

Único ponto que traduz FlowErrorKind em status HTTP. Codec e FSM continuam
sem conhecer transporte; nenhuma saída parcial é devolvida em caso de falha.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import ValidationError

from app.infra.crypto import FlowEnvelope, verify_signature
from app.observability import record_latency
from fsm.states.flow import FlowStep
from fsm.types.payload import DecryptedPayload, FlowDecision
from utils.errors import (
    FlowError,
    FlowErrorKind,
    MalformedRequestError,
    SignatureInvalidError,
)

if TYPE_CHECKING:
    from app.infra.crypto import KeyMaterial
    from app.protocols.crypto import FlowEnvelopeCodecProtocol
    from app.protocols.flow_submission import FlowSubmissionHookProtocol
    from fsm.manager.machine import FlowStateMachine

logger = logging.getLogger(__name__)

# 432 e 421 são códigos do protocolo de Flows (assinatura inválida / chave desatualizada)
STATUS_BY_KIND: dict[FlowErrorKind, int] = {
    FlowErrorKind.SIGNATURE_INVALID: 432,
    FlowErrorKind.DECRYPTION_FAILED: 421,
    FlowErrorKind.UNHANDLED_SCREEN: 500,
    FlowErrorKind.ENCODING_FAILED: 500,
    FlowErrorKind.MALFORMED_REQUEST: 500,
}

# Falhas atribuíveis ao chamador; o resto é erro do servidor
_CLIENT_SIDE_KINDS = frozenset({FlowErrorKind.SIGNATURE_INVALID, FlowErrorKind.DECRYPTION_FAILED})

# Etapas alcançadas a partir de dados enviados pelo usuário
_SUBMISSION_STEPS = frozenset({FlowStep.INTERMEDIATE, FlowStep.SUCCESS})


@dataclass(frozen=True, slots=True)
class FlowHttpResult:
    """Resposta de transporte do endpoint.

    Attributes:
        status_code: Status HTTP
        body: base64 da resposta criptografada (vazio em falhas)
        error_kind: Categoria da falha (None em sucesso)
    """

    status_code: int
    body: str = ""
    error_kind: FlowErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None


def status_for(kind: FlowErrorKind) -> int:
    """Status HTTP para a categoria de falha."""
    return STATUS_BY_KIND[kind]


class FlowDispatcher:
    """Orquestra gate de assinatura, codec, máquina de estados e hook."""

    def __init__(
        self,
        keys: KeyMaterial,
        codec: FlowEnvelopeCodecProtocol,
        machine: FlowStateMachine,
        submission_hook: FlowSubmissionHookProtocol | None = None,
    ) -> None:
        self._keys = keys
        self._codec = codec
        self._machine = machine
        self._submission_hook = submission_hook

    def handle(self, raw_body: bytes, signature_header: str | None) -> FlowHttpResult:
        """Processa um request bruto e devolve status + corpo.

        Args:
            raw_body: Bytes exatos do corpo, antes de qualquer parse
            signature_header: Valor de x-hub-signature-256 (ou None)
        """
        started_at = time.perf_counter()
        try:
            body = self._process(raw_body, signature_header)
        except FlowError as exc:
            result = self._failure(exc.kind, exc)
        except Exception as exc:
            logger.exception(
                "flow_request_unexpected_error",
                extra={"component": "flow_dispatcher", "error_type": type(exc).__name__},
            )
            result = self._failure(FlowErrorKind.ENCODING_FAILED, exc)
        else:
            result = FlowHttpResult(status_code=200, body=body)

        record_latency(
            "flow_dispatcher",
            "handle",
            (time.perf_counter() - started_at) * 1000,
            outcome="ok" if result.ok else str(result.error_kind),
        )
        return result

    def _process(self, raw_body: bytes, signature_header: str | None) -> str:
        if not verify_signature(raw_body, signature_header, self._keys.app_secret):
            raise SignatureInvalidError("Signature verification failed")

        envelope = self._parse_envelope(raw_body)
        decrypted = self._codec.decrypt(envelope)
        payload = DecryptedPayload.from_dict(decrypted.payload)
        decision = self._machine.decide(payload)

        logger.info(
            "flow_request_dispatched",
            extra={
                "component": "flow_dispatcher",
                "action": payload.action,
                "screen": payload.screen,
                "step": str(decision.step),
            },
        )
        body = self._codec.encrypt(decision.response, decrypted.aes_key, decrypted.iv)
        # Só notifica depois que existe uma resposta para entregar à plataforma
        self._notify_submission(payload, decision)
        return body

    @staticmethod
    def _parse_envelope(raw_body: bytes) -> FlowEnvelope:
        try:
            return FlowEnvelope.model_validate_json(raw_body)
        except ValidationError as exc:
            raise MalformedRequestError(f"Malformed envelope: {exc.error_count()} errors") from exc

    def _notify_submission(self, payload: DecryptedPayload, decision: FlowDecision) -> None:
        if self._submission_hook is None or decision.step not in _SUBMISSION_STEPS:
            return
        try:
            self._submission_hook.on_submission(decision.step, payload.flow_token, payload.data)
        except Exception as exc:
            # O hook é efeito colateral; a resposta do Flow não depende dele
            logger.error(
                "flow_submission_hook_failed",
                extra={"component": "flow_dispatcher", "error_type": type(exc).__name__},
            )

    @staticmethod
    def _failure(kind: FlowErrorKind, exc: Exception) -> FlowHttpResult:
        status_code = status_for(kind)
        log = logger.warning if kind in _CLIENT_SIDE_KINDS else logger.error
        log(
            "flow_request_failed",
            extra={
                "component": "flow_dispatcher",
                "error_kind": str(kind),
                "error_type": type(exc).__name__,
                "status_code": status_code,
            },
        )
        return FlowHttpResult(status_code=status_code, error_kind=kind)
