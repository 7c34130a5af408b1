"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e monta
o dispatcher com material de chaves imutável.

Uso:
    from app.bootstrap import initialize_app, get_flow_dispatcher

    # Na inicialização do serviço
    initialize_app()

    # No handler HTTP
    dispatcher = get_flow_dispatcher()
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.infra.crypto import FlowEnvelopeCodec, KeyMaterial
from app.observability import get_correlation_id
from app.services import LoggingSubmissionHook
from app.use_cases.flows import FlowDispatcher
from config.logging import configure_logging
from config.settings import get_base_settings, get_flow_settings
from fsm import FlowStateMachine, get_default_registry, load_screen_registry

if TYPE_CHECKING:
    from app.protocols.flow_submission import FlowSubmissionHookProtocol
    from config.settings import FlowSettings
    from fsm import ScreenRegistry

# Nome do serviço para logs e métricas
SERVICE_NAME = "flow_gateway"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging estruturado com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    configure_logging(
        level=get_base_settings().log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido, o que
    inclui subir sem FLOW_APP_SECRET (assinatura desligada). Em `development`
    mantém alerta sem bloquear execução local.

    Raises:
        RuntimeError: Se houver erros em ambiente estrito
    """
    base = get_base_settings()
    errors: list[str] = [f"base: {error}" for error in base.validate()]
    errors.extend(f"flows: {error}" for error in get_flow_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.strict_validation:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


def build_key_material(settings: FlowSettings) -> KeyMaterial:
    """Converte settings em KeyMaterial imutável."""
    if not settings.signature_verification_enabled:
        logger.warning(
            "flow_signature_verification_disabled",
            extra={"component": "bootstrap", "reason": "app_secret_not_configured"},
        )
    return KeyMaterial(
        private_key_pem=settings.private_key_pem,
        passphrase=settings.private_key_passphrase,
        app_secret=settings.app_secret or None,
    )


def build_flow_dispatcher(
    settings: FlowSettings,
    registry: ScreenRegistry | None = None,
    submission_hook: FlowSubmissionHookProtocol | None = None,
) -> FlowDispatcher:
    """Monta o dispatcher a partir das settings.

    Args:
        settings: Settings do endpoint de Flow
        registry: Registro de telas (usa FLOW_SCREENS_PATH ou o padrão)
        submission_hook: Colaborador de submissão (usa o hook de log se None)
    """
    keys = build_key_material(settings)
    if registry is None:
        registry = (
            load_screen_registry(settings.screens_path)
            if settings.screens_path
            else get_default_registry()
        )
    return FlowDispatcher(
        keys=keys,
        codec=FlowEnvelopeCodec(keys),
        machine=FlowStateMachine(registry),
        submission_hook=submission_hook or LoggingSubmissionHook(),
    )


@lru_cache(maxsize=1)
def get_flow_dispatcher() -> FlowDispatcher:
    """Retorna o dispatcher do processo (construído uma vez)."""
    return build_flow_dispatcher(get_flow_settings())
