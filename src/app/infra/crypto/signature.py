"""Validação de assinatura HMAC-SHA256 do corpo bruto do request."""

from __future__ import annotations

import hashlib
import hmac
import logging

from .constants import SIGNATURE_PREFIX

logger = logging.getLogger(__name__)


def verify_signature(
    raw_body: bytes,
    signature_header: str | None,
    secret: str | None,
) -> bool:
    """Valida o header X-Hub-Signature-256 contra os bytes exatos do corpo.

    Sem secret configurado a verificação é desligada (modo desenvolvimento) e
    cada request aceito assim gera um warning.

    Args:
        raw_body: Corpo bruto, capturado antes de qualquer parse
        signature_header: Valor do header (com ou sem prefixo "sha256=")
        secret: App secret compartilhado (None/vazio = não configurado)

    Returns:
        True se assinatura válida ou verificação desligada
    """
    if not secret:
        logger.warning(
            "flow_signature_unverified",
            extra={"component": "signature_gate", "reason": "app_secret_not_configured"},
        )
        return True

    if not signature_header:
        return False

    received = signature_header.strip()
    if received.startswith(SIGNATURE_PREFIX):
        received = received[len(SIGNATURE_PREFIX):]

    computed = hmac.new(secret.encode("utf-8"), raw_body, hashlib.sha256).hexdigest()
    return hmac.compare_digest(computed.encode("ascii"), received.encode("utf-8"))
