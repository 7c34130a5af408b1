"""Endpoint de data-exchange para WhatsApp Flows."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse, Response

from app.bootstrap import get_flow_dispatcher

router = APIRouter()

SIGNATURE_HEADER = "x-hub-signature-256"

_INFO_TEXT = "WhatsApp Flow Endpoint\nRefer to documentation for usage.\n"


@router.post("/")
@router.post("/flow/endpoint")
async def handle_flow_endpoint(request: Request) -> Response:
    """Recebe envelope criptografado da Meta e retorna plaintext base64.

    Falhas devolvem apenas o status (432, 421 ou 500), sem corpo.
    """
    # Corpo bruto lido antes de qualquer parse: o HMAC cobre os bytes exatos
    raw_body = await request.body()
    signature = request.headers.get(SIGNATURE_HEADER)

    result = get_flow_dispatcher().handle(raw_body, signature)
    if not result.ok:
        return Response(status_code=result.status_code)
    return PlainTextResponse(content=result.body, status_code=200)


@router.get("/", response_class=PlainTextResponse)
async def flow_endpoint_info() -> PlainTextResponse:
    """Página informativa na raiz do serviço."""
    return PlainTextResponse(_INFO_TEXT)
