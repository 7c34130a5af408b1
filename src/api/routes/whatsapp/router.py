"""Router principal do WhatsApp — agrega os endpoints do canal."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.whatsapp.flows import router as flows_router

router = APIRouter()

# Flow data-exchange (POST) e página informativa (GET)
router.include_router(flows_router)
