"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Ler corpo bruto e headers
- Delegar ao dispatcher de Flows
- Converter o resultado em resposta HTTP

Estrutura:
- routes/whatsapp/: endpoint de WhatsApp Flows
- routes/health/: liveness
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
