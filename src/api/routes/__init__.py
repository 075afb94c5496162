"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (webhook, execução, health)
- Validação inicial de request (headers, envelope)
- Delegação para coordinators/use_cases

Estrutura:
- routes/bale/: webhook inbound e POST /bale/execute
- routes/health/: health checks e readiness
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
