"""Agregador de rotas — registra health e os routers do canal Bale.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.bale.execute import router as execute_router
from api.routes.bale.webhook import router as webhook_router
from api.routes.health.router import router as health_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados."""
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    # POST /webhook/bale
    api_router.include_router(webhook_router, prefix="/webhook/bale", tags=["bale"])
    # POST /bale/execute
    api_router.include_router(execute_router, prefix="/bale", tags=["bale"])

    return api_router
