"""Entrypoint do adapter Bale.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.connectors.bale import create_bale_http_client
from api.routes import create_api_router
from api.routes.bale.webhook_tasks import drain_background_tasks
from app.bootstrap import SERVICE_NAME, initialize_app, validate_runtime_settings
from app.bootstrap.bale_factory import create_webhook_registration
from config.logging import get_logger
from config.settings import get_bale_settings
from utils.errors import BaleAdapterError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from app.infra.bale import WebhookRegistration

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


async def _register_webhook(registration: WebhookRegistration | None) -> None:
    if registration is None:
        logger.info("bale_webhook_registration_skipped", extra={"reason": "webhook_url_not_set"})
        return
    try:
        await registration.ensure()
    except BaleAdapterError as exc:
        logger.warning("bale_webhook_registration_failed", extra={"error_type": type(exc).__name__})


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Ciclo de vida.

    Startup: valida settings, cria o cliente usado no readiness e registra
    o webhook quando BALE_WEBHOOK_URL está definido.
    Shutdown: aguarda os updates ainda em processamento.
    """
    logger.info("app_starting", extra={"service": SERVICE_NAME})
    validate_runtime_settings()
    app.state.bale_client = None
    app.state.webhook_registration = None

    settings = get_bale_settings()
    if settings.bot_token:
        app.state.bale_client = create_bale_http_client(settings)
        app.state.webhook_registration = create_webhook_registration(settings)
        await _register_webhook(app.state.webhook_registration)
    else:
        logger.warning("bale_client_not_ready", extra={"reason": "bot_token_not_set"})

    yield

    logger.info("app_shutting_down", extra={"service": SERVICE_NAME})
    await drain_background_tasks(timeout_seconds=30.0)


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI."""
    fastapi_app = FastAPI(
        title="Bale Adapter",
        description="Adapter da Bot API do Bale: webhook inbound e operações outbound",
        version="1.0.0",
        lifespan=lifespan,
    )
    fastapi_app.include_router(create_api_router())
    logger.info("app_configured", extra={"service": SERVICE_NAME})
    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting bale adapter in development mode")
    uvicorn.run("app.app:app", host="0.0.0.0", port=8080, reload=True)


if __name__ == "__main__":
    main()
