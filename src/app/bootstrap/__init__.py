"""Composition root do adapter Bale.

Configura logging e valida settings no startup. O wiring de clientes,
dispatcher e infra inbound fica em `app.bootstrap.bale_factory`.
"""

from __future__ import annotations

import logging

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import BaleSettings, BaseSettings, get_bale_settings, get_base_settings

SERVICE_NAME = "bale_adapter"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Logging JSON com correlation_id; chamar uma vez, antes dos routers."""
    configure_logging(
        level=get_base_settings().log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def collect_settings_errors(base: BaseSettings, bale: BaleSettings) -> list[str]:
    """Erros de configuração prefixados pela origem (base/bale)."""
    return [f"base: {error}" for error in base.validate()] + [
        f"bale: {error}" for error in bale.validate()
    ]


def validate_runtime_settings(
    base: BaseSettings | None = None,
    bale: BaleSettings | None = None,
) -> list[str]:
    """Valida settings no startup.

    Em staging/production qualquer erro impede o boot. Em development os
    erros são apenas logados, permitindo subir o serviço sem token para
    testar /health.

    Returns:
        Lista de erros encontrados (vazia = OK).

    Raises:
        RuntimeError: Settings inválidas em ambiente estrito.
    """
    base = base or get_base_settings()
    bale = bale or get_bale_settings()
    errors = collect_settings_errors(base, bale)

    if bale.webhook_url and not bale.webhook_secret:
        logger.warning(
            "bale_webhook_without_secret",
            extra={"component": "bootstrap", "environment": base.environment},
        )

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "environment": base.environment},
        )
        return errors

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.requires_strict_validation:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
    return errors
