"""Configuração centralizada de logging.

Uso:
    from config.logging import configure_logging, get_logger

    # Uma vez, no bootstrap
    configure_logging(level="INFO", service_name="bale_adapter")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("bale_item_dispatched", extra={"operation": "sendMessage"})

Sem PII: nunca logar texto de mensagens, telefones ou o token do bot.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import BotTokenMaskingFilter, CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "bale_adapter"

# Bibliotecas HTTP logam a URL completa (com token) em INFO
_NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado no root logger.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço injetado em cada record.
        correlation_id_getter: Função que retorna o correlation_id do contexto.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(BotTokenMaskingFilter())

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo (geralmente `__name__`)."""
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    item_index: int | None = None,
) -> None:
    """Registra que um resultado degradado foi emitido no lugar do real.

    Args:
        logger: Logger do módulo chamador.
        component: Componente que degradou (ex: "answerQuery").
        reason: Motivo sem PII (ex: "remote_call_failed").
        item_index: Índice do item afetado, quando aplicável.
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
    }
    if reason:
        extra["reason"] = reason
    if item_index is not None:
        extra["item_index"] = item_index

    logger.info("Fallback applied for %s", component, extra=extra)
