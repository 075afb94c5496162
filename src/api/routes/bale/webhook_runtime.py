"""Runtime do webhook Bale: dependências lazy e processamento seguro."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from app.coordinators.bale import process_inbound_update
from app.observability import correlation_scope
from utils.errors import BaleAdapterError, MediaResolutionError

if TYPE_CHECKING:
    from app.infra.bale import MediaResolver
    from app.protocols.record_sink import RecordSink

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InboundDependencies:
    resolver: MediaResolver
    sink: RecordSink
    image_size: str


_dependencies: InboundDependencies | None = None


def get_inbound_dependencies() -> InboundDependencies:
    """Cria resolver e sink na primeira requisição (lazy-loading)."""
    global _dependencies
    if _dependencies is None:
        from app.bootstrap.bale_factory import create_inbound_resolver, create_inbound_sink
        from config.settings import get_bale_settings

        settings = get_bale_settings()
        _dependencies = InboundDependencies(
            resolver=create_inbound_resolver(settings),
            sink=create_inbound_sink(settings),
            image_size=settings.inbound_image_size,
        )
    return _dependencies


def reset_inbound_dependencies() -> None:
    global _dependencies
    _dependencies = None


async def process_update_safe(
    *,
    body: dict[str, Any],
    correlation_id: str,
    dependencies: InboundDependencies,
) -> None:
    """Processa o update fora do ciclo da requisição.

    Falha de mídia é registrada e o update é descartado (nenhum record
    parcial); demais erros sobem para o callback da task.
    """
    with correlation_scope(correlation_id):
        try:
            await process_inbound_update(
                body,
                resolver=dependencies.resolver,
                sink=dependencies.sink,
                image_size=dependencies.image_size,
            )
        except MediaResolutionError as exc:
            logger.warning(
                "webhook_media_resolution_failed",
                extra={
                    "channel": "bale",
                    "stage": exc.stage,
                    "error": str(exc),
                    **exc.event_identity,
                },
            )
        except BaleAdapterError as exc:
            logger.error(
                "webhook_processing_failed",
                extra={"channel": "bale", "error_type": type(exc).__name__},
            )
            raise
