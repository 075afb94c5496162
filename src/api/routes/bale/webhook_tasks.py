"""Tasks em background do webhook Bale (fire-and-forget com limite)."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Awaitable

logger = logging.getLogger(__name__)

MAX_CONCURRENT_UPDATES = 50

_TASK_SEMAPHORE = asyncio.Semaphore(MAX_CONCURRENT_UPDATES)
_background_tasks: set[asyncio.Task[Any]] = set()


def schedule_update_task(*, correlation_id: str, coroutine: Awaitable[None]) -> int:
    """Agenda o processamento do update e devolve o total de tasks ativas."""
    task = asyncio.create_task(_run_with_limit(coroutine))
    _background_tasks.add(task)
    task.add_done_callback(_on_task_done)
    logger.info(
        "webhook_processing_scheduled",
        extra={
            "channel": "bale",
            "correlation_id": correlation_id,
            "active_tasks": len(_background_tasks),
        },
    )
    return len(_background_tasks)


def active_task_count() -> int:
    return len(_background_tasks)


async def _run_with_limit(coroutine: Awaitable[None]) -> None:
    async with _TASK_SEMAPHORE:
        await coroutine


def _on_task_done(task: asyncio.Task[Any]) -> None:
    _background_tasks.discard(task)
    with contextlib.suppress(asyncio.CancelledError):
        exc = task.exception()
        if exc is not None:
            logger.error(
                "webhook_processing_task_failed",
                extra={"channel": "bale", "error_type": type(exc).__name__},
            )


async def drain_background_tasks(timeout_seconds: float = 30.0) -> None:
    """Aguarda tasks pendentes no shutdown; cancela as que estourarem o prazo."""
    if not _background_tasks:
        return

    pending_now = list(_background_tasks)
    logger.info(
        "webhook_processing_shutdown_wait",
        extra={"channel": "bale", "pending_tasks": len(pending_now), "timeout_seconds": timeout_seconds},
    )
    _, pending = await asyncio.wait(pending_now, timeout=timeout_seconds)
    if not pending:
        return

    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)
    logger.warning(
        "webhook_processing_shutdown_cancelled",
        extra={"channel": "bale", "cancelled_tasks": len(pending)},
    )
