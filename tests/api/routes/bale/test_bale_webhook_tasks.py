"""Testes para as tasks em background do webhook Bale."""

from __future__ import annotations

import asyncio

import pytest

from api.routes.bale import webhook_tasks


async def _wait_until_tasks_empty(timeout: float = 1.0) -> None:
    start = asyncio.get_running_loop().time()
    while webhook_tasks._background_tasks:
        if asyncio.get_running_loop().time() - start > timeout:
            break
        await asyncio.sleep(0.01)


@pytest.mark.asyncio
async def test_schedule_update_task_runs_coroutine_and_cleans_set() -> None:
    event = asyncio.Event()

    async def _work() -> None:
        event.set()

    active = webhook_tasks.schedule_update_task(correlation_id="corr-1", coroutine=_work())

    assert active == 1
    await asyncio.wait_for(event.wait(), timeout=1.0)
    await _wait_until_tasks_empty()
    assert webhook_tasks.active_task_count() == 0


@pytest.mark.asyncio
async def test_schedule_update_task_logs_failure(caplog: pytest.LogCaptureFixture) -> None:
    async def _boom() -> None:
        raise RuntimeError("boom")

    with caplog.at_level("ERROR"):
        webhook_tasks.schedule_update_task(correlation_id="corr-2", coroutine=_boom())
        await _wait_until_tasks_empty()

    assert "webhook_processing_task_failed" in caplog.text


@pytest.mark.asyncio
async def test_drain_returns_immediately_when_empty() -> None:
    await webhook_tasks.drain_background_tasks(timeout_seconds=0.01)
    assert webhook_tasks.active_task_count() == 0


@pytest.mark.asyncio
async def test_drain_cancels_pending_tasks(caplog: pytest.LogCaptureFixture) -> None:
    gate = asyncio.Event()

    async def _pending_work() -> None:
        await gate.wait()

    webhook_tasks.schedule_update_task(correlation_id="corr-4", coroutine=_pending_work())
    await asyncio.sleep(0)

    with caplog.at_level("WARNING"):
        await webhook_tasks.drain_background_tasks(timeout_seconds=0.01)

    assert "webhook_processing_shutdown_cancelled" in caplog.text
    assert webhook_tasks.active_task_count() == 0
