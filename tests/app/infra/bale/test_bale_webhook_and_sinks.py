"""Testes do registro de webhook e dos sinks de records."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock

import httpx
import pytest

from api.connectors.bale.http_base import HttpClientConfig, HttpError
from app.infra.bale import HttpForwardSink, LoggingRecordSink, WebhookRegistration, create_record_sink
from app.protocols.models import OutboundRecord
from config.settings import BaleSettings
from utils.errors import RemoteCallError

URL = "https://adapter.example.com/webhook/bale"


@pytest.mark.asyncio
async def test_check_exists_compares_urls() -> None:
    client = AsyncMock()
    client.call = AsyncMock(return_value={"url": URL})

    assert await WebhookRegistration(client, URL).check_exists() is True
    client.call.assert_awaited_once_with("getWebhookInfo")


@pytest.mark.asyncio
async def test_ensure_registers_with_secret_when_missing() -> None:
    client = AsyncMock()
    client.call = AsyncMock(side_effect=[{"url": ""}, True])

    registered = await WebhookRegistration(client, URL, secret_token="s3").ensure()

    assert registered is True
    client.call.assert_awaited_with("setWebhook", {"url": URL, "secret_token": "s3"})


@pytest.mark.asyncio
async def test_delete_returns_false_on_remote_error() -> None:
    client = AsyncMock()
    client.call = AsyncMock(side_effect=RemoteCallError("deleteWebhook", "nope", status_code=401))

    assert await WebhookRegistration(client, URL).delete() is False


@pytest.mark.asyncio
async def test_forward_sink_posts_record() -> None:
    seen: dict[str, object] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(200)

    sink = HttpForwardSink(
        "https://workflow.example.com/hook",
        HttpClientConfig(transport=httpx.MockTransport(handler)),
    )
    await sink.emit(OutboundRecord(json={"update_id": 1}))

    assert seen["url"] == "https://workflow.example.com/hook"
    assert seen["body"] == {"json": {"update_id": 1}, "binary": {}, "pairedItem": {"item": 0}}


@pytest.mark.asyncio
async def test_forward_sink_raises_on_rejection() -> None:
    sink = HttpForwardSink(
        "https://workflow.example.com/hook",
        HttpClientConfig(transport=httpx.MockTransport(lambda request: httpx.Response(404))),
    )

    with pytest.raises(HttpError):
        await sink.emit(OutboundRecord(json={"update_id": 1}))


def test_create_record_sink_depends_on_forward_url() -> None:
    assert isinstance(create_record_sink(BaleSettings()), LoggingRecordSink)
    assert isinstance(
        create_record_sink(BaleSettings(forward_url="https://workflow.example.com/hook")),
        HttpForwardSink,
    )
