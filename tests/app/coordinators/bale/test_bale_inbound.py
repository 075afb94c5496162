"""Testes do fluxo inbound (update -> mídia -> record)."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from app.coordinators.bale import process_inbound_update
from app.infra.bale import ResolvedMedia
from app.protocols.models import BinaryArtifact
from utils.errors import MediaResolutionError


def _resolver(file_name: str = "file_1.jpg") -> AsyncMock:
    resolver = AsyncMock()
    resolver.resolve = AsyncMock(
        return_value=ResolvedMedia(
            file_id="c",
            file_path=f"photos/{file_name}",
            artifact=BinaryArtifact(data=b"img", file_name=file_name, mime_type="image/jpeg"),
        )
    )
    return resolver


@pytest.mark.asyncio
async def test_photo_update_downloads_configured_size() -> None:
    body = {
        "update_id": 10,
        "message": {
            "message_id": 3,
            "chat": {"id": 99},
            "photo": [{"file_id": "a"}, {"file_id": "b"}, {"file_id": "c"}],
        },
    }
    resolver = _resolver()
    sink = AsyncMock()

    record = await process_inbound_update(body, resolver=resolver, sink=sink, image_size="large")

    resolver.resolve.assert_awaited_once_with(
        "c", {"update_id": 10, "chat_id": 99, "message_id": 3}
    )
    sink.emit.assert_awaited_once_with(record)
    assert record.json == body
    assert record.binary["data"].file_name == "file_1.jpg"


@pytest.mark.asyncio
async def test_text_update_emits_json_only() -> None:
    resolver = _resolver()
    sink = AsyncMock()
    body = {"update_id": 1, "message": {"message_id": 1, "text": "salam"}}

    record = await process_inbound_update(body, resolver=resolver, sink=sink)

    resolver.resolve.assert_not_awaited()
    assert record.binary == {}
    assert record.json == body


@pytest.mark.asyncio
async def test_media_failure_emits_nothing() -> None:
    resolver = AsyncMock()
    resolver.resolve = AsyncMock(
        side_effect=MediaResolutionError("download failed", file_id="D", stage="download")
    )
    sink = AsyncMock()
    body = {"update_id": 2, "channel_post": {"document": {"file_id": "D"}}}

    with pytest.raises(MediaResolutionError):
        await process_inbound_update(body, resolver=resolver, sink=sink)

    sink.emit.assert_not_awaited()


@pytest.mark.asyncio
async def test_empty_photo_list_is_treated_as_no_attachment() -> None:
    resolver = _resolver()
    sink = AsyncMock()

    await process_inbound_update(
        {"update_id": 4, "message": {"photo": []}}, resolver=resolver, sink=sink
    )

    resolver.resolve.assert_not_awaited()
