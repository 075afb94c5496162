"""Testes do resolver de mídia (getFile + download)."""

from __future__ import annotations

import httpx
import pytest

from api.connectors.bale.http_base import HttpClientConfig
from app.infra.bale import MediaResolver, select_photo_variant
from utils.errors import MediaResolutionError

TOKEN = "1:xyz"


def _resolver(handler, **kwargs) -> MediaResolver:
    return MediaResolver(
        TOKEN,
        config=HttpClientConfig(transport=httpx.MockTransport(handler)),
        **kwargs,
    )


@pytest.mark.parametrize(
    ("size", "expected"),
    [("small", "a"), ("medium", "b"), ("large", "c"), ("extraLarge", "a"), ("huge", "a")],
)
def test_select_photo_variant(size: str, expected: str) -> None:
    photos = [{"file_id": "a"}, {"file_id": "b"}, {"file_id": "c"}]

    assert select_photo_variant(photos, size)["file_id"] == expected


def test_select_photo_variant_empty_list() -> None:
    with pytest.raises(ValueError):
        select_photo_variant([], "large")


@pytest.mark.asyncio
async def test_resolve_runs_get_file_then_download() -> None:
    requests: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(str(request.url))
        if request.url.path.endswith("/getFile"):
            return httpx.Response(200, json={"ok": True, "result": {"file_path": "photos/file_7.jpg"}})
        return httpx.Response(200, content=b"\xff\xd8jpeg")

    resolved = await _resolver(handler).resolve("c", {"update_id": 1})

    assert requests == [
        "https://tapi.bale.ai/bot1:xyz/getFile?file_id=c",
        "https://tapi.bale.ai/file/bot1:xyz/photos/file_7.jpg",
    ]
    assert resolved.file_name == "file_7.jpg"
    assert resolved.artifact.data == b"\xff\xd8jpeg"
    assert resolved.artifact.mime_type == "image/jpeg"


@pytest.mark.asyncio
async def test_metadata_failure_raises_with_identity() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"ok": False, "description": "wrong file_id"})

    identity = {"update_id": 3, "chat_id": 4, "message_id": 5}

    with pytest.raises(MediaResolutionError) as exc_info:
        await _resolver(handler).resolve("bad", identity)

    assert exc_info.value.stage == "metadata"
    assert exc_info.value.event_identity == identity
    assert exc_info.value.file_id == "bad"


@pytest.mark.asyncio
async def test_missing_file_path_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"ok": True, "result": {}})

    with pytest.raises(MediaResolutionError):
        await _resolver(handler).resolve("x")


@pytest.mark.asyncio
async def test_download_failure_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/getFile"):
            return httpx.Response(200, json={"ok": True, "result": {"file_path": "docs/a.pdf"}})
        return httpx.Response(404)

    with pytest.raises(MediaResolutionError) as exc_info:
        await _resolver(handler).resolve("x")

    assert exc_info.value.stage == "download"


@pytest.mark.asyncio
async def test_download_over_limit_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/getFile"):
            return httpx.Response(200, json={"ok": True, "result": {"file_path": "docs/a.pdf"}})
        return httpx.Response(200, content=b"x" * 11)

    with pytest.raises(MediaResolutionError):
        await _resolver(handler, max_size_bytes=10).resolve("x")


@pytest.mark.asyncio
async def test_transport_error_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("slow", request=request)

    with pytest.raises(MediaResolutionError):
        await _resolver(handler).resolve("x")


@pytest.mark.asyncio
async def test_undecodable_download_raises_at_download_stage() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/getFile"):
            return httpx.Response(200, json={"ok": True, "result": {"file_path": "docs/a.pdf"}})
        raise httpx.DecodingError("bad gzip", request=request)

    with pytest.raises(MediaResolutionError) as exc_info:
        await _resolver(handler).resolve("x")

    assert exc_info.value.stage == "download"
