"""Resolução de mídia inbound da Bot API do Bale.

Duas chamadas sequenciais:
1. GET {base}/bot{token}/getFile?file_id=... -> result.file_path
2. GET {base}/file/bot{token}/{file_path} -> bytes

Qualquer falha vira um único MediaResolutionError; nunca há resultado parcial.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from api.connectors.bale.http_base import HttpClient, HttpClientConfig, HttpError
from api.connectors.bale.http_client import build_method_url
from app.constants.bale import PHOTO_SIZE_INDEX, PhotoSize
from app.protocols.models import BinaryArtifact, prepare_binary_data
from config.settings.bale import BALE_API_BASE_URL
from utils.errors import MediaResolutionError

if TYPE_CHECKING:
    from collections.abc import Sequence

    import httpx

    from config.settings import BaleSettings

logger = logging.getLogger(__name__)

DEFAULT_MAX_SIZE_BYTES = 20 * 1024 * 1024


def select_photo_variant(photos: Sequence[Any], size: str) -> Any:
    """Escolhe a variante de foto pelo tamanho nomeado.

    Variantes chegam em ordem crescente. Se o índice pedido não existir
    (ex: foto enviada pelo desktop, sem redimensionamento), usa a primeira.

    Raises:
        ValueError: Se a lista estiver vazia
    """
    if not photos:
        raise ValueError("photo list is empty")
    try:
        index = PHOTO_SIZE_INDEX[PhotoSize(size)]
    except ValueError:
        index = 0
    if index >= len(photos):
        return photos[0]
    return photos[index]


@dataclass(frozen=True, slots=True)
class ResolvedMedia:
    """Arquivo baixado e pronto para virar binário do record."""

    file_id: str
    file_path: str
    artifact: BinaryArtifact

    @property
    def file_name(self) -> str:
        return self.artifact.file_name

    @property
    def size(self) -> int:
        return len(self.artifact.data)


class MediaResolver:
    """getFile + download, com limite de tamanho."""

    def __init__(
        self,
        token: str,
        *,
        api_base_url: str = BALE_API_BASE_URL,
        config: HttpClientConfig | None = None,
        max_size_bytes: int = DEFAULT_MAX_SIZE_BYTES,
    ) -> None:
        self._token = token
        self._api_base_url = api_base_url.rstrip("/")
        self._http = HttpClient(config)
        self._max_size_bytes = max_size_bytes

    async def resolve(
        self,
        file_id: str,
        event_identity: dict[str, Any] | None = None,
    ) -> ResolvedMedia:
        """Baixa o arquivo referenciado por `file_id`.

        Raises:
            MediaResolutionError: Em qualquer etapa (metadata ou download)
        """
        if not file_id:
            raise MediaResolutionError(
                "file_id ausente no evento",
                file_id=file_id,
                event_identity=event_identity,
                stage="metadata",
            )

        file_path = await self._fetch_file_path(file_id, event_identity)
        content = await self._download(file_id, file_path, event_identity)
        file_name = file_path.rsplit("/", 1)[-1] or file_id

        logger.info(
            "bale_media_resolved",
            extra={"size_bytes": len(content), **(event_identity or {})},
        )
        return ResolvedMedia(
            file_id=file_id,
            file_path=file_path,
            artifact=prepare_binary_data(content, file_name),
        )

    async def _fetch_file_path(self, file_id: str, identity: dict[str, Any] | None) -> str:
        url = build_method_url(self._api_base_url, self._token, "getFile")
        response = await self._get(url, file_id, identity, stage="metadata", params={"file_id": file_id})
        try:
            data = response.json()
        except ValueError as exc:
            raise self._error("getFile response is not valid JSON", file_id, identity, "metadata") from exc

        result = data.get("result") if isinstance(data, dict) and data.get("ok", True) else None
        file_path = result.get("file_path") if isinstance(result, dict) else None
        if not file_path:
            raise self._error("getFile did not return file_path", file_id, identity, "metadata")
        return str(file_path)

    async def _download(self, file_id: str, file_path: str, identity: dict[str, Any] | None) -> bytes:
        url = f"{self._api_base_url}/file/bot{self._token}/{file_path}"
        response = await self._get(url, file_id, identity, stage="download")
        if self._is_too_large(response):
            raise self._error("media_too_large", file_id, identity, "download")
        return response.content

    async def _get(
        self,
        url: str,
        file_id: str,
        identity: dict[str, Any] | None,
        *,
        stage: str,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        try:
            response = await self._http.get(url, params=params)
        except HttpError as exc:
            logger.warning(
                "bale_media_transport_error",
                extra={"stage": stage, "error_type": type(exc).__name__, **(identity or {})},
            )
            raise self._error(f"{stage} request failed", file_id, identity, stage) from exc

        if response.status_code >= 400:
            logger.warning(
                "bale_media_http_error",
                extra={"stage": stage, "status_code": response.status_code, **(identity or {})},
            )
            raise self._error(f"{stage} returned HTTP {response.status_code}", file_id, identity, stage)
        return response

    def _is_too_large(self, response: httpx.Response) -> bool:
        content_length = response.headers.get("content-length")
        if content_length and content_length.isdigit():
            return int(content_length) > self._max_size_bytes
        return len(response.content) > self._max_size_bytes

    @staticmethod
    def _error(
        message: str,
        file_id: str,
        identity: dict[str, Any] | None,
        stage: str,
    ) -> MediaResolutionError:
        return MediaResolutionError(message, file_id=file_id, event_identity=identity, stage=stage)


def create_media_resolver(settings: BaleSettings | None = None) -> MediaResolver:
    """Factory com timeout/limite vindos das settings."""
    from config.settings import get_bale_settings

    bale = settings or get_bale_settings()
    return MediaResolver(
        bale.bot_token,
        api_base_url=bale.api_base_url,
        config=HttpClientConfig(timeout_seconds=min(bale.request_timeout_seconds, 30.0)),
        max_size_bytes=bale.media_max_size_bytes,
    )
