"""Cliente HTTP base para conectores da camada API."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)

_RETRYABLE_STATUS = frozenset({429, 500, 502, 503, 504})


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP.

    `transport` permite injetar um httpx.MockTransport nos testes.
    """

    timeout_seconds: float = 30.0
    max_retries: int = 0
    backoff_base_seconds: float = 1.0
    backoff_max_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True
    transport: httpx.AsyncBaseTransport | None = None


class HttpError(Exception):
    """Erro de transporte HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.is_retryable = is_retryable


class HttpClient:
    """Cliente HTTP simples para chamadas externas.

    Status retentáveis (429/5xx) são repetidos até `max_retries`; na última
    tentativa a resposta é devolvida ao chamador, que classifica o erro com
    o corpo em mãos.
    """

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        self._config = config or HttpClientConfig()

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            verify=self._config.verify_ssl,
            timeout=self._config.timeout_seconds,
            transport=self._config.transport,
        )

    async def post(
        self,
        url: str,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        *,
        data: dict[str, Any] | None = None,
        files: dict[str, tuple[str, bytes]] | None = None,
    ) -> httpx.Response:
        """POST JSON (`json`) ou multipart (`data` + `files`)."""
        return await self.request("POST", url, json=json, data=data, files=files, headers=headers)

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        return await self.request("GET", url, params=params, headers=headers)

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        merged_headers = {**self._config.default_headers, **(headers or {})}
        for attempt in range(self._config.max_retries + 1):
            last_attempt = attempt >= self._config.max_retries
            try:
                async with self._client() as client:
                    response = await client.request(
                        method,
                        url,
                        headers=merged_headers,
                        **_drop_empty(kwargs),
                    )
            except httpx.RequestError as exc:
                if last_attempt:
                    raise HttpError("http_connection_error", is_retryable=True) from exc
                await _backoff_sleep(
                    attempt,
                    self._config.backoff_base_seconds,
                    self._config.backoff_max_seconds,
                )
                continue

            if response.status_code in _RETRYABLE_STATUS and not last_attempt:
                logger.info(
                    "http_retryable_status",
                    extra={"status_code": response.status_code, "attempt": attempt + 1},
                )
                await _backoff_sleep(
                    attempt,
                    self._config.backoff_base_seconds,
                    self._config.backoff_max_seconds,
                )
                continue
            return response
        raise HttpError("http_retry_exhausted", is_retryable=True)


def _drop_empty(kwargs: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in kwargs.items() if value is not None}


async def _backoff_sleep(attempt: int, base: float, max_seconds: float) -> None:
    backoff = min((2**attempt) * base, max_seconds)
    logger.info("http_backoff", extra={"backoff_seconds": backoff})
    await asyncio.sleep(backoff)
