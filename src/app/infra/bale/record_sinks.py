"""Destinos dos records inbound.

- LoggingRecordSink: apenas registra o record (sem conteúdo de mensagem)
- HttpForwardSink: encaminha o record em JSON para o workflow (BALE_FORWARD_URL)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.bale.http_base import HttpClient, HttpClientConfig, HttpError

if TYPE_CHECKING:
    from app.protocols.models import OutboundRecord
    from config.settings import BaleSettings

logger = logging.getLogger(__name__)


class LoggingRecordSink:
    """Sink padrão quando não há URL de encaminhamento."""

    async def emit(self, record: OutboundRecord) -> None:
        logger.info(
            "bale_inbound_record",
            extra={
                "update_id": record.json.get("update_id"),
                "binary_fields": sorted(record.binary),
            },
        )


class HttpForwardSink:
    """POST do record (formato do host) para a URL do workflow."""

    def __init__(self, url: str, config: HttpClientConfig | None = None) -> None:
        self._url = url
        self._http = HttpClient(config)

    async def emit(self, record: OutboundRecord) -> None:
        response = await self._http.post(self._url, json=record.to_dict())
        if response.status_code >= 400:
            logger.warning(
                "bale_forward_failed",
                extra={"status_code": response.status_code, "update_id": record.json.get("update_id")},
            )
            raise HttpError(
                "forward_rejected",
                status_code=response.status_code,
                is_retryable=response.status_code >= 500,
            )
        logger.info(
            "bale_forward_succeeded",
            extra={"status_code": response.status_code, "update_id": record.json.get("update_id")},
        )


def create_record_sink(settings: BaleSettings) -> LoggingRecordSink | HttpForwardSink:
    if settings.forward_url:
        return HttpForwardSink(
            settings.forward_url,
            HttpClientConfig(
                timeout_seconds=settings.request_timeout_seconds,
                max_retries=settings.max_retries,
            ),
        )
    return LoggingRecordSink()
