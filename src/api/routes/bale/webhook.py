"""Endpoint de webhook do Bale.

Endpoints:
- POST /webhook/bale: recebimento de updates

Segurança:
- Secret token (X-Telegram-Bot-Api-Secret-Token) quando BALE_WEBHOOK_SECRET está definido
- Resposta imediata; o download de mídia roda em background
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, Response, status

from api.connectors.bale.webhook import InvalidJsonError, InvalidSecretError, parse_webhook_request
from api.routes.bale.webhook_runtime import get_inbound_dependencies, process_update_safe
from api.routes.bale.webhook_tasks import schedule_update_task
from app.observability import CORRELATION_HEADER, get_correlation_id, reset_correlation_id, set_correlation_id
from config.settings import get_bale_settings
from utils.errors import ConfigurationError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=None)
async def receive_webhook(request: Request) -> Response | dict[str, Any]:
    """Recebe um update e agenda o processamento.

    Returns:
        {"status": "received", "correlation_id"} ou Response de erro.
    """
    token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
    try:
        settings = get_bale_settings()
        raw_body = await request.body()

        try:
            body = parse_webhook_request(
                raw_body=raw_body,
                headers=dict(request.headers),
                secret=settings.webhook_secret or None,
            )
        except InvalidSecretError:
            logger.warning(
                "webhook_secret_invalid",
                extra={"channel": "bale", "correlation_id": get_correlation_id()},
            )
            return Response(
                content="Unauthorized",
                media_type="text/plain",
                status_code=status.HTTP_401_UNAUTHORIZED,
            )
        except InvalidJsonError as exc:
            logger.warning(
                "webhook_json_invalid",
                extra={"channel": "bale", "correlation_id": get_correlation_id(), "error": str(exc)},
            )
            return Response(
                content="Bad Request",
                media_type="text/plain",
                status_code=status.HTTP_400_BAD_REQUEST,
            )

        logger.info(
            "webhook_received",
            extra={
                "channel": "bale",
                "correlation_id": get_correlation_id(),
                "update_id": body.get("update_id"),
                "payload_size": len(raw_body),
            },
        )

        try:
            dependencies = get_inbound_dependencies()
        except ConfigurationError as exc:
            logger.warning(
                "webhook_dependencies_unavailable",
                extra={"channel": "bale", "correlation_id": get_correlation_id(), "reason": str(exc)},
            )
        else:
            schedule_update_task(
                correlation_id=get_correlation_id(),
                coroutine=process_update_safe(
                    body=body,
                    correlation_id=get_correlation_id(),
                    dependencies=dependencies,
                ),
            )

        return {"status": "received", "correlation_id": get_correlation_id()}
    finally:
        reset_correlation_id(token)
