"""Factory de wiring para o adapter Bale (bootstrap)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.bale import RawBalePoster, create_bale_http_client
from api.connectors.bale.http_base import HttpClientConfig
from app.infra.bale import (
    MediaResolver,
    WebhookRegistration,
    create_media_resolver,
    create_record_sink,
)
from app.use_cases.bale import Dispatcher
from config.settings import get_bale_settings
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from app.protocols.record_sink import RecordSink
    from config.settings import BaleSettings


def create_dispatcher(
    token: str | None = None,
    settings: BaleSettings | None = None,
) -> Dispatcher:
    """Dispatcher com cliente compartilhado e POST de baixo nível.

    Args:
        token: Credencial explícita do host; sobrepõe BALE_BOT_TOKEN.
        settings: BaleSettings opcional (default: ambiente).

    Raises:
        ConfigurationError: Sem token disponível.
    """
    bale = settings or get_bale_settings()
    bot_token = token or bale.bot_token
    if not bot_token:
        raise ConfigurationError("BALE_BOT_TOKEN não configurado")

    raw_poster = RawBalePoster(
        bot_token,
        HttpClientConfig(timeout_seconds=bale.request_timeout_seconds),
        api_base_url=bale.api_base_url,
    )
    return Dispatcher(
        create_bale_http_client(bale, token=bot_token),
        raw_poster,
        strict=bale.strict_dispatch,
    )


def create_inbound_resolver(settings: BaleSettings | None = None) -> MediaResolver:
    bale = settings or get_bale_settings()
    if not bale.bot_token:
        raise ConfigurationError("BALE_BOT_TOKEN não configurado")
    return create_media_resolver(bale)


def create_inbound_sink(settings: BaleSettings | None = None) -> RecordSink:
    return create_record_sink(settings or get_bale_settings())


def create_webhook_registration(settings: BaleSettings | None = None) -> WebhookRegistration | None:
    """None quando BALE_WEBHOOK_URL não está definido."""
    bale = settings or get_bale_settings()
    if not bale.webhook_url:
        return None
    return WebhookRegistration(
        create_bale_http_client(bale),
        bale.webhook_url,
        secret_token=bale.webhook_secret,
    )
