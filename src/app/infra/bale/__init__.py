"""Infra Bale: resolver de mídia, sinks de records e registro de webhook."""

from app.infra.bale.media_resolver import (
    MediaResolver,
    ResolvedMedia,
    create_media_resolver,
    select_photo_variant,
)
from app.infra.bale.record_sinks import HttpForwardSink, LoggingRecordSink, create_record_sink
from app.infra.bale.webhook_registration import WebhookRegistration

__all__ = [
    "HttpForwardSink",
    "LoggingRecordSink",
    "MediaResolver",
    "ResolvedMedia",
    "WebhookRegistration",
    "create_media_resolver",
    "create_record_sink",
    "select_photo_variant",
]
