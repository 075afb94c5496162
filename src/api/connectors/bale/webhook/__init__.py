"""Webhook Bale: secret token e parsing seguro."""

from .receive import (
    SECRET_TOKEN_HEADER,
    InvalidJsonError,
    InvalidSecretError,
    WebhookRequestError,
    parse_webhook_request,
    verify_secret_token,
)

__all__ = [
    "SECRET_TOKEN_HEADER",
    "InvalidJsonError",
    "InvalidSecretError",
    "WebhookRequestError",
    "parse_webhook_request",
    "verify_secret_token",
]
