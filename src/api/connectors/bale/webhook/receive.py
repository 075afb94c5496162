"""Parse e validação inicial do webhook Bale (sem PII)."""

from __future__ import annotations

import hmac
import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

# A Bot API (compatível com Telegram) ecoa o `secret_token` do setWebhook neste header
SECRET_TOKEN_HEADER = "x-telegram-bot-api-secret-token"


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidSecretError(WebhookRequestError):
    """Secret token ausente ou diferente do configurado."""


class InvalidJsonError(WebhookRequestError):
    """JSON inválido no payload do webhook."""


def verify_secret_token(headers: Mapping[str, str], secret: str | None) -> bool:
    """Confere o secret token do header.

    Sem secret configurado a verificação é ignorada (retorna True).
    """
    if not secret:
        return True
    received = _get_header(headers, SECRET_TOKEN_HEADER)
    if not received:
        return False
    return hmac.compare_digest(received.encode("utf-8"), secret.encode("utf-8"))


def parse_webhook_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
) -> dict[str, object]:
    """Valida o secret e parseia o JSON do update.

    Raises:
        InvalidSecretError: Se o secret token não conferir
        InvalidJsonError: Se o JSON estiver inválido ou não for objeto

    Returns:
        Update como dict
    """
    if not verify_secret_token(headers, secret):
        raise InvalidSecretError("invalid_secret_token")

    try:
        payload = json.loads(raw_body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("payload_not_object")

    return payload


def _get_header(headers: Mapping[str, str], name: str) -> str | None:
    for key, value in headers.items():
        if key.lower() == name:
            return value
    return None
