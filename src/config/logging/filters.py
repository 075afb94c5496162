"""Filters de logging do adapter Bale.

- CorrelationIdFilter: injeta correlation_id e service em cada record.
- BotTokenMaskingFilter: remove o token do bot de URLs logadas.

O token aparece no path de toda URL da Bot API (`/bot<token>/<method>`),
então qualquer log que carregue uma URL precisa passar pela máscara.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# /bot123456:ABC-def/ -> /bot***/
_BOT_TOKEN_PATTERN = re.compile(r"/bot[^/\s]+")
MASKED_TOKEN = "/bot***"


def mask_bot_token(value: str) -> str:
    """Substitui o segmento `/bot<token>` de uma URL por `/bot***`."""
    return _BOT_TOKEN_PATTERN.sub(MASKED_TOKEN, value)


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Se correlation_id já foi passado via `extra`, o valor é preservado.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing or self._get_correlation_id()
        record.service = self._service_name
        return True


class BotTokenMaskingFilter(logging.Filter):
    """Mascara tokens de bot nos campos `url`/`endpoint` e na mensagem."""

    _URL_FIELDS = ("url", "endpoint")

    def filter(self, record: logging.LogRecord) -> bool:
        for field_name in self._URL_FIELDS:
            value = getattr(record, field_name, None)
            if isinstance(value, str):
                setattr(record, field_name, mask_bot_token(value))
        if isinstance(record.msg, str) and "/bot" in record.msg:
            record.msg = mask_bot_token(record.msg)
        return True
