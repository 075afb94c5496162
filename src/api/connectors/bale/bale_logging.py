"""Helpers de logging para a Bot API do Bale (sem PII, sem token)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .bale_errors import BaleApiError

logger = logging.getLogger(__name__)


def log_bale_error(bale_error: BaleApiError, method: str) -> None:
    """Loga erro da Bot API sem expor dados sensíveis."""
    logger.warning(
        "bale_api_error",
        extra={
            "method": method,
            "status_code": bale_error.status_code,
            "error_code": bale_error.error_code,
            "description": bale_error.description,
            "is_permanent": bale_error.is_permanent,
        },
    )


def log_success(method: str, status_code: int, transport: str) -> None:
    """Loga sucesso sem payload."""
    logger.debug(
        "bale_api_call_succeeded",
        extra={
            "method": method,
            "status_code": status_code,
            "transport": transport,
        },
    )
