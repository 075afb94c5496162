"""Logging estruturado (JSON) do adapter Bale.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="bale_adapter")
    logger = get_logger(__name__)
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import (
    BotTokenMaskingFilter,
    CorrelationIdFilter,
    mask_bot_token,
)
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "BotTokenMaskingFilter",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
    "mask_bot_token",
]
