"""Formatter JSON dos logs estruturados.

Campos obrigatórios: asctime, level, logger, message, correlation_id, service.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o JsonFormatter padrão do serviço.

    Exemplo de output:
        {"asctime": "...", "level": "INFO", "logger": "app.use_cases.bale.dispatcher",
         "message": "bale_item_dispatched", "correlation_id": "abc-123",
         "service": "bale_adapter", "operation": "sendMessage", "item_index": 0}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
