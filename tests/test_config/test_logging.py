"""Testes para config.logging.

Cobre: configure_logging, log_fallback, CorrelationIdFilter,
BotTokenMaskingFilter e create_json_formatter.
"""

from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    BotTokenMaskingFilter,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    log_fallback,
    mask_bot_token,
)
from config.logging.config import DEFAULT_SERVICE_NAME


def _record(msg: str = "msg", **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self) -> None:
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_configure_logging_is_case_insensitive(self) -> None:
        configure_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_configure_logging_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_configure_logging_installs_single_handler_with_filters(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]

        configure_logging(correlation_id_getter=lambda: "cid")

        assert len(root.handlers) == 1
        filters = root.handlers[0].filters
        assert any(isinstance(f, CorrelationIdFilter) for f in filters)
        assert any(isinstance(f, BotTokenMaskingFilter) for f in filters)

    def test_configure_logging_quiets_http_libraries(self) -> None:
        configure_logging(level="DEBUG")
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_default_service_name(self) -> None:
        assert DEFAULT_SERVICE_NAME == "bale_adapter"


class TestLogFallback:
    def test_log_fallback_with_reason_and_item(self) -> None:
        logger = MagicMock(spec=logging.Logger)

        log_fallback(logger, "answerQuery", reason="remote_call_failed", item_index=2)

        call_args = logger.info.call_args
        assert call_args[0] == ("Fallback applied for %s", "answerQuery")
        assert call_args[1]["extra"] == {
            "fallback_used": True,
            "component": "answerQuery",
            "reason": "remote_call_failed",
            "item_index": 2,
        }

    def test_log_fallback_without_optional_params(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "test_component")
        extra = logger.info.call_args[1]["extra"]
        assert "reason" not in extra
        assert "item_index" not in extra


class TestCorrelationIdFilter:
    def test_filter_adds_correlation_id_from_getter(self) -> None:
        filter_ = CorrelationIdFilter("my_service", lambda: "corr-123")
        record = _record()

        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "my_service"

    def test_filter_preserves_explicit_correlation_id(self) -> None:
        filter_ = CorrelationIdFilter("svc", lambda: "from-getter")
        record = _record(correlation_id="explicit-id")
        filter_.filter(record)
        assert record.correlation_id == "explicit-id"

    def test_filter_uses_empty_string_when_no_getter(self) -> None:
        record = _record()
        CorrelationIdFilter("service_name").filter(record)
        assert record.correlation_id == ""


class TestBotTokenMasking:
    def test_mask_bot_token_in_method_url(self) -> None:
        url = "https://tapi.bale.ai/bot123456:ABC-def/sendMessage"
        assert mask_bot_token(url) == "https://tapi.bale.ai/bot***/sendMessage"

    def test_mask_bot_token_in_file_url(self) -> None:
        url = "https://tapi.bale.ai/file/bot123:XYZ/photos/file_1.jpg"
        assert mask_bot_token(url) == "https://tapi.bale.ai/file/bot***/photos/file_1.jpg"

    def test_filter_masks_url_fields_and_message(self) -> None:
        record = _record(
            "HTTP Request: POST https://tapi.bale.ai/bot1:secret/getMe",
            url="https://tapi.bale.ai/bot1:secret/getMe",
        )

        assert BotTokenMaskingFilter().filter(record) is True
        assert "secret" not in record.url
        assert "secret" not in record.msg

    def test_filter_ignores_records_without_urls(self) -> None:
        record = _record("bale_item_dispatched", operation="sendMessage")
        BotTokenMaskingFilter().filter(record)
        assert record.msg == "bale_item_dispatched"


class TestCreateJsonFormatter:
    def test_field_rename_map_content(self) -> None:
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_json_formatter_renames_fields(self) -> None:
        formatter = create_json_formatter()
        record = _record(
            "bale_item_dispatched",
            correlation_id="abc-123",
            service="bale_adapter",
            operation="sendMessage",
        )

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "bale_item_dispatched"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "test"
        assert payload["correlation_id"] == "abc-123"
        assert payload["operation"] == "sendMessage"


def test_get_logger_same_name_returns_same_instance() -> None:
    assert get_logger("same.module") is get_logger("same.module")
