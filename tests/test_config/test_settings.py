"""Testes para config.settings (Bale e base)."""

from __future__ import annotations

import pytest

from config.settings import BaleSettings, BaseSettings
from config.settings import bale as bale_module
from config.settings.base import core as base_module


class TestBaleSettings:
    def test_default_values(self) -> None:
        settings = BaleSettings()

        assert settings.api_base_url == "https://tapi.bale.ai"
        assert settings.max_retries == 0
        assert settings.inbound_image_size == "large"
        assert settings.strict_dispatch is False

    def test_immutable(self) -> None:
        settings = BaleSettings()
        with pytest.raises(AttributeError):
            settings.bot_token = "outro"  # type: ignore[misc]

    def test_endpoints_embed_token(self) -> None:
        settings = BaleSettings(bot_token="1:abc", api_base_url="https://tapi.bale.ai/")

        assert settings.get_method_url("getMe") == "https://tapi.bale.ai/bot1:abc/getMe"
        assert settings.file_endpoint == "https://tapi.bale.ai/file/bot1:abc"

    def test_endpoint_without_token_raises(self) -> None:
        with pytest.raises(ValueError, match="bot_token"):
            _ = BaleSettings().api_endpoint

    def test_validate_reports_problems(self) -> None:
        errors = BaleSettings(
            request_timeout_seconds=0,
            max_retries=-1,
            inbound_image_size="huge",
            webhook_url="http://insecure.example.com",
        ).validate()

        assert "BALE_BOT_TOKEN não configurado" in errors
        assert "BALE_REQUEST_TIMEOUT_SECONDS deve ser > 0" in errors
        assert "BALE_MAX_RETRIES deve ser >= 0" in errors
        assert "BALE_WEBHOOK_URL deve usar https" in errors
        assert any(error.startswith("BALE_INBOUND_IMAGE_SIZE") for error in errors)

    def test_validate_ok(self) -> None:
        assert BaleSettings(bot_token="1:abc").validate() == []

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BALE_BOT_TOKEN", "9:tok")
        monkeypatch.setenv("BALE_MAX_RETRIES", "2")
        monkeypatch.setenv("BALE_STRICT_DISPATCH", "TRUE")
        monkeypatch.setenv("BALE_INBOUND_IMAGE_SIZE", "small")

        settings = bale_module._load_from_env()

        assert settings.bot_token == "9:tok"
        assert settings.max_retries == 2
        assert settings.strict_dispatch is True
        assert settings.inbound_image_size == "small"


class TestBaseSettings:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("prod", "production"), ("STAGING", "staging"), ("qualquer", "development")],
    )
    def test_parse_environment(self, raw: str, expected: str) -> None:
        assert base_module._parse_environment(raw) == expected

    def test_strict_validation_outside_development(self) -> None:
        assert BaseSettings(environment="production").requires_strict_validation is True
        assert BaseSettings().requires_strict_validation is False

    def test_empty_service_name_is_invalid(self) -> None:
        assert BaseSettings(service_name="").validate() == ["SERVICE_NAME não pode ser vazio"]
