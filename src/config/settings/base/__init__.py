"""Settings base (comuns a todos os canais)."""

from __future__ import annotations

from config.settings.base.core import (
    BaseSettings,
    Environment,
    get_base_settings,
)

__all__ = [
    "BaseSettings",
    "Environment",
    "get_base_settings",
]
