"""Agregador de settings do adapter Bale.

Re-exporta as settings de cada módulo.
"""

from __future__ import annotations

from config.settings.bale import (
    BALE_API_BASE_URL,
    VALID_IMAGE_SIZES,
    BaleSettings,
    get_bale_settings,
)
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

__all__ = [
    "BALE_API_BASE_URL",
    "VALID_IMAGE_SIZES",
    "BaleSettings",
    "BaseSettings",
    "Environment",
    "get_bale_settings",
    "get_base_settings",
]
