"""Settings de serviço independentes da Bot API (ambiente e logging)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

_ENVIRONMENT_ALIASES: dict[str, Environment] = {
    "production": "production",
    "prod": "production",
    "staging": "staging",
    "stage": "staging",
}


@dataclass(frozen=True)
class BaseSettings:
    """Configurações do processo.

    Attributes:
        environment: development|staging|production (ENVIRONMENT)
        service_name: Nome exposto em logs e no /health (SERVICE_NAME)
        log_level: Nível do root logger (LOG_LEVEL)
    """

    environment: Environment = "development"
    service_name: str = "bale-adapter"
    log_level: str = "INFO"

    @property
    def requires_strict_validation(self) -> bool:
        """Fora de development, settings inválidas impedem o boot."""
        return self.environment != "development"

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")
        return errors


def _parse_environment(raw: str) -> Environment:
    # Valores desconhecidos caem em development
    return _ENVIRONMENT_ALIASES.get(raw.strip().lower(), "development")


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "bale-adapter"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
