"""Settings específicas do canal Bale.

Configurações da Bot API do Bale (compatível com a Telegram Bot API).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

BALE_API_BASE_URL: str = "https://tapi.bale.ai"

# Tamanhos aceitos para a foto baixada no webhook
VALID_IMAGE_SIZES = frozenset({"small", "medium", "large", "extraLarge"})


@dataclass(frozen=True)
class BaleSettings:
    """Configurações do canal Bale.

    Attributes:
        bot_token: Token do bot (credencial; nunca logar)
        api_base_url: URL base da Bot API
        request_timeout_seconds: Timeout por requisição HTTP
        max_retries: Tentativas extras em 429/5xx (0 = sem retry; retry
            pode duplicar efeitos remotos como envio de mensagem)
        webhook_secret: Secret esperado no header do webhook (opcional)
        webhook_url: URL pública do webhook; se definida, é registrada no startup
        inbound_image_size: Variante de foto baixada para eventos inbound
        forward_url: URL do workflow que recebe os records inbound (opcional)
        strict_dispatch: Se True, par resource/operation desconhecido levanta erro
        media_max_size_bytes: Limite de tamanho para download de mídia
    """

    bot_token: str = ""
    api_base_url: str = BALE_API_BASE_URL

    request_timeout_seconds: float = 30.0
    max_retries: int = 0

    webhook_secret: str = ""
    webhook_url: str = ""
    inbound_image_size: str = "large"
    forward_url: str = ""

    strict_dispatch: bool = False
    media_max_size_bytes: int = 20 * 1024 * 1024  # 20MB

    @property
    def api_endpoint(self) -> str:
        """URL base dos métodos: https://tapi.bale.ai/bot<token>."""
        if not self.bot_token:
            raise ValueError("bot_token é obrigatório")
        return f"{self.api_base_url.rstrip('/')}/bot{self.bot_token}"

    @property
    def file_endpoint(self) -> str:
        """URL base de download: https://tapi.bale.ai/file/bot<token>."""
        if not self.bot_token:
            raise ValueError("bot_token é obrigatório")
        return f"{self.api_base_url.rstrip('/')}/file/bot{self.bot_token}"

    def get_method_url(self, method: str) -> str:
        """Retorna URL completa de um método da Bot API."""
        return f"{self.api_endpoint}/{method}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Bale.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.bot_token:
            errors.append("BALE_BOT_TOKEN não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("BALE_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("BALE_MAX_RETRIES deve ser >= 0")

        if self.inbound_image_size not in VALID_IMAGE_SIZES:
            errors.append(
                "BALE_INBOUND_IMAGE_SIZE deve ser um de: "
                + ", ".join(sorted(VALID_IMAGE_SIZES))
            )

        if self.webhook_url and not self.webhook_url.startswith("https://"):
            errors.append("BALE_WEBHOOK_URL deve usar https")

        return errors


def _load_from_env() -> BaleSettings:
    """Carrega BaleSettings a partir de variáveis de ambiente."""
    return BaleSettings(
        bot_token=os.getenv("BALE_BOT_TOKEN", ""),
        api_base_url=os.getenv("BALE_API_BASE_URL", BALE_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("BALE_REQUEST_TIMEOUT_SECONDS", "30")),
        max_retries=int(os.getenv("BALE_MAX_RETRIES", "0")),
        webhook_secret=os.getenv("BALE_WEBHOOK_SECRET", ""),
        webhook_url=os.getenv("BALE_WEBHOOK_URL", ""),
        inbound_image_size=os.getenv("BALE_INBOUND_IMAGE_SIZE", "large"),
        forward_url=os.getenv("BALE_FORWARD_URL", ""),
        strict_dispatch=os.getenv("BALE_STRICT_DISPATCH", "").lower() in ("true", "1", "yes"),
        media_max_size_bytes=int(
            os.getenv("BALE_MEDIA_MAX_SIZE_BYTES", str(20 * 1024 * 1024))
        ),
    )


@lru_cache(maxsize=1)
def get_bale_settings() -> BaleSettings:
    """Retorna instância cacheada de BaleSettings."""
    return _load_from_env()
