"""Ciclo de vida do webhook na Bot API: verificar, registrar e remover."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from utils.errors import RemoteCallError

if TYPE_CHECKING:
    from app.protocols.bale_client import BaleClientProtocol

logger = logging.getLogger(__name__)


class WebhookRegistration:
    """Registra a URL pública do serviço como webhook do bot."""

    def __init__(
        self,
        client: BaleClientProtocol,
        webhook_url: str,
        secret_token: str = "",
    ) -> None:
        self._client = client
        self._webhook_url = webhook_url
        self._secret_token = secret_token

    async def check_exists(self) -> bool:
        """True se o bot já aponta para esta URL."""
        info = await self._client.call("getWebhookInfo")
        current = info.get("url") if isinstance(info, dict) else None
        return current == self._webhook_url

    async def create(self) -> bool:
        payload = {"url": self._webhook_url}
        if self._secret_token:
            payload["secret_token"] = self._secret_token
        await self._client.call("setWebhook", payload)
        logger.info("bale_webhook_registered")
        return True

    async def delete(self) -> bool:
        """Remove o webhook; falha remota vira False."""
        try:
            await self._client.call("deleteWebhook")
        except RemoteCallError as exc:
            logger.warning(
                "bale_webhook_delete_failed",
                extra={"status_code": exc.status_code, "error_code": exc.error_code},
            )
            return False
        logger.info("bale_webhook_deleted")
        return True

    async def ensure(self) -> bool:
        """Registra apenas se ainda não estiver registrado."""
        if await self.check_exists():
            logger.info("bale_webhook_already_registered")
            return True
        return await self.create()
