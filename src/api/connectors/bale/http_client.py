"""Cliente HTTP compartilhado da Bot API do Bale.

Estende HttpClient com comportamentos da Bot API:
- URL `{base}/bot{token}/{method}`
- JSON para chamadas sem arquivo, multipart para uploads
- Desembrulha `{"ok": true, "result": ...}` e devolve apenas `result`
- Classifica erros (`ok: false`, HTTP >= 400, transporte) em RemoteCallError

O cliente cobre um conjunto fechado de métodos (SHARED_CLIENT_METHODS).
Os endpoints fora desse conjunto usam RawBalePoster (raw_request.py).
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from api.connectors.bale.bale_errors import parse_bale_error
from api.connectors.bale.bale_logging import log_bale_error, log_success
from api.connectors.bale.http_base import HttpClient, HttpClientConfig, HttpError
from config.settings.bale import BALE_API_BASE_URL
from utils.errors import ConfigurationError, RemoteCallError

if TYPE_CHECKING:
    import httpx

    from config.settings import BaleSettings

logger: logging.Logger = logging.getLogger(__name__)

SHARED_CLIENT_METHODS = frozenset(
    {
        # bot
        "getMe",
        "logOut",
        "close",
        "getWebhookInfo",
        "setWebhook",
        "deleteWebhook",
        # callback
        "answerInlineQuery",
        # message
        "sendMessage",
        "editMessageText",
        "sendSticker",
        "deleteMessage",
        "copyMessage",
        "forwardMessage",
        "sendDocument",
        "sendPhoto",
        "sendAudio",
        "sendVoice",
        "sendVideo",
        "sendAnimation",
        "sendMediaGroup",
        "sendLocation",
        "sendChatAction",
        # chat
        "getChat",
        "getChatAdministrators",
        "getChatMember",
        "setChatTitle",
        "setChatDescription",
        "setChatPhoto",
        "deleteChatPhoto",
        "pinChatMessage",
        "unpinChatMessage",
        "unpinAllChatMessages",
        "leaveChat",
        "banChatMember",
        "unbanChatMember",
        "promoteChatMember",
        "createChatInviteLink",
        "revokeChatInviteLink",
        "exportChatInviteLink",
        # payment
        "answerPreCheckoutQuery",
        # sticker
        "uploadStickerFile",
        # file
        "getFile",
    }
)


def build_method_url(api_base_url: str, token: str, method: str) -> str:
    """Monta `{base}/bot{token}/{method}`."""
    if not token or not token.strip():
        raise ConfigurationError("bot token é obrigatório para chamar a Bot API")
    return f"{api_base_url.rstrip('/')}/bot{token}/{method}"


class BaleHttpClient(HttpClient):
    """Cliente HTTP especializado para a Bot API do Bale."""

    def __init__(
        self,
        token: str,
        config: HttpClientConfig | None = None,
        api_base_url: str = BALE_API_BASE_URL,
    ) -> None:
        super().__init__(config)
        if not token or not token.strip():
            raise ConfigurationError("bot token é obrigatório para chamar a Bot API")
        self._token = token
        self._api_base_url = api_base_url

    @property
    def api_base_url(self) -> str:
        return self._api_base_url

    def supports(self, method: str) -> bool:
        return method in SHARED_CLIENT_METHODS

    async def call(
        self,
        method: str,
        payload: dict[str, Any] | None = None,
        files: dict[str, tuple[str, bytes]] | None = None,
    ) -> Any:
        """Chama um método da Bot API e devolve `result`.

        Args:
            method: Nome do método (ex: sendMessage)
            payload: Campos da requisição
            files: Arquivos para upload multipart ({campo: (filename, bytes)})

        Returns:
            O campo `result` da resposta

        Raises:
            ValueError: Se o método não pertence ao conjunto do cliente
            RemoteCallError: Se a chamada falhar
        """
        if not self.supports(method):
            raise ValueError(f"Método fora do cliente compartilhado: {method}")

        url = build_method_url(self._api_base_url, self._token, method)
        try:
            if files:
                response = await self.post(url, data=encode_form_fields(payload or {}), files=files)
            else:
                response = await self.post(url, json=payload or {})
        except HttpError as exc:
            logger.warning("bale_transport_error", extra={"method": method, "error": str(exc)})
            raise RemoteCallError(method, f"Bale request failed: {exc}") from exc

        data = self._process_bale_response(response, method)
        return data.get("result")

    def _process_bale_response(self, response: httpx.Response, method: str) -> dict[str, Any]:
        """Valida a resposta e levanta RemoteCallError em erro."""
        try:
            response_data = response.json()
        except ValueError as exc:
            logger.error("bale_invalid_json_response", extra={"method": method})
            raise RemoteCallError(
                method,
                "Bale response is not valid JSON",
                status_code=response.status_code,
            ) from exc

        bale_error = parse_bale_error(response_data, response.status_code)
        if bale_error:
            log_bale_error(bale_error, method)
            raise RemoteCallError(
                method,
                f"Bale API error: {bale_error.description} ({bale_error.error_code})",
                status_code=bale_error.status_code,
                error_code=bale_error.error_code,
                description=bale_error.description,
                body=response_data if isinstance(response_data, dict) else None,
            )

        log_success(method, response.status_code, transport="client")
        return response_data


def encode_form_fields(payload: dict[str, Any]) -> dict[str, str]:
    """Converte campos para multipart: objetos viram JSON, bool vira true/false."""
    fields: dict[str, str] = {}
    for key, value in payload.items():
        if value is None:
            continue
        if isinstance(value, bool):
            fields[key] = "true" if value else "false"
        elif isinstance(value, (dict, list)):
            fields[key] = json.dumps(value, ensure_ascii=False)
        else:
            fields[key] = str(value)
    return fields


def create_bale_http_client(
    settings: BaleSettings | None = None,
    token: str | None = None,
) -> BaleHttpClient:
    """Factory para criar o cliente compartilhado com config padrão.

    Args:
        settings: BaleSettings opcional. Se None, carrega do ambiente.
        token: Token explícito (credencial do host); sobrepõe o das settings.
    """
    from config.settings import get_bale_settings

    bale = settings or get_bale_settings()
    config = HttpClientConfig(
        timeout_seconds=bale.request_timeout_seconds,
        max_retries=bale.max_retries,
    )
    return BaleHttpClient(
        token=token or bale.bot_token,
        config=config,
        api_base_url=bale.api_base_url,
    )
