"""POST JSON de baixo nível para endpoints fora do cliente compartilhado.

Usado por sendContact, answerCallbackQuery, getChatMembersCount,
createNewStickerSet, addStickerToSet e sendInvoice. Diferenças em relação
ao BaleHttpClient:
- Content-Type: application/json explícito, corpo serializado aqui
- Sem retry
- Devolve o JSON da resposta inteiro (não apenas `result`)
- Só HTTP não-2xx é erro; o corpo de erro vai junto no RemoteCallError
"""

from __future__ import annotations

import json
import logging
from typing import Any

from api.connectors.bale.bale_errors import parse_bale_error
from api.connectors.bale.bale_logging import log_bale_error, log_success
from api.connectors.bale.http_base import HttpClient, HttpClientConfig, HttpError
from api.connectors.bale.http_client import build_method_url
from config.settings.bale import BALE_API_BASE_URL
from utils.errors import ConfigurationError, RemoteCallError

logger = logging.getLogger(__name__)

RAW_POST_METHODS = frozenset(
    {
        "sendContact",
        "answerCallbackQuery",
        "getChatMembersCount",
        "createNewStickerSet",
        "addStickerToSet",
        "sendInvoice",
    }
)

JSON_HEADERS = {"Content-Type": "application/json"}


class RawBalePoster:
    """POST JSON direto na Bot API, sem o desembrulho do cliente compartilhado."""

    def __init__(
        self,
        token: str,
        config: HttpClientConfig | None = None,
        api_base_url: str = BALE_API_BASE_URL,
    ) -> None:
        if not token or not token.strip():
            raise ConfigurationError("bot token é obrigatório para chamar a Bot API")
        base_config = config or HttpClientConfig()
        # Um único disparo: estes endpoints criam efeitos remotos
        self._http = HttpClient(
            HttpClientConfig(
                timeout_seconds=base_config.timeout_seconds,
                max_retries=0,
                verify_ssl=base_config.verify_ssl,
                transport=base_config.transport,
            )
        )
        self._token = token
        self._api_base_url = api_base_url

    async def post_json(self, method: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Envia `payload` como JSON e devolve a resposta inteira.

        Raises:
            RemoteCallError: Em falha de transporte ou status não-2xx
        """
        url = build_method_url(self._api_base_url, self._token, method)
        body = json.dumps(
            {key: value for key, value in payload.items() if value is not None},
            ensure_ascii=False,
        ).encode("utf-8")

        try:
            response = await self._http.request(
                "POST",
                url,
                headers=dict(JSON_HEADERS),
                content=body,
            )
        except HttpError as exc:
            logger.warning("bale_raw_transport_error", extra={"method": method, "error": str(exc)})
            raise RemoteCallError(method, f"Bale request failed: {exc}") from exc

        try:
            response_data = response.json()
        except ValueError:
            response_data = None

        if response.status_code >= 400:
            bale_error = parse_bale_error(response_data, response.status_code)
            if bale_error:
                log_bale_error(bale_error, method)
            raise RemoteCallError(
                method,
                f"Bale API returned HTTP {response.status_code}",
                status_code=response.status_code,
                error_code=bale_error.error_code if bale_error else None,
                description=bale_error.description if bale_error else None,
                body=response_data if isinstance(response_data, dict) else None,
            )

        if not isinstance(response_data, dict):
            raise RemoteCallError(
                method,
                "Bale response is not a JSON object",
                status_code=response.status_code,
            )

        log_success(method, response.status_code, transport="raw")
        return response_data
