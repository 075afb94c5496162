"""Conector Bale - adapter de borda para a Bot API (tapi.bale.ai).

Este módulo é o único ponto de IO com a Bot API.
Responsabilidades:
- Cliente compartilhado (métodos cobertos, JSON/multipart, desembrulho de `result`)
- POST JSON de baixo nível para endpoints fora do cliente
- Parsing e classificação de erros da API
- Webhook (secret header, parsing seguro)
"""

from .bale_errors import BaleApiError, is_permanent_error, parse_bale_error
from .http_client import (
    SHARED_CLIENT_METHODS,
    BaleHttpClient,
    build_method_url,
    create_bale_http_client,
)
from .raw_request import RAW_POST_METHODS, RawBalePoster

__all__ = [
    "RAW_POST_METHODS",
    "SHARED_CLIENT_METHODS",
    "BaleApiError",
    "BaleHttpClient",
    "RawBalePoster",
    "build_method_url",
    "create_bale_http_client",
    "is_permanent_error",
    "parse_bale_error",
]
