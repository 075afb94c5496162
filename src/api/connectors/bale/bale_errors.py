"""Erros e helpers de parsing para a Bot API do Bale."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class BaleApiError:
    """Erro retornado pela Bot API do Bale."""

    status_code: int
    error_code: int
    description: str
    is_permanent: bool  # True se erro não é retentável


def is_permanent_error(error_code: int) -> bool:
    """Classifica erro como permanente ou transitório.

    Permanentes: 400, 401, 403, 404, 409, 413
    Transitórios: 429 (rate limit), 5xx
    """
    return error_code in {400, 401, 403, 404, 409, 413}


def parse_bale_error(response_data: Any, status_code: int) -> BaleApiError | None:
    """Extrai o erro de uma resposta da Bot API.

    A API responde `{"ok": false, "error_code": ..., "description": ...}`
    em falhas; status HTTP >= 400 sem corpo estruturado também é erro.

    Returns:
        BaleApiError se houver erro, None se sucesso
    """
    if not isinstance(response_data, dict):
        if status_code >= 400:
            return BaleApiError(status_code, status_code, "Unknown error", is_permanent_error(status_code))
        return None

    if status_code < 400 and response_data.get("ok") is not False:
        return None

    raw_code = response_data.get("error_code", status_code)
    error_code = raw_code if isinstance(raw_code, int) else status_code
    description = str(response_data.get("description") or "Unknown error")
    return BaleApiError(
        status_code=status_code,
        error_code=error_code,
        description=description,
        is_permanent=is_permanent_error(error_code),
    )
