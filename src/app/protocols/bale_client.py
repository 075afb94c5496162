"""Protocolos dos clientes da Bot API usados pelo app.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import Any, Protocol


class BaleClientProtocol(Protocol):
    """Cliente compartilhado: devolve apenas o `result` da resposta."""

    async def call(
        self,
        method: str,
        payload: dict[str, Any] | None = None,
        files: dict[str, tuple[str, bytes]] | None = None,
    ) -> Any: ...


class RawPosterProtocol(Protocol):
    """POST JSON de baixo nível: devolve a resposta inteira."""

    async def post_json(self, method: str, payload: dict[str, Any]) -> dict[str, Any]: ...
