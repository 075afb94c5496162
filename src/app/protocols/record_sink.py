"""Protocolo do destino dos records inbound (o workflow host)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.protocols.models import OutboundRecord


class RecordSink(Protocol):
    """Recebe os records normalizados produzidos pelo webhook."""

    async def emit(self, record: OutboundRecord) -> None: ...
