"""Normalizer Bale: evento classificado (+ mídia baixada) -> record do host."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.protocols.models import OutboundRecord

if TYPE_CHECKING:
    from api.normalizers.bale.extractor import InboundEvent
    from app.protocols.models import BinaryArtifact

BINARY_PROPERTY = "data"


def build_inbound_record(event: InboundEvent, media: BinaryArtifact | None = None) -> OutboundRecord:
    """O update vai intacto em `json`; a mídia, se houver, em `binary.data`."""
    binary = {BINARY_PROPERTY: media} if media is not None else {}
    return OutboundRecord(json=dict(event.body), binary=binary)
