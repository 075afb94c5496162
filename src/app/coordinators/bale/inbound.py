"""Processamento inbound: classifica o update, baixa a mídia e emite o record.

Um update produz exatamente um record. Com anexo, o record só é emitido
depois do download completo; falha na mídia aborta o update inteiro.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.normalizers.bale import build_inbound_record, classify_event
from app.constants.bale import AttachmentKind
from app.infra.bale.media_resolver import select_photo_variant
from utils.errors import MediaResolutionError

if TYPE_CHECKING:
    from api.normalizers.bale import Attachment, InboundEvent
    from app.infra.bale.media_resolver import MediaResolver
    from app.protocols.models import OutboundRecord
    from app.protocols.record_sink import RecordSink

logger = logging.getLogger(__name__)


async def process_inbound_update(
    body: dict[str, Any],
    *,
    resolver: MediaResolver,
    sink: RecordSink,
    image_size: str = "large",
) -> OutboundRecord:
    """Processa um update do webhook.

    Args:
        body: Update já parseado
        resolver: Resolver de mídia (getFile + download)
        sink: Destino do record
        image_size: Variante de foto (small, medium, large, extraLarge)

    Raises:
        MediaResolutionError: Se o anexo não puder ser baixado
    """
    event = classify_event(body)
    media = None
    if event.attachment is not None:
        file_id = select_file_id(event.attachment, image_size, event)
        resolved = await resolver.resolve(file_id, event.event_identity())
        media = resolved.artifact

    record = build_inbound_record(event, media)
    await sink.emit(record)

    logger.info(
        "bale_inbound_processed",
        extra={
            "event_kind": event.kind.value if event.kind else None,
            "attachment": event.attachment.kind.value if event.attachment else None,
            **event.event_identity(),
        },
    )
    return record


def select_file_id(attachment: Attachment, image_size: str, event: InboundEvent) -> str:
    """file_id do anexo; para foto, a variante do tamanho configurado."""
    if attachment.kind is AttachmentKind.PHOTO:
        try:
            variant = select_photo_variant(attachment.variants, image_size)
        except ValueError as exc:
            raise MediaResolutionError(
                "photo has no usable variants",
                file_id=None,
                event_identity=event.event_identity(),
                stage="metadata",
            ) from exc
        file_id = variant.get("file_id")
    else:
        file_id = attachment.file_id
    return str(file_id) if file_id else ""
