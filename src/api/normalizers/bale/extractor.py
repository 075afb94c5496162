"""Classificador de updates do webhook Bale.

Estrutura do update (compatível com a Bot API do Telegram):
- update_id
- message ou channel_post (channel_post tem precedência)

Anexos detectados, nesta ordem:
- photo: lista de variantes em ordem crescente de tamanho (precisa ser lista)
- video: objeto com file_id
- document: objeto com file_id

Não baixa nada; apenas extração estrutural.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from app.constants.bale import AttachmentKind, EventKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Attachment:
    """Anexo detectado no evento.

    Para photo, `variants` traz a lista original; para video/document,
    `variants` tem um único elemento.
    """

    kind: AttachmentKind
    variants: tuple[Mapping[str, Any], ...]

    @property
    def file_id(self) -> str | None:
        """file_id do primeiro elemento (video/document)."""
        if not self.variants:
            return None
        value = self.variants[0].get("file_id")
        return str(value) if value else None


@dataclass(frozen=True, slots=True)
class InboundEvent:
    """Update classificado.

    Attributes:
        body: Update bruto, repassado intacto ao record
        kind: message ou channel_post (None para outros updates)
        attachment: Anexo detectado, se houver
    """

    body: Mapping[str, Any]
    kind: EventKind | None = None
    attachment: Attachment | None = None
    payload: Mapping[str, Any] = field(default_factory=dict)

    def event_identity(self) -> dict[str, Any]:
        """update_id/chat_id/message_id para logs e erros."""
        chat = self.payload.get("chat")
        return {
            "update_id": self.body.get("update_id"),
            "chat_id": chat.get("id") if isinstance(chat, Mapping) else None,
            "message_id": self.payload.get("message_id"),
        }


def classify_event(body: Mapping[str, Any]) -> InboundEvent:
    """Classifica o update em (tipo, anexo)."""
    kind: EventKind | None = None
    payload: Any = None
    if EventKind.CHANNEL_POST.value in body:
        kind = EventKind.CHANNEL_POST
        payload = body[EventKind.CHANNEL_POST.value]
    elif EventKind.MESSAGE.value in body:
        kind = EventKind.MESSAGE
        payload = body[EventKind.MESSAGE.value]

    if not isinstance(payload, Mapping):
        if kind is not None:
            logger.info("bale_event_payload_not_object", extra={"event_kind": kind.value})
        return InboundEvent(body=body, kind=kind)

    return InboundEvent(
        body=body,
        kind=kind,
        attachment=_detect_attachment(payload),
        payload=payload,
    )


def _detect_attachment(payload: Mapping[str, Any]) -> Attachment | None:
    photo = payload.get(AttachmentKind.PHOTO.value)
    if photo and isinstance(photo, list):
        return Attachment(
            AttachmentKind.PHOTO,
            tuple(variant for variant in photo if isinstance(variant, Mapping)),
        )

    for kind in (AttachmentKind.VIDEO, AttachmentKind.DOCUMENT):
        value = payload.get(kind.value)
        if isinstance(value, Mapping):
            return Attachment(kind, (value,))
    return None
