"""Builders de mídia: upload binário ou file_id remoto, e media group.

Exatamente um caminho por chamada:
- context.upload presente -> multipart com o arquivo no campo da mídia
- caso contrário -> `fileId` vai como string no corpo JSON
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.bale.base import BaleRequest, BuildContext, compact, merge_extra
from utils.errors import ParameterValidationError

if TYPE_CHECKING:
    from api.payload_builders.bale.base import PayloadBuilder
    from api.payload_builders.bale.params import (
        MediaGroupItem,
        SendMediaGroupParams,
        SendMediaParams,
        UploadStickerFileParams,
    )

# Método -> campo que carrega o arquivo
MEDIA_FIELDS: dict[str, str] = {
    "sendDocument": "document",
    "sendPhoto": "photo",
    "sendAudio": "audio",
    "sendVoice": "voice",
    "sendVideo": "video",
    "sendAnimation": "animation",
    "setChatPhoto": "photo",
    "uploadStickerFile": "sticker",
}


def attach_media(
    method: str,
    payload: dict[str, Any],
    file_id: str | None,
    context: BuildContext,
) -> BaleRequest:
    """Anexa o arquivo (upload) ou o file_id (string) ao payload."""
    media_field = MEDIA_FIELDS[method]
    if context.upload is not None:
        payload.pop(media_field, None)
        return BaleRequest(
            method,
            compact(payload),
            files={media_field: (context.upload.file_name, context.upload.data)},
        )

    if not file_id:
        raise ParameterValidationError(
            f"fileId é obrigatório para {method} quando binaryData=false",
            parameter="fileId",
        )
    payload[media_field] = file_id
    return BaleRequest(method, compact(payload))


def send_media(method: str) -> PayloadBuilder:
    """Builder para sendDocument/Photo/Audio/Voice/Video/Animation."""

    def build(params: SendMediaParams, context: BuildContext) -> BaleRequest:
        payload = merge_extra(
            params.additional_fields,
            {"chat_id": params.chat_id, "reply_markup": context.reply_markup},
        )
        return attach_media(method, payload, params.file_id, context)

    build.__name__ = f"build_{method}"
    return build


build_send_document = send_media("sendDocument")
build_send_photo = send_media("sendPhoto")
build_send_audio = send_media("sendAudio")
build_send_voice = send_media("sendVoice")
build_send_video = send_media("sendVideo")
build_send_animation = send_media("sendAnimation")


def build_set_chat_photo(params: SendMediaParams, context: BuildContext) -> BaleRequest:
    return attach_media("setChatPhoto", {"chat_id": params.chat_id}, params.file_id, context)


def build_upload_sticker_file(params: UploadStickerFileParams, context: BuildContext) -> BaleRequest:
    return attach_media("uploadStickerFile", {"user_id": params.user_id}, params.file_id, context)


def flatten_media_item(item: MediaGroupItem) -> dict[str, Any]:
    """Sobe os `additionalFields` para o nível do item; a chave some do resultado."""
    entry = dict(item.additional_fields)
    entry.pop("additionalFields", None)
    entry["type"] = item.type
    entry["media"] = item.media
    return compact(entry)


def build_send_media_group(params: SendMediaGroupParams, context: BuildContext) -> BaleRequest:
    return BaleRequest(
        "sendMediaGroup",
        compact(
            {
                "chat_id": params.chat_id,
                "media": [flatten_media_item(item) for item in params.media],
                "reply_to_message_id": params.reply_to_message_id,
            }
        ),
    )
