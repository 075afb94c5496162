"""Builders do resource `message` (exceto mídia, ver media.py)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.payload_builders.bale.base import (
    BaleRequest,
    BuildContext,
    Transport,
    compact,
    merge_extra,
)
from app.constants.bale import EditTarget

if TYPE_CHECKING:
    from api.payload_builders.bale.params import (
        CopyMessageParams,
        EditMessageTextParams,
        MessageRefParams,
        SendChatActionParams,
        SendContactParams,
        SendLocationParams,
        SendMessageParams,
        SendStickerParams,
    )


def build_send_message(params: SendMessageParams, context: BuildContext) -> BaleRequest:
    """{chat_id, text, reply_markup?} + additionalFields (parse_mode, ...)."""
    return BaleRequest(
        "sendMessage",
        merge_extra(
            params.additional_fields,
            {
                "chat_id": params.chat_id,
                "text": params.text,
                "reply_markup": context.reply_markup,
            },
        ),
    )


def build_edit_message_text(params: EditMessageTextParams, context: BuildContext) -> BaleRequest:
    """Edita texto endereçando mensagem inline OU mensagem de chat, nunca ambos."""
    if params.message_type is EditTarget.INLINE_MESSAGE:
        target = {"inline_message_id": params.inline_message_id}
    else:
        target = {"chat_id": params.chat_id, "message_id": params.message_id}

    payload = dict(params.additional_fields)
    for key in ("chat_id", "message_id", "inline_message_id"):
        payload.pop(key, None)
    payload.update(target)
    payload["text"] = params.text
    payload["reply_markup"] = context.reply_markup
    return BaleRequest("editMessageText", compact(payload))


def build_send_sticker(params: SendStickerParams, context: BuildContext) -> BaleRequest:
    return BaleRequest(
        "sendSticker",
        compact(
            {
                "chat_id": params.chat_id,
                "sticker": params.sticker_id,
                "reply_to_message_id": params.reply_to_message_id,
                "reply_markup": context.reply_markup,
            }
        ),
    )


def build_delete_message(params: MessageRefParams, context: BuildContext) -> BaleRequest:
    return BaleRequest(
        "deleteMessage",
        {"chat_id": params.chat_id, "message_id": params.message_id},
    )


def build_copy_message(params: CopyMessageParams, context: BuildContext) -> BaleRequest:
    return BaleRequest(
        "copyMessage",
        merge_extra(
            params.additional_fields,
            {
                "chat_id": params.chat_id,
                "from_chat_id": params.from_chat_id,
                "message_id": params.message_id,
            },
        ),
    )


def build_forward_message(params: CopyMessageParams, context: BuildContext) -> BaleRequest:
    return BaleRequest(
        "forwardMessage",
        merge_extra(
            params.additional_fields,
            {
                "chat_id": params.chat_id,
                "from_chat_id": params.from_chat_id,
                "message_id": params.message_id,
            },
        ),
    )


def build_send_location(params: SendLocationParams, context: BuildContext) -> BaleRequest:
    return BaleRequest(
        "sendLocation",
        merge_extra(
            params.additional_fields,
            {
                "chat_id": params.chat_id,
                "latitude": params.latitude,
                "longitude": params.longitude,
                "horizontal_accuracy": params.horizontal_accuracy,
                "reply_markup": context.reply_markup,
            },
        ),
    )


def build_send_contact(params: SendContactParams, context: BuildContext) -> BaleRequest:
    """sendContact vai pelo POST de baixo nível (fora do cliente compartilhado)."""
    return BaleRequest(
        "sendContact",
        compact(
            {
                "chat_id": params.chat_id,
                "phone_number": params.phone_number,
                "first_name": params.first_name,
                "last_name": params.last_name,
                "reply_to_message_id": params.reply_to_message_id,
                "reply_markup": context.reply_markup,
            }
        ),
        transport=Transport.RAW,
    )


def build_send_chat_action(params: SendChatActionParams, context: BuildContext) -> BaleRequest:
    return BaleRequest(
        "sendChatAction",
        {"chat_id": params.chat_id, "action": params.action.value},
    )
