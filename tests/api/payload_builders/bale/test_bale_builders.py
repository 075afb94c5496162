"""Testes dos builders de payload e modelos de parâmetros da Bot API do Bale."""

from __future__ import annotations

import pytest

from api.payload_builders.bale import BuildContext, MediaUpload, Transport, parse_params
from api.payload_builders.bale import callback, chat, media, message, payment, sticker
from api.payload_builders.bale import params as p
from utils.errors import ParameterValidationError

EMPTY = BuildContext()


def test_send_message_merges_additional_fields_and_markup() -> None:
    params = parse_params(
        p.SendMessageParams,
        {
            "chatId": 42,
            "text": "hi",
            "additionalFields": {"parse_mode": "Markdown", "text": "ignored"},
        },
    )
    markup = {"inline_keyboard": []}

    request = message.build_send_message(params, BuildContext(reply_markup=markup))

    assert request.method == "sendMessage"
    assert request.transport is Transport.CLIENT
    assert request.payload == {
        "chat_id": "42",
        "text": "hi",
        "parse_mode": "Markdown",
        "reply_markup": markup,
    }


def test_send_message_without_markup_omits_field() -> None:
    params = parse_params(p.SendMessageParams, {"chatId": "1", "text": "x"})

    request = message.build_send_message(params, EMPTY)

    assert "reply_markup" not in request.payload


def test_edit_message_text_inline_target_only_sends_inline_id() -> None:
    params = parse_params(
        p.EditMessageTextParams,
        {
            "messageType": "inlineMessage",
            "inlineMessageId": "abc",
            "chatId": "1",
            "messageId": 7,
            "text": "edited",
            "additionalFields": {"chat_id": "99"},
        },
    )

    request = message.build_edit_message_text(params, EMPTY)

    assert request.payload == {"inline_message_id": "abc", "text": "edited"}


def test_edit_message_text_message_target_requires_chat_and_message() -> None:
    with pytest.raises(ParameterValidationError):
        parse_params(p.EditMessageTextParams, {"messageType": "message", "text": "x"}, item_index=3)


def test_edit_message_text_message_target() -> None:
    params = parse_params(
        p.EditMessageTextParams,
        {"messageType": "message", "chatId": "5", "messageId": 9, "text": "t"},
    )

    request = message.build_edit_message_text(params, EMPTY)

    assert request.payload == {"chat_id": "5", "message_id": 9, "text": "t"}


def test_send_contact_uses_raw_transport_and_snake_case_reply_id() -> None:
    params = parse_params(
        p.SendContactParams,
        {
            "chatId": "10",
            "phone_number": "+98123",
            "first_name": "Sara",
            "replyToMessageId": 4,
        },
    )

    request = message.build_send_contact(params, EMPTY)

    assert request.transport is Transport.RAW
    assert request.payload == {
        "chat_id": "10",
        "phone_number": "+98123",
        "first_name": "Sara",
        "reply_to_message_id": 4,
    }


def test_send_photo_with_file_id_sends_string_field() -> None:
    params = parse_params(p.SendMediaParams, {"chatId": "1", "fileId": "FILE"})

    request = media.build_send_photo(params, EMPTY)

    assert request.method == "sendPhoto"
    assert request.files is None
    assert request.payload == {"chat_id": "1", "photo": "FILE"}


def test_send_document_with_upload_uses_multipart_field() -> None:
    params = parse_params(p.SendMediaParams, {"chatId": "1", "fileId": "ignored"})
    context = BuildContext(upload=MediaUpload(file_name="report.pdf", data=b"%PDF"))

    request = media.build_send_document(params, context)

    assert request.files == {"document": ("report.pdf", b"%PDF")}
    assert "document" not in request.payload
    assert request.payload == {"chat_id": "1"}


def test_media_without_file_id_or_upload_fails() -> None:
    params = parse_params(p.SendMediaParams, {"chatId": "1"})

    with pytest.raises(ParameterValidationError) as exc_info:
        media.build_send_video(params, EMPTY)

    assert exc_info.value.parameter == "fileId"


def test_media_group_hoists_additional_fields_without_mutating_input() -> None:
    raw_media = {
        "media": [
            {"type": "photo", "media": "p1", "additionalFields": {"caption": "first"}},
            {"type": "video", "media": "v1", "additionalFields": {"caption": "second"}},
        ]
    }
    params = parse_params(
        p.SendMediaGroupParams,
        {"chatId": "1", "media": raw_media, "replyToMessageId": 3},
    )

    request = media.build_send_media_group(params, EMPTY)

    assert request.payload == {
        "chat_id": "1",
        "media": [
            {"type": "photo", "media": "p1", "caption": "first"},
            {"type": "video", "media": "v1", "caption": "second"},
        ],
        "reply_to_message_id": 3,
    }
    assert raw_media["media"][0]["additionalFields"] == {"caption": "first"}


def test_answer_query_maps_to_callback_query_over_raw_transport() -> None:
    params = parse_params(p.AnswerQueryParams, {"queryId": "q1", "text": "done"})

    request = callback.build_answer_query(params, EMPTY)

    assert request.method == "answerCallbackQuery"
    assert request.transport is Transport.RAW
    assert request.payload == {"callback_query_id": "q1", "text": "done"}


def test_answer_inline_query_rejects_invalid_json_results() -> None:
    with pytest.raises(ParameterValidationError) as exc_info:
        parse_params(p.AnswerInlineQueryParams, {"queryId": "q", "results": "[oops"}, item_index=0)

    assert "not a valid JSON string" in str(exc_info.value)
    assert exc_info.value.item_index == 0


def test_answer_inline_query_parses_results() -> None:
    params = parse_params(
        p.AnswerInlineQueryParams,
        {"queryId": "q", "results": '[{"type": "article", "id": "1"}]'},
    )

    request = callback.build_answer_inline_query(params, EMPTY)

    assert request.payload == {"inline_query_id": "q", "results": [{"type": "article", "id": "1"}]}


def test_send_invoice_preserves_price_order() -> None:
    params = parse_params(
        p.SendInvoiceParams,
        {
            "chatId": "1",
            "title": "T",
            "description": "D",
            "payload": "P",
            "providerToken": "6037",
            "prices": {"price": [{"label": "b", "amount": 2}, {"label": "a", "amount": "1"}]},
        },
    )

    request = payment.build_send_invoice(params, EMPTY)

    assert request.transport is Transport.RAW
    assert request.payload["prices"] == [{"label": "b", "amount": 2}, {"label": "a", "amount": 1}]
    assert "photo_url" not in request.payload


def test_answer_pre_checkout_requires_error_message_when_not_ok() -> None:
    with pytest.raises(ParameterValidationError):
        parse_params(p.AnswerPreCheckoutQueryParams, {"preCheckoutQueryId": "x", "ok": False})


def test_get_chat_members_count_is_raw() -> None:
    params = parse_params(p.ChatParams, {"chatId": "-100"})

    request = chat.build_get_chat_members_count(params, EMPTY)

    assert request.method == "getChatMembersCount"
    assert request.transport is Transport.RAW
    assert request.payload == {"chat_id": "-100"}


def test_ban_chat_member_keeps_core_fields_over_additional() -> None:
    params = parse_params(
        p.ChatMemberParams,
        {"chatId": "1", "userId": 2, "additionalFields": {"user_id": 999, "until_date": 10}},
    )

    request = chat.build_ban_chat_member(params, EMPTY)

    assert request.payload == {"chat_id": "1", "user_id": 2, "until_date": 10}


def test_add_sticker_to_set_accepts_plain_file_id() -> None:
    params = parse_params(
        p.AddStickerToSetParams,
        {"userId": 1, "name": "pack_by_bot", "sticker": "FILE"},
    )

    request = sticker.build_add_sticker_to_set(params, EMPTY)

    assert request.transport is Transport.RAW
    assert request.payload == {"user_id": 1, "name": "pack_by_bot", "sticker": {"sticker": "FILE"}}


def test_upload_sticker_file_with_upload() -> None:
    params = parse_params(p.UploadStickerFileParams, {"userId": 5})
    context = BuildContext(upload=MediaUpload(file_name="s.png", data=b"png"))

    request = media.build_upload_sticker_file(params, context)

    assert request.payload == {"user_id": 5}
    assert request.files == {"sticker": ("s.png", b"png")}


def test_parse_params_reports_missing_field() -> None:
    with pytest.raises(ParameterValidationError) as exc_info:
        parse_params(p.SendMessageParams, {"text": "no chat"}, item_index=2)

    assert exc_info.value.parameter == "chatId"
    assert exc_info.value.item_index == 2


def test_create_new_sticker_set_unwraps_sticker_collection() -> None:
    params = parse_params(
        p.CreateNewStickerSetParams,
        {
            "userId": 7,
            "name": "pack_by_bot",
            "title": "Pack",
            "stickers": {
                "sticker": [
                    {"sticker": "file-a", "emojiList": ["😀"]},
                    {"sticker": "file-b"},
                ]
            },
        },
    )

    request = sticker.build_create_new_sticker_set(params, EMPTY)

    assert request.method == "createNewStickerSet"
    assert request.transport is Transport.RAW
    assert request.payload == {
        "user_id": 7,
        "name": "pack_by_bot",
        "title": "Pack",
        "stickers": [
            {"sticker": "file-a", "emoji_list": ["😀"]},
            {"sticker": "file-b"},
        ],
    }


def test_create_new_sticker_set_requires_stickers() -> None:
    with pytest.raises(ParameterValidationError):
        parse_params(
            p.CreateNewStickerSetParams,
            {"userId": 7, "name": "pack", "title": "Pack", "stickers": {"sticker": []}},
        )


def test_send_chat_action_sends_action_value() -> None:
    params = parse_params(p.SendChatActionParams, {"chatId": "5", "action": "typing"})

    request = message.build_send_chat_action(params, EMPTY)

    assert request.method == "sendChatAction"
    assert request.transport is Transport.CLIENT
    assert request.payload == {"chat_id": "5", "action": "typing"}


def test_send_chat_action_rejects_unknown_action() -> None:
    with pytest.raises(ParameterValidationError):
        parse_params(p.SendChatActionParams, {"chatId": "5", "action": "dancing"})


def test_media_group_item_keeps_declared_type_and_media() -> None:
    item = p.MediaGroupItem.model_validate(
        {
            "type": "video",
            "media": "v1",
            "additionalFields": {"type": "photo", "media": "other", "caption": "c"},
        }
    )

    assert media.flatten_media_item(item) == {"type": "video", "media": "v1", "caption": "c"}
