"""Tabela de handlers: (resource, operation) -> como montar, enviar e embrulhar.

Cada entrada junta o modelo de parâmetros, o builder do payload, o formato
do record de saída e a política de falha da operação. A tabela é conferida
contra RESOURCE_OPERATIONS na importação: um par sem handler (ou um handler
sem par) falha cedo, antes de qualquer execução.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from api.payload_builders.bale import bot, callback, chat, file, media, message, payment, sticker
from api.payload_builders.bale import params as p
from api.payload_builders.bale.base import PayloadBuilder
from app.constants.bale import RESOURCE_OPERATIONS, Operation, Resource

ResultWrapper = Callable[[Any], dict[str, Any]]


class FailurePolicy(StrEnum):
    """O que fazer quando a chamada remota de um item falha."""

    RAISE = "raise"  # registra ItemFailure e segue para o próximo item
    DROP = "drop"  # descarta o item sem record e sem falha
    DEGRADE = "degrade"  # emite record {successful: false, errorMessage, errorDetails}


def spread_result(result: Any) -> dict[str, Any]:
    """Objeto retornado vira o próprio json do record."""
    if isinstance(result, dict):
        return dict(result)
    return {"result": result}


def under(key: str) -> ResultWrapper:
    """Embrulha o resultado sob uma única chave."""

    def wrap(result: Any) -> dict[str, Any]:
        return {key: result}

    return wrap


def flag(key: str) -> ResultWrapper:
    """Resultado booleano reduzido a uma flag fixa."""

    def wrap(result: Any) -> dict[str, Any]:
        return {key: bool(result)}

    return wrap


successful = under("successful")


@dataclass(frozen=True, slots=True)
class OperationHandler:
    """Como executar uma operação para um item.

    Attributes:
        params_model: Modelo pydantic que valida os parâmetros do item
        build: Builder do payload (params + contexto -> BaleRequest)
        wrap: Converte o resultado remoto no json do record
        uses_markup: Lê `replyMarkup` e monta o teclado
        accepts_binary: Honra `binaryData`/`binaryPropertyName`
        on_failure: Política para RemoteCallError
    """

    resource: Resource
    operation: Operation
    params_model: type[p.OperationParams]
    build: PayloadBuilder
    wrap: ResultWrapper = spread_result
    uses_markup: bool = False
    accepts_binary: bool = False
    on_failure: FailurePolicy = FailurePolicy.RAISE


def _media(operation: Operation, builder: PayloadBuilder) -> OperationHandler:
    return OperationHandler(
        Resource.MESSAGE,
        operation,
        p.SendMediaParams,
        builder,
        uses_markup=True,
        accepts_binary=True,
    )


def _chat(
    operation: Operation,
    model: type[p.OperationParams],
    builder: PayloadBuilder,
    wrap: ResultWrapper = successful,
) -> OperationHandler:
    return OperationHandler(Resource.CHAT, operation, model, builder, wrap=wrap)


_HANDLER_LIST: tuple[OperationHandler, ...] = (
    # bot
    OperationHandler(Resource.BOT, Operation.GET_ME, p.NoParams, bot.build_get_me),
    OperationHandler(
        Resource.BOT, Operation.LOG_OUT, p.NoParams, bot.build_log_out, wrap=under("logged_out")
    ),
    OperationHandler(Resource.BOT, Operation.CLOSE, p.NoParams, bot.build_close, wrap=under("closed")),
    # callback
    OperationHandler(
        Resource.CALLBACK,
        Operation.ANSWER_QUERY,
        p.AnswerQueryParams,
        callback.build_answer_query,
        wrap=successful,
        on_failure=FailurePolicy.DEGRADE,
    ),
    OperationHandler(
        Resource.CALLBACK,
        Operation.ANSWER_INLINE_QUERY,
        p.AnswerInlineQueryParams,
        callback.build_answer_inline_query,
        wrap=successful,
    ),
    # message
    OperationHandler(
        Resource.MESSAGE,
        Operation.SEND_MESSAGE,
        p.SendMessageParams,
        message.build_send_message,
        uses_markup=True,
        on_failure=FailurePolicy.DROP,
    ),
    OperationHandler(
        Resource.MESSAGE,
        Operation.EDIT_MESSAGE_TEXT,
        p.EditMessageTextParams,
        message.build_edit_message_text,
        wrap=spread_result,
        uses_markup=True,
    ),
    OperationHandler(
        Resource.MESSAGE,
        Operation.SEND_STICKER,
        p.SendStickerParams,
        message.build_send_sticker,
        uses_markup=True,
    ),
    OperationHandler(
        Resource.MESSAGE,
        Operation.DELETE_MESSAGE,
        p.MessageRefParams,
        message.build_delete_message,
        wrap=flag("messageDeleted"),
    ),
    OperationHandler(
        Resource.MESSAGE,
        Operation.COPY_MESSAGE,
        p.CopyMessageParams,
        message.build_copy_message,
        wrap=under("messageId"),
    ),
    OperationHandler(
        Resource.MESSAGE, Operation.FORWARD_MESSAGE, p.CopyMessageParams, message.build_forward_message
    ),
    _media(Operation.SEND_DOCUMENT, media.build_send_document),
    _media(Operation.SEND_PHOTO, media.build_send_photo),
    _media(Operation.SEND_AUDIO, media.build_send_audio),
    _media(Operation.SEND_VOICE, media.build_send_voice),
    _media(Operation.SEND_VIDEO, media.build_send_video),
    _media(Operation.SEND_ANIMATION, media.build_send_animation),
    OperationHandler(
        Resource.MESSAGE,
        Operation.SEND_MEDIA_GROUP,
        p.SendMediaGroupParams,
        media.build_send_media_group,
        wrap=under("messages"),
    ),
    OperationHandler(
        Resource.MESSAGE,
        Operation.SEND_LOCATION,
        p.SendLocationParams,
        message.build_send_location,
        uses_markup=True,
    ),
    OperationHandler(
        Resource.MESSAGE,
        Operation.SEND_CONTACT,
        p.SendContactParams,
        message.build_send_contact,
        uses_markup=True,
    ),
    OperationHandler(
        Resource.MESSAGE,
        Operation.SEND_CHAT_ACTION,
        p.SendChatActionParams,
        message.build_send_chat_action,
        wrap=successful,
    ),
    # chat
    _chat(Operation.GET_CHAT, p.ChatParams, chat.build_get_chat, wrap=spread_result),
    _chat(
        Operation.GET_CHAT_ADMINISTRATORS,
        p.ChatParams,
        chat.build_get_chat_administrators,
        wrap=under("administrators"),
    ),
    _chat(
        Operation.GET_CHAT_MEMBERS_COUNT,
        p.ChatParams,
        chat.build_get_chat_members_count,
        wrap=spread_result,
    ),
    _chat(Operation.GET_CHAT_MEMBER, p.ChatMemberParams, chat.build_get_chat_member, wrap=spread_result),
    _chat(Operation.SET_CHAT_TITLE, p.SetChatTitleParams, chat.build_set_chat_title),
    _chat(Operation.SET_CHAT_DESCRIPTION, p.SetChatDescriptionParams, chat.build_set_chat_description),
    OperationHandler(
        Resource.CHAT,
        Operation.SET_CHAT_PHOTO,
        p.SendMediaParams,
        media.build_set_chat_photo,
        wrap=successful,
        accepts_binary=True,
    ),
    _chat(Operation.DELETE_CHAT_PHOTO, p.ChatParams, chat.build_delete_chat_photo),
    _chat(Operation.PIN_CHAT_MESSAGE, p.PinChatMessageParams, chat.build_pin_chat_message),
    _chat(Operation.UNPIN_CHAT_MESSAGE, p.UnpinChatMessageParams, chat.build_unpin_chat_message),
    _chat(Operation.UNPIN_ALL_CHAT_MESSAGES, p.ChatParams, chat.build_unpin_all_chat_messages),
    _chat(Operation.LEAVE_CHAT, p.ChatParams, chat.build_leave_chat),
    _chat(Operation.BAN_CHAT_MEMBER, p.ChatMemberParams, chat.build_ban_chat_member),
    _chat(Operation.UNBAN_CHAT_MEMBER, p.UnbanChatMemberParams, chat.build_unban_chat_member),
    _chat(Operation.PROMOTE_CHAT_MEMBER, p.ChatMemberParams, chat.build_promote_chat_member),
    _chat(
        Operation.CREATE_CHAT_INVITE_LINK,
        p.ChatParams,
        chat.build_create_chat_invite_link,
        wrap=spread_result,
    ),
    _chat(
        Operation.REVOKE_CHAT_INVITE_LINK,
        p.RevokeChatInviteLinkParams,
        chat.build_revoke_chat_invite_link,
        wrap=spread_result,
    ),
    _chat(
        Operation.EXPORT_CHAT_INVITE_LINK,
        p.ChatParams,
        chat.build_export_chat_invite_link,
        wrap=under("invite_link"),
    ),
    # payment
    OperationHandler(
        Resource.PAYMENT, Operation.SEND_INVOICE, p.SendInvoiceParams, payment.build_send_invoice
    ),
    OperationHandler(
        Resource.PAYMENT,
        Operation.ANSWER_PRE_CHECKOUT_QUERY,
        p.AnswerPreCheckoutQueryParams,
        payment.build_answer_pre_checkout_query,
        wrap=successful,
    ),
    # sticker
    OperationHandler(
        Resource.STICKER,
        Operation.UPLOAD_STICKER_FILE,
        p.UploadStickerFileParams,
        media.build_upload_sticker_file,
        accepts_binary=True,
    ),
    OperationHandler(
        Resource.STICKER,
        Operation.CREATE_NEW_STICKER_SET,
        p.CreateNewStickerSetParams,
        sticker.build_create_new_sticker_set,
    ),
    OperationHandler(
        Resource.STICKER,
        Operation.ADD_STICKER_TO_SET,
        p.AddStickerToSetParams,
        sticker.build_add_sticker_to_set,
    ),
    # file
    OperationHandler(Resource.FILE, Operation.GET_FILE, p.GetFileParams, file.build_get_file),
)

HANDLERS: dict[tuple[Resource, Operation], OperationHandler] = {
    (handler.resource, handler.operation): handler for handler in _HANDLER_LIST
}


def _check_table() -> None:
    expected = {
        (resource, operation)
        for resource, operations in RESOURCE_OPERATIONS.items()
        for operation in operations
    }
    registered = set(HANDLERS)
    if len(registered) != len(_HANDLER_LIST):
        raise RuntimeError("duplicate handler registration")
    missing = expected - registered
    unexpected = registered - expected
    if missing or unexpected:
        raise RuntimeError(
            f"handler table out of sync: missing={sorted(missing)} unexpected={sorted(unexpected)}"
        )


_check_table()


def lookup_handler(resource: Resource, operation: Operation) -> OperationHandler | None:
    return HANDLERS.get((resource, operation))
