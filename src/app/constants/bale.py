"""Enums de domínio do adapter Bale (resources, operations, markup, eventos)."""

from __future__ import annotations

from enum import StrEnum


class Resource(StrEnum):
    """Agrupamento (substantivo) das operações."""

    BOT = "bot"
    MESSAGE = "message"
    CALLBACK = "callback"
    CHAT = "chat"
    PAYMENT = "payment"
    STICKER = "sticker"
    FILE = "file"


class Operation(StrEnum):
    """Ações (verbos) suportadas. Os valores são os nomes vindos do host."""

    # bot
    GET_ME = "getMe"
    LOG_OUT = "logOut"
    CLOSE = "close"

    # callback
    ANSWER_QUERY = "answerQuery"
    ANSWER_INLINE_QUERY = "answerInlineQuery"

    # message
    SEND_MESSAGE = "sendMessage"
    EDIT_MESSAGE_TEXT = "editMessageText"
    SEND_STICKER = "sendSticker"
    DELETE_MESSAGE = "deleteMessage"
    COPY_MESSAGE = "copyMessage"
    FORWARD_MESSAGE = "forwardMessage"
    SEND_DOCUMENT = "sendDocument"
    SEND_PHOTO = "sendPhoto"
    SEND_AUDIO = "sendAudio"
    SEND_VOICE = "sendVoice"
    SEND_VIDEO = "sendVideo"
    SEND_ANIMATION = "sendAnimation"
    SEND_MEDIA_GROUP = "sendMediaGroup"
    SEND_LOCATION = "sendLocation"
    SEND_CONTACT = "sendContact"
    SEND_CHAT_ACTION = "sendChatAction"

    # chat
    GET_CHAT = "getChat"
    GET_CHAT_ADMINISTRATORS = "getChatAdministrators"
    GET_CHAT_MEMBERS_COUNT = "getChatMembersCount"
    GET_CHAT_MEMBER = "getChatMember"
    SET_CHAT_TITLE = "setChatTitle"
    SET_CHAT_DESCRIPTION = "setChatDescription"
    SET_CHAT_PHOTO = "setChatPhoto"
    DELETE_CHAT_PHOTO = "deleteChatPhoto"
    PIN_CHAT_MESSAGE = "pinChatMessage"
    UNPIN_CHAT_MESSAGE = "unpinChatMessage"
    UNPIN_ALL_CHAT_MESSAGES = "unpinAllChatMessages"
    LEAVE_CHAT = "leaveChat"
    BAN_CHAT_MEMBER = "banChatMember"
    UNBAN_CHAT_MEMBER = "unbanChatMember"
    PROMOTE_CHAT_MEMBER = "promoteChatMember"
    CREATE_CHAT_INVITE_LINK = "createChatInviteLink"
    REVOKE_CHAT_INVITE_LINK = "revokeChatInviteLink"
    EXPORT_CHAT_INVITE_LINK = "exportChatInviteLink"

    # payment
    SEND_INVOICE = "sendInvoice"
    ANSWER_PRE_CHECKOUT_QUERY = "answerPreCheckoutQuery"

    # sticker
    UPLOAD_STICKER_FILE = "uploadStickerFile"
    CREATE_NEW_STICKER_SET = "createNewStickerSet"
    ADD_STICKER_TO_SET = "addStickerToSet"

    # file
    GET_FILE = "getFile"


RESOURCE_OPERATIONS: dict[Resource, frozenset[Operation]] = {
    Resource.BOT: frozenset({Operation.GET_ME, Operation.LOG_OUT, Operation.CLOSE}),
    Resource.CALLBACK: frozenset({Operation.ANSWER_QUERY, Operation.ANSWER_INLINE_QUERY}),
    Resource.MESSAGE: frozenset(
        {
            Operation.SEND_MESSAGE,
            Operation.EDIT_MESSAGE_TEXT,
            Operation.SEND_STICKER,
            Operation.DELETE_MESSAGE,
            Operation.COPY_MESSAGE,
            Operation.FORWARD_MESSAGE,
            Operation.SEND_DOCUMENT,
            Operation.SEND_PHOTO,
            Operation.SEND_AUDIO,
            Operation.SEND_VOICE,
            Operation.SEND_VIDEO,
            Operation.SEND_ANIMATION,
            Operation.SEND_MEDIA_GROUP,
            Operation.SEND_LOCATION,
            Operation.SEND_CONTACT,
            Operation.SEND_CHAT_ACTION,
        }
    ),
    Resource.CHAT: frozenset(
        {
            Operation.GET_CHAT,
            Operation.GET_CHAT_ADMINISTRATORS,
            Operation.GET_CHAT_MEMBERS_COUNT,
            Operation.GET_CHAT_MEMBER,
            Operation.SET_CHAT_TITLE,
            Operation.SET_CHAT_DESCRIPTION,
            Operation.SET_CHAT_PHOTO,
            Operation.DELETE_CHAT_PHOTO,
            Operation.PIN_CHAT_MESSAGE,
            Operation.UNPIN_CHAT_MESSAGE,
            Operation.UNPIN_ALL_CHAT_MESSAGES,
            Operation.LEAVE_CHAT,
            Operation.BAN_CHAT_MEMBER,
            Operation.UNBAN_CHAT_MEMBER,
            Operation.PROMOTE_CHAT_MEMBER,
            Operation.CREATE_CHAT_INVITE_LINK,
            Operation.REVOKE_CHAT_INVITE_LINK,
            Operation.EXPORT_CHAT_INVITE_LINK,
        }
    ),
    Resource.PAYMENT: frozenset({Operation.SEND_INVOICE, Operation.ANSWER_PRE_CHECKOUT_QUERY}),
    Resource.STICKER: frozenset(
        {
            Operation.UPLOAD_STICKER_FILE,
            Operation.CREATE_NEW_STICKER_SET,
            Operation.ADD_STICKER_TO_SET,
        }
    ),
    Resource.FILE: frozenset({Operation.GET_FILE}),
}


class ReplyMarkupKind(StrEnum):
    """Opções de teclado aceitas no parâmetro `replyMarkup`."""

    NONE = "none"
    FORCE_REPLY = "forceReply"
    REPLY_KEYBOARD_REMOVE = "replyKeyboardRemove"
    INLINE_KEYBOARD = "inlineKeyboard"
    REPLY_KEYBOARD = "replyKeyboard"


class EditTarget(StrEnum):
    """Endereçamento de `editMessageText` (parâmetro `messageType`)."""

    INLINE_MESSAGE = "inlineMessage"
    MESSAGE = "message"


class ChatAction(StrEnum):
    """Ações aceitas por sendChatAction."""

    FIND_LOCATION = "find_location"
    RECORD_AUDIO = "record_audio"
    RECORD_VIDEO = "record_video"
    RECORD_VIDEO_NOTE = "record_video_note"
    TYPING = "typing"
    UPLOAD_AUDIO = "upload_audio"
    UPLOAD_DOCUMENT = "upload_document"
    UPLOAD_PHOTO = "upload_photo"
    UPLOAD_VIDEO = "upload_video"
    UPLOAD_VIDEO_NOTE = "upload_video_note"


class EventKind(StrEnum):
    """Tipo do evento inbound."""

    MESSAGE = "message"
    CHANNEL_POST = "channel_post"


class AttachmentKind(StrEnum):
    """Tipo de anexo detectado no evento inbound."""

    PHOTO = "photo"
    VIDEO = "video"
    DOCUMENT = "document"


class PhotoSize(StrEnum):
    """Tamanhos nomeados de foto; o índice segue a ordem crescente do array."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    EXTRA_LARGE = "extraLarge"


PHOTO_SIZE_INDEX: dict[PhotoSize, int] = {
    PhotoSize.SMALL: 0,
    PhotoSize.MEDIUM: 1,
    PhotoSize.LARGE: 2,
    PhotoSize.EXTRA_LARGE: 3,
}
