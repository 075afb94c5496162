"""Modelos de parâmetros por operação (validados na borda do builder).

Os nomes de entrada seguem o host (camelCase, ex: `chatId`, `replyToMessageId`);
os atributos ficam em snake_case. Campos desconhecidos são ignorados.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from app.constants.bale import ChatAction, EditTarget
from utils.errors import ParameterValidationError

ParamsT = TypeVar("ParamsT", bound="OperationParams")


class OperationParams(BaseModel):
    """Base dos parâmetros de operação."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        frozen=True,
        coerce_numbers_to_str=True,
    )


class WithAdditionalFields(OperationParams):
    """Parâmetros com coleção opcional `additionalFields`."""

    additional_fields: dict[str, Any] = Field(default_factory=dict, alias="additionalFields")

    @field_validator("additional_fields", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value


class NoParams(OperationParams):
    """Operações sem parâmetros (getMe, logOut, close)."""


class ChatParams(WithAdditionalFields):
    chat_id: str = Field(alias="chatId", min_length=1)


# ---------------------------------------------------------------- message


class SendMessageParams(ChatParams):
    text: str


class EditMessageTextParams(WithAdditionalFields):
    message_type: EditTarget = Field(default=EditTarget.MESSAGE, alias="messageType")
    chat_id: str | None = Field(default=None, alias="chatId")
    message_id: int | None = Field(default=None, alias="messageId")
    inline_message_id: str | None = Field(default=None, alias="inlineMessageId")
    text: str

    @model_validator(mode="after")
    def _check_target(self) -> EditMessageTextParams:
        if self.message_type is EditTarget.INLINE_MESSAGE:
            if not self.inline_message_id:
                raise ValueError("inlineMessageId é obrigatório para messageType=inlineMessage")
        elif not self.chat_id or self.message_id is None:
            raise ValueError("chatId e messageId são obrigatórios para messageType=message")
        return self


class SendStickerParams(ChatParams):
    sticker_id: str = Field(alias="stickerId", min_length=1)
    reply_to_message_id: int | None = Field(default=None, alias="replyToMessageId")


class MessageRefParams(ChatParams):
    message_id: int = Field(alias="messageId")


class CopyMessageParams(MessageRefParams):
    from_chat_id: str = Field(alias="fromChatId", min_length=1)


class SendMediaParams(ChatParams):
    """sendDocument/Photo/Audio/Voice/Video/Animation e setChatPhoto."""

    file_id: str | None = Field(default=None, alias="fileId")


class MediaGroupItem(WithAdditionalFields):
    type: Literal["photo", "video"] = "photo"
    media: str = Field(min_length=1)


class SendMediaGroupParams(ChatParams):
    media: list[MediaGroupItem] = Field(min_length=1)
    reply_to_message_id: int | None = Field(default=None, alias="replyToMessageId")

    @field_validator("media", mode="before")
    @classmethod
    def _unwrap_collection(cls, value: Any) -> Any:
        # O host entrega a coleção como {"media": [...]}
        if isinstance(value, Mapping):
            return value.get("media", [])
        return value


class SendLocationParams(ChatParams):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    horizontal_accuracy: float | None = None


class SendContactParams(ChatParams):
    phone_number: str = Field(min_length=1)
    first_name: str = Field(min_length=1)
    last_name: str | None = None
    reply_to_message_id: int | None = Field(default=None, alias="replyToMessageId")


class SendChatActionParams(ChatParams):
    action: ChatAction


# ---------------------------------------------------------------- callback


class AnswerQueryParams(WithAdditionalFields):
    query_id: str = Field(alias="queryId", min_length=1)
    text: str | None = None


class AnswerInlineQueryParams(WithAdditionalFields):
    query_id: str = Field(alias="queryId", min_length=1)
    results: list[dict[str, Any]]

    @field_validator("results", mode="before")
    @classmethod
    def _parse_results(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return json.loads(value)
            except json.JSONDecodeError as exc:
                raise ValueError("The results parameter is not a valid JSON string.") from exc
        return value


# ---------------------------------------------------------------- chat


class ChatMemberParams(ChatParams):
    user_id: int = Field(alias="userId")


class UnbanChatMemberParams(ChatMemberParams):
    only_if_banned: bool | None = Field(default=None, alias="onlyIfBanned")


class SetChatTitleParams(ChatParams):
    title: str = Field(min_length=1, max_length=128)


class SetChatDescriptionParams(ChatParams):
    description: str = Field(default="", max_length=255)


class PinChatMessageParams(MessageRefParams):
    disable_notification: bool | None = Field(default=None, alias="disableNotification")


class UnpinChatMessageParams(ChatParams):
    message_id: int | None = Field(default=None, alias="messageId")


class RevokeChatInviteLinkParams(ChatParams):
    invite_link: str = Field(alias="inviteLink", min_length=1)


# ---------------------------------------------------------------- payment


class LabeledPrice(OperationParams):
    label: str = Field(min_length=1)
    amount: int


class SendInvoiceParams(ChatParams):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    payload: str = Field(min_length=1)
    provider_token: str = Field(alias="providerToken", min_length=1)
    prices: list[LabeledPrice] = Field(min_length=1)
    photo_url: str | None = Field(default=None, alias="photoUrl")
    reply_to_message_id: int | None = Field(default=None, alias="replyToMessageId")

    @field_validator("prices", mode="before")
    @classmethod
    def _unwrap_prices(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except json.JSONDecodeError as exc:
                raise ValueError("prices is not a valid JSON string") from exc
        if isinstance(value, Mapping):
            return value.get("price", value.get("prices", []))
        return value


class AnswerPreCheckoutQueryParams(OperationParams):
    pre_checkout_query_id: str = Field(alias="preCheckoutQueryId", min_length=1)
    ok: bool = True
    error_message: str | None = Field(default=None, alias="errorMessage")

    @model_validator(mode="after")
    def _require_error_message(self) -> AnswerPreCheckoutQueryParams:
        if not self.ok and not self.error_message:
            raise ValueError("errorMessage é obrigatório quando ok=false")
        return self


# ---------------------------------------------------------------- sticker


class InputSticker(OperationParams):
    sticker: str = Field(min_length=1)
    emoji_list: list[str] | None = Field(default=None, alias="emojiList")


class UploadStickerFileParams(OperationParams):
    user_id: int = Field(alias="userId")
    file_id: str | None = Field(default=None, alias="fileId")


class CreateNewStickerSetParams(OperationParams):
    user_id: int = Field(alias="userId")
    name: str = Field(min_length=1)
    title: str = Field(min_length=1)
    stickers: list[InputSticker] = Field(min_length=1)

    @field_validator("stickers", mode="before")
    @classmethod
    def _unwrap_stickers(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return value.get("sticker", value.get("stickers", []))
        return value


class AddStickerToSetParams(OperationParams):
    user_id: int = Field(alias="userId")
    name: str = Field(min_length=1)
    sticker: InputSticker

    @field_validator("sticker", mode="before")
    @classmethod
    def _file_id_as_sticker(cls, value: Any) -> Any:
        if isinstance(value, str):
            return {"sticker": value}
        return value


# ---------------------------------------------------------------- file


class GetFileParams(OperationParams):
    file_id: str = Field(alias="fileId", min_length=1)


def parse_params(
    model: type[ParamsT],
    parameters: Mapping[str, Any],
    item_index: int | None = None,
) -> ParamsT:
    """Valida os parâmetros do item contra o modelo da operação.

    Raises:
        ParameterValidationError: Com o primeiro campo inválido e o índice do item
    """
    try:
        return model.model_validate(dict(parameters))
    except ValidationError as exc:
        first = exc.errors()[0] if exc.errors() else {}
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = first.get("msg", "invalid parameters")
        raise ParameterValidationError(
            f"{location}: {message}" if location else message,
            item_index=item_index,
            parameter=location or None,
        ) from exc
