"""Builders do resource `chat` (administração de grupos e canais).

setChatPhoto fica em media.py por compartilhar o caminho de upload.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.bale.base import BaleRequest, BuildContext, Transport, compact, merge_extra

if TYPE_CHECKING:
    from api.payload_builders.bale.base import PayloadBuilder
    from api.payload_builders.bale.params import (
        ChatMemberParams,
        ChatParams,
        PinChatMessageParams,
        RevokeChatInviteLinkParams,
        SetChatDescriptionParams,
        SetChatTitleParams,
        UnbanChatMemberParams,
        UnpinChatMessageParams,
    )


def chat_only_call(method: str, transport: Transport = Transport.CLIENT) -> PayloadBuilder:
    """Builder para métodos que recebem apenas chat_id."""

    def build(params: ChatParams, context: BuildContext) -> BaleRequest:
        return BaleRequest(method, {"chat_id": params.chat_id}, transport=transport)

    build.__name__ = f"build_{method}"
    return build


build_get_chat = chat_only_call("getChat")
build_get_chat_administrators = chat_only_call("getChatAdministrators")
build_get_chat_members_count = chat_only_call("getChatMembersCount", Transport.RAW)
build_delete_chat_photo = chat_only_call("deleteChatPhoto")
build_unpin_all_chat_messages = chat_only_call("unpinAllChatMessages")
build_leave_chat = chat_only_call("leaveChat")
build_export_chat_invite_link = chat_only_call("exportChatInviteLink")


def build_get_chat_member(params: ChatMemberParams, context: BuildContext) -> BaleRequest:
    return BaleRequest("getChatMember", {"chat_id": params.chat_id, "user_id": params.user_id})


def build_set_chat_title(params: SetChatTitleParams, context: BuildContext) -> BaleRequest:
    return BaleRequest("setChatTitle", {"chat_id": params.chat_id, "title": params.title})


def build_set_chat_description(params: SetChatDescriptionParams, context: BuildContext) -> BaleRequest:
    return BaleRequest(
        "setChatDescription",
        {"chat_id": params.chat_id, "description": params.description},
    )


def build_pin_chat_message(params: PinChatMessageParams, context: BuildContext) -> BaleRequest:
    return BaleRequest(
        "pinChatMessage",
        compact(
            {
                "chat_id": params.chat_id,
                "message_id": params.message_id,
                "disable_notification": params.disable_notification,
            }
        ),
    )


def build_unpin_chat_message(params: UnpinChatMessageParams, context: BuildContext) -> BaleRequest:
    return BaleRequest(
        "unpinChatMessage",
        compact({"chat_id": params.chat_id, "message_id": params.message_id}),
    )


def _member_payload(params: ChatMemberParams, **extra: Any) -> dict[str, Any]:
    return merge_extra(
        params.additional_fields,
        {"chat_id": params.chat_id, "user_id": params.user_id, **extra},
    )


def build_ban_chat_member(params: ChatMemberParams, context: BuildContext) -> BaleRequest:
    """additionalFields: until_date, revoke_messages."""
    return BaleRequest("banChatMember", _member_payload(params))


def build_unban_chat_member(params: UnbanChatMemberParams, context: BuildContext) -> BaleRequest:
    return BaleRequest(
        "unbanChatMember",
        _member_payload(params, only_if_banned=params.only_if_banned),
    )


def build_promote_chat_member(params: ChatMemberParams, context: BuildContext) -> BaleRequest:
    """additionalFields carrega as permissões (can_change_info, can_post_messages, ...)."""
    return BaleRequest("promoteChatMember", _member_payload(params))


def build_create_chat_invite_link(params: ChatParams, context: BuildContext) -> BaleRequest:
    """additionalFields: name, expire_date, member_limit, creates_join_request."""
    return BaleRequest(
        "createChatInviteLink",
        merge_extra(params.additional_fields, {"chat_id": params.chat_id}),
    )


def build_revoke_chat_invite_link(
    params: RevokeChatInviteLinkParams,
    context: BuildContext,
) -> BaleRequest:
    return BaleRequest(
        "revokeChatInviteLink",
        {"chat_id": params.chat_id, "invite_link": params.invite_link},
    )
