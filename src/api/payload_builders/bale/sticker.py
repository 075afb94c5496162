"""Builders do resource `sticker`.

uploadStickerFile fica em media.py (caminho de upload).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.bale.base import BaleRequest, BuildContext, Transport, compact

if TYPE_CHECKING:
    from api.payload_builders.bale.params import (
        AddStickerToSetParams,
        CreateNewStickerSetParams,
        InputSticker,
    )


def _sticker_entry(sticker: InputSticker) -> dict[str, Any]:
    return compact({"sticker": sticker.sticker, "emoji_list": sticker.emoji_list})


def build_create_new_sticker_set(
    params: CreateNewStickerSetParams,
    context: BuildContext,
) -> BaleRequest:
    return BaleRequest(
        "createNewStickerSet",
        {
            "user_id": params.user_id,
            "name": params.name,
            "title": params.title,
            "stickers": [_sticker_entry(sticker) for sticker in params.stickers],
        },
        transport=Transport.RAW,
    )


def build_add_sticker_to_set(params: AddStickerToSetParams, context: BuildContext) -> BaleRequest:
    return BaleRequest(
        "addStickerToSet",
        {
            "user_id": params.user_id,
            "name": params.name,
            "sticker": _sticker_entry(params.sticker),
        },
        transport=Transport.RAW,
    )
