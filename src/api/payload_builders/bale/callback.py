"""Builders do resource `callback`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.payload_builders.bale.base import BaleRequest, BuildContext, Transport, merge_extra

if TYPE_CHECKING:
    from api.payload_builders.bale.params import AnswerInlineQueryParams, AnswerQueryParams


def build_answer_query(params: AnswerQueryParams, context: BuildContext) -> BaleRequest:
    """{callback_query_id, text?} via POST de baixo nível."""
    return BaleRequest(
        "answerCallbackQuery",
        merge_extra(
            params.additional_fields,
            {"callback_query_id": params.query_id, "text": params.text or None},
        ),
        transport=Transport.RAW,
    )


def build_answer_inline_query(params: AnswerInlineQueryParams, context: BuildContext) -> BaleRequest:
    """`results` já chega parseado (JSON inválido falha na validação)."""
    return BaleRequest(
        "answerInlineQuery",
        merge_extra(
            params.additional_fields,
            {"inline_query_id": params.query_id, "results": params.results},
        ),
    )
