"""Builders do resource `payment`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.payload_builders.bale.base import BaleRequest, BuildContext, Transport, compact, merge_extra

if TYPE_CHECKING:
    from api.payload_builders.bale.params import AnswerPreCheckoutQueryParams, SendInvoiceParams


def build_send_invoice(params: SendInvoiceParams, context: BuildContext) -> BaleRequest:
    """Fatura com `prices` na ordem recebida; `amount` na menor unidade da moeda."""
    return BaleRequest(
        "sendInvoice",
        merge_extra(
            params.additional_fields,
            {
                "chat_id": params.chat_id,
                "title": params.title,
                "description": params.description,
                "payload": params.payload,
                "provider_token": params.provider_token,
                "prices": [{"label": price.label, "amount": price.amount} for price in params.prices],
                "photo_url": params.photo_url,
                "reply_to_message_id": params.reply_to_message_id,
                "reply_markup": context.reply_markup,
            },
        ),
        transport=Transport.RAW,
    )


def build_answer_pre_checkout_query(
    params: AnswerPreCheckoutQueryParams,
    context: BuildContext,
) -> BaleRequest:
    return BaleRequest(
        "answerPreCheckoutQuery",
        compact(
            {
                "pre_checkout_query_id": params.pre_checkout_query_id,
                "ok": params.ok,
                "error_message": None if params.ok else params.error_message,
            }
        ),
    )
