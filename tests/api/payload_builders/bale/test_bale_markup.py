"""Testes do builder de reply_markup."""

from __future__ import annotations

from api.payload_builders.bale.markup import build_button, build_grid, build_markup


def _keyboard(*rows: list[dict[str, object]] | None) -> dict[str, object]:
    entries = []
    for buttons in rows:
        entries.append({"row": {} if buttons is None else {"buttons": buttons}})
    return {"rows": entries}


def test_none_selection_omits_markup() -> None:
    assert build_markup("none", {}) is None
    assert build_markup(None, {}) is None


def test_unknown_selection_returns_none() -> None:
    assert build_markup("fancyKeyboard", {"fancyKeyboard": {"rows": []}}) is None


def test_force_reply_passes_object_verbatim() -> None:
    force_reply = {"force_reply": True, "selective": False}

    assert build_markup("forceReply", {"forceReply": force_reply}) == force_reply


def test_reply_keyboard_remove_passes_object_verbatim() -> None:
    remove = {"remove_keyboard": True}

    assert build_markup("replyKeyboardRemove", {"replyKeyboardRemove": remove}) == remove


def test_inline_keyboard_skips_rows_without_buttons() -> None:
    params = {
        "inlineKeyboard": _keyboard(
            [{"text": "A", "additionalFields": {"callback_data": "a"}}],
            None,
            [{"text": "B", "additionalFields": {"url": "https://example.com"}}],
        )
    }

    markup = build_markup("inlineKeyboard", params)

    assert markup == {
        "inline_keyboard": [
            [{"text": "A", "callback_data": "a"}],
            [{"text": "B", "url": "https://example.com"}],
        ]
    }


def test_reply_keyboard_uses_keyboard_key_and_options() -> None:
    params = {
        "replyKeyboard": _keyboard([{"text": "Yes"}, {"text": "No"}]),
        "replyKeyboardOptions": {"resize_keyboard": True, "ignored": 1},
    }

    markup = build_markup("replyKeyboard", params)

    assert markup == {
        "keyboard": [[{"text": "Yes"}, {"text": "No"}]],
        "resize_keyboard": True,
    }


def test_missing_rows_produce_empty_grid() -> None:
    assert build_markup("inlineKeyboard", {}) == {"inline_keyboard": []}
    assert build_grid({"rows": "not-a-list"}) == []


def test_additional_fields_never_override_text() -> None:
    button = build_button({"text": "Real", "additionalFields": {"text": "Fake", "callback_data": "x"}})

    assert button == {"text": "Real", "callback_data": "x"}


def test_rows_with_only_invalid_buttons_are_dropped() -> None:
    markup = build_markup(
        "inlineKeyboard",
        {
            "inlineKeyboard": {
                "rows": [
                    {"row": {"buttons": ["oops"]}},
                    {"row": {"buttons": [{"text": "a"}]}},
                ]
            }
        },
    )

    assert markup == {"inline_keyboard": [[{"text": "a"}]]}
