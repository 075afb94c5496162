"""Builder de reply_markup a partir da descrição de teclado do host.

Formato de entrada (parâmetro `inlineKeyboard` / `replyKeyboard`):

    {"rows": [{"row": {"buttons": [{"text": "Sim", "additionalFields": {"callback_data": "y"}}]}}]}

Formato de saída:

    {"inline_keyboard": [[{"text": "Sim", "callback_data": "y"}]]}
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from app.constants.bale import ReplyMarkupKind

_GRID_FIELD = {
    ReplyMarkupKind.INLINE_KEYBOARD: "inline_keyboard",
    ReplyMarkupKind.REPLY_KEYBOARD: "keyboard",
}

# Opções extras do teclado de resposta repassadas ao lado do grid
_REPLY_KEYBOARD_OPTIONS = ("resize_keyboard", "one_time_keyboard", "selective")


def build_markup(selection: str | None, params: Mapping[str, Any]) -> dict[str, Any] | None:
    """Constrói o reply_markup.

    Args:
        selection: Valor do parâmetro `replyMarkup`
        params: Parâmetros do item (contém o objeto do teclado escolhido)

    Returns:
        Markup no formato da API, ou None quando o campo deve ser omitido.
        Entrada malformada gera grid vazio, nunca erro.
    """
    try:
        kind = ReplyMarkupKind(selection or ReplyMarkupKind.NONE)
    except ValueError:
        return None

    if kind is ReplyMarkupKind.NONE:
        return None
    if kind in (ReplyMarkupKind.FORCE_REPLY, ReplyMarkupKind.REPLY_KEYBOARD_REMOVE):
        return params.get(kind.value)

    keyboard_data = params.get(kind.value)
    markup: dict[str, Any] = {_GRID_FIELD[kind]: build_grid(keyboard_data)}

    if kind is ReplyMarkupKind.REPLY_KEYBOARD:
        options = params.get("replyKeyboardOptions")
        if isinstance(options, Mapping):
            for name in _REPLY_KEYBOARD_OPTIONS:
                if name in options:
                    markup[name] = options[name]
    return markup


def build_grid(keyboard_data: Any) -> list[list[dict[str, Any]]]:
    """Converte `rows` em lista de linhas de botões.

    Linhas sem nenhum botão válido não entram no grid.
    """
    if not isinstance(keyboard_data, Mapping):
        return []
    rows = keyboard_data.get("rows")
    if not isinstance(rows, list):
        return []

    grid: list[list[dict[str, Any]]] = []
    for row in rows:
        buttons = _row_buttons(row) or []
        built = [build_button(button) for button in buttons if isinstance(button, Mapping)]
        if built:
            grid.append(built)
    return grid


def build_button(button: Mapping[str, Any]) -> dict[str, Any]:
    """Botão = {text} + additionalFields, sem permitir sobrescrever `text`."""
    result: dict[str, Any] = {"text": button.get("text")}
    extra = button.get("additionalFields")
    if isinstance(extra, Mapping):
        for key, value in extra.items():
            if key != "text":
                result[key] = value
    return result


def _row_buttons(row: Any) -> list[Any] | None:
    if not isinstance(row, Mapping):
        return None
    container = row.get("row", row)
    if not isinstance(container, Mapping):
        return None
    buttons = container.get("buttons")
    return buttons if isinstance(buttons, list) else None
