"""Builders de payload para a Bot API do Bale.

Um builder por operação, agrupados por resource (bot, message, media,
callback, chat, payment, sticker, file). Cada builder recebe os parâmetros
já validados (params.py) e um BuildContext com markup/upload resolvidos.
"""

from api.payload_builders.bale.base import (
    BaleRequest,
    BuildContext,
    MediaUpload,
    PayloadBuilder,
    Transport,
    compact,
)
from api.payload_builders.bale.markup import build_markup
from api.payload_builders.bale.params import parse_params

__all__ = [
    "BaleRequest",
    "BuildContext",
    "MediaUpload",
    "PayloadBuilder",
    "Transport",
    "build_markup",
    "compact",
    "parse_params",
]
