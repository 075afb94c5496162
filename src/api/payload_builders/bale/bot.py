"""Builders do resource `bot` (chamadas sem argumentos)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.bale.base import BaleRequest, BuildContext

if TYPE_CHECKING:
    from api.payload_builders.bale.base import PayloadBuilder


def no_argument_call(method: str) -> PayloadBuilder:
    """Builder para métodos sem corpo (getMe, logOut, close)."""

    def build(params: Any, context: BuildContext) -> BaleRequest:
        return BaleRequest(method)

    build.__name__ = f"build_{method}"
    return build


build_get_me = no_argument_call("getMe")
build_log_out = no_argument_call("logOut")
build_close = no_argument_call("close")
