"""Builder do resource `file`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.payload_builders.bale.base import BaleRequest, BuildContext

if TYPE_CHECKING:
    from api.payload_builders.bale.params import GetFileParams


def build_get_file(params: GetFileParams, context: BuildContext) -> BaleRequest:
    return BaleRequest("getFile", {"file_id": params.file_id})
