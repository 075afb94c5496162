"""Tipos base dos builders de payload da Bot API do Bale."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping


class Transport(StrEnum):
    """Caminho de envio de uma requisição."""

    CLIENT = "client"  # BaleHttpClient (método do conjunto compartilhado)
    RAW = "raw"  # RawBalePoster (POST JSON de baixo nível)


@dataclass(frozen=True, slots=True)
class MediaUpload:
    """Bytes a enviar em multipart, com o nome de arquivo sugerido."""

    file_name: str
    data: bytes


@dataclass(frozen=True, slots=True)
class BuildContext:
    """Insumos resolvidos pelo dispatcher antes do builder.

    Attributes:
        reply_markup: Markup já construído (None = omitir o campo)
        upload: Arquivo do item quando `binaryData` está ligado
    """

    reply_markup: dict[str, Any] | None = None
    upload: MediaUpload | None = None


@dataclass(frozen=True, slots=True)
class BaleRequest:
    """Requisição pronta para envio."""

    method: str
    payload: dict[str, Any] = field(default_factory=dict)
    files: dict[str, tuple[str, bytes]] | None = None
    transport: Transport = Transport.CLIENT


class PayloadBuilder(Protocol):
    """Contrato dos builders: parâmetros validados + contexto -> requisição."""

    def __call__(self, params: Any, context: BuildContext) -> BaleRequest: ...


def compact(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Remove campos None (equivalente a não enviar o campo)."""
    return {key: value for key, value in payload.items() if value is not None}


def merge_extra(
    additional_fields: Mapping[str, Any] | None,
    core: Mapping[str, Any],
) -> dict[str, Any]:
    """Combina campos opcionais com os campos centrais; os centrais prevalecem."""
    merged = dict(additional_fields or {})
    merged.update(core)
    return compact(merged)
