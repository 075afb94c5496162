"""Contratos canônicos trocados entre host, dispatcher e normalizer.

- ExecutionItem: visão de um item de entrada do host (parâmetros + binários)
- OperationRequest: resource + operation + parâmetros de um item
- BinaryArtifact: anexo binário na representação do host
- OutboundRecord: um record de saída por item processado
- ItemFailure / DispatchResult: resultado agregado de uma execução
"""

from __future__ import annotations

import base64
import binascii
import mimetypes
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.constants.bale import Operation, Resource


@dataclass(frozen=True, slots=True)
class BinaryArtifact:
    """Anexo binário (bytes + nome de arquivo)."""

    data: bytes
    file_name: str
    mime_type: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Formato do host: {data: base64, fileName, mimeType}."""
        return {
            "data": base64.b64encode(self.data).decode("ascii"),
            "fileName": self.file_name,
            "mimeType": self.mime_type,
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> BinaryArtifact:
        """Reconstrói o artefato a partir do formato do host.

        Raises:
            ValueError: Se `data` não for base64 válido.
        """
        try:
            data = base64.b64decode(raw.get("data") or "", validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ValueError("binary data is not valid base64") from exc
        file_name = str(raw.get("fileName") or "file")
        return cls(data=data, file_name=file_name, mime_type=raw.get("mimeType"))


def prepare_binary_data(content: bytes, file_name: str) -> BinaryArtifact:
    """Constrói um BinaryArtifact deduzindo o mime type pelo nome."""
    mime_type, _ = mimetypes.guess_type(file_name)
    return BinaryArtifact(data=content, file_name=file_name, mime_type=mime_type)


@dataclass(frozen=True, slots=True)
class ExecutionItem:
    """Item de entrada: parâmetros já resolvidos e binários anexados."""

    parameters: Mapping[str, Any] = field(default_factory=dict)
    binary: Mapping[str, BinaryArtifact] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class OperationRequest:
    """Requisição imutável de um item: (resource, operation, parâmetros)."""

    resource: Resource
    operation: Operation
    parameters: Mapping[str, Any]
    item_index: int

    @classmethod
    def for_item(
        cls,
        resource: Resource,
        operation: Operation,
        item: ExecutionItem,
        item_index: int,
    ) -> OperationRequest:
        return cls(
            resource=resource,
            operation=operation,
            parameters=MappingProxyType(dict(item.parameters)),
            item_index=item_index,
        )


@dataclass(frozen=True, slots=True)
class OutboundRecord:
    """Record de saída: json + binários + índice do item de origem."""

    json: dict[str, Any]
    binary: dict[str, BinaryArtifact] = field(default_factory=dict)
    item_index: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "json": self.json,
            "binary": {name: artifact.to_dict() for name, artifact in self.binary.items()},
            "pairedItem": {"item": self.item_index},
        }


@dataclass(frozen=True, slots=True)
class ItemFailure:
    """Falha atribuída a um único item."""

    item_index: int
    error: Exception

    def to_dict(self) -> dict[str, Any]:
        details = getattr(self.error, "as_details", None)
        return {
            "item_index": self.item_index,
            "error_type": type(self.error).__name__,
            "message": str(self.error),
            "details": details() if callable(details) else {},
        }


@dataclass(slots=True)
class DispatchResult:
    """Resultado de uma execução: records na ordem dos itens + falhas."""

    records: list[OutboundRecord] = field(default_factory=list)
    failures: list[ItemFailure] = field(default_factory=list)

    def __iter__(self) -> Iterator[OutboundRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    @property
    def ok(self) -> bool:
        return not self.failures

    def to_dict(self) -> dict[str, Any]:
        return {
            "records": [record.to_dict() for record in self.records],
            "failures": [failure.to_dict() for failure in self.failures],
        }
