"""Contratos (Protocols e modelos) entre as camadas app e api."""

from app.protocols.bale_client import BaleClientProtocol, RawPosterProtocol
from app.protocols.models import (
    BinaryArtifact,
    DispatchResult,
    ExecutionItem,
    ItemFailure,
    OperationRequest,
    OutboundRecord,
    prepare_binary_data,
)
from app.protocols.record_sink import RecordSink

__all__ = [
    "BaleClientProtocol",
    "BinaryArtifact",
    "DispatchResult",
    "ExecutionItem",
    "ItemFailure",
    "OperationRequest",
    "OutboundRecord",
    "RawPosterProtocol",
    "RecordSink",
    "prepare_binary_data",
]
