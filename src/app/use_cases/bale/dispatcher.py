"""Dispatcher de operações da Bot API do Bale.

Fluxo por execução:
1. resource/operation/binaryData/binaryPropertyName lidos do item 0
2. handler resolvido na tabela (par desconhecido: no-op ou erro em modo estrito)
3. itens processados em ordem, uma chamada remota aguardada por item
4. um record por item bem-sucedido; falhas ficam em DispatchResult.failures
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from api.payload_builders.bale import BuildContext, MediaUpload, Transport, build_markup, parse_params
from app.constants.bale import RESOURCE_OPERATIONS, Operation, Resource
from app.protocols.models import DispatchResult, ItemFailure, OperationRequest, OutboundRecord
from app.use_cases.bale.handlers import FailurePolicy, OperationHandler, lookup_handler
from config.logging import log_fallback
from utils.errors import (
    MissingAttachmentError,
    ParameterValidationError,
    RemoteCallError,
    UnsupportedOperationError,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from api.payload_builders.bale import BaleRequest
    from app.protocols.bale_client import BaleClientProtocol, RawPosterProtocol
    from app.protocols.models import ExecutionItem

logger = logging.getLogger(__name__)

DEFAULT_BINARY_PROPERTY = "data"


@dataclass(frozen=True, slots=True)
class BinaryOptions:
    """Opções de upload lidas uma única vez do item 0."""

    enabled: bool = False
    property_name: str = DEFAULT_BINARY_PROPERTY


class Dispatcher:
    """Executa uma operação sobre uma lista de itens do host."""

    def __init__(
        self,
        client: BaleClientProtocol,
        raw_poster: RawPosterProtocol,
        *,
        strict: bool = False,
    ) -> None:
        self._client = client
        self._raw = raw_poster
        self._strict = strict

    async def execute(self, items: Sequence[ExecutionItem]) -> DispatchResult:
        """Processa os itens e devolve records (em ordem) e falhas.

        Raises:
            ParameterValidationError: resource/operation ausentes no item 0
            UnsupportedOperationError: par desconhecido em modo estrito
        """
        result = DispatchResult()
        if not items:
            return result

        first = items[0].parameters
        handler = self._resolve_handler(first)
        if handler is None:
            return result
        binary = _binary_options(first) if handler.accepts_binary else BinaryOptions()

        logger.info(
            "bale_execution_started",
            extra={
                "resource": handler.resource.value,
                "operation": handler.operation.value,
                "item_count": len(items),
                "binary_data": binary.enabled,
            },
        )

        for index, item in enumerate(items):
            request = OperationRequest.for_item(handler.resource, handler.operation, item, index)
            try:
                record = await self._run_item(handler, request, item, binary)
            except RemoteCallError as exc:
                record = self._apply_failure_policy(handler, exc, index, result)
            except (ParameterValidationError, MissingAttachmentError) as exc:
                exc.item_index = index
                logger.warning(
                    "bale_item_invalid",
                    extra={
                        "operation": handler.operation.value,
                        "item_index": index,
                        "error_type": type(exc).__name__,
                    },
                )
                result.failures.append(ItemFailure(index, exc))
                record = None
            if record is not None:
                result.records.append(record)

        logger.info(
            "bale_execution_finished",
            extra={
                "operation": handler.operation.value,
                "records": len(result.records),
                "failures": len(result.failures),
            },
        )
        return result

    def _resolve_handler(self, parameters: Any) -> OperationHandler | None:
        resource_name = parameters.get("resource")
        operation_name = parameters.get("operation")
        if not resource_name:
            raise ParameterValidationError("resource is required", parameter="resource")
        if not operation_name:
            raise ParameterValidationError("operation is required", parameter="operation")

        handler = None
        try:
            resource = Resource(resource_name)
            operation = Operation(operation_name)
        except ValueError:
            pass
        else:
            if operation in RESOURCE_OPERATIONS[resource]:
                handler = lookup_handler(resource, operation)

        if handler is None:
            if self._strict:
                raise UnsupportedOperationError(str(resource_name), str(operation_name))
            logger.warning(
                "bale_operation_unsupported",
                extra={"resource": str(resource_name), "operation": str(operation_name)},
            )
        return handler

    async def _run_item(
        self,
        handler: OperationHandler,
        request: OperationRequest,
        item: ExecutionItem,
        binary: BinaryOptions,
    ) -> OutboundRecord:
        params = parse_params(handler.params_model, request.parameters, request.item_index)
        markup = None
        if handler.uses_markup:
            markup = build_markup(request.parameters.get("replyMarkup"), request.parameters)

        upload = None
        if binary.enabled:
            artifact = item.binary.get(binary.property_name)
            if artifact is None:
                raise MissingAttachmentError(binary.property_name, item_index=request.item_index)
            upload = MediaUpload(file_name=artifact.file_name, data=artifact.data)

        bale_request = handler.build(params, BuildContext(reply_markup=markup, upload=upload))
        remote_result = await self._send(bale_request)

        logger.debug(
            "bale_item_dispatched",
            extra={
                "operation": handler.operation.value,
                "method": bale_request.method,
                "transport": bale_request.transport.value,
                "item_index": request.item_index,
            },
        )
        return OutboundRecord(json=handler.wrap(remote_result), item_index=request.item_index)

    async def _send(self, request: BaleRequest) -> Any:
        if request.transport is Transport.RAW:
            return await self._raw.post_json(request.method, request.payload)
        return await self._client.call(request.method, request.payload, request.files)

    def _apply_failure_policy(
        self,
        handler: OperationHandler,
        exc: RemoteCallError,
        index: int,
        result: DispatchResult,
    ) -> OutboundRecord | None:
        extra = {
            "operation": handler.operation.value,
            "item_index": index,
            "status_code": exc.status_code,
            "error_code": exc.error_code,
        }
        if handler.on_failure is FailurePolicy.DROP:
            logger.warning("bale_item_failure_dropped", extra=extra)
            return None
        if handler.on_failure is FailurePolicy.DEGRADE:
            log_fallback(logger, handler.operation.value, reason="remote_call_failed", item_index=index)
            return OutboundRecord(
                json={
                    "successful": False,
                    "errorMessage": str(exc),
                    "errorDetails": exc.body or exc.as_details(),
                },
                item_index=index,
            )
        logger.warning("bale_item_failed", extra=extra)
        result.failures.append(ItemFailure(index, exc))
        return None


def _binary_options(parameters: Any) -> BinaryOptions:
    enabled = parameters.get("binaryData", False)
    if isinstance(enabled, str):
        enabled = enabled.strip().lower() == "true"
    return BinaryOptions(
        enabled=bool(enabled),
        property_name=str(parameters.get("binaryPropertyName") or DEFAULT_BINARY_PROPERTY),
    )
