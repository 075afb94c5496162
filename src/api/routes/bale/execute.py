"""Endpoint de execução de operações outbound.

POST /bale/execute
    {"items": [{"parameters": {...}, "binary": {nome: {data, fileName, mimeType}}}]}
    -> {"records": [...], "failures": [...]}

O token pode vir no header X-Bale-Bot-Token (credencial do host); sem ele,
vale BALE_BOT_TOKEN.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from app.bootstrap.bale_factory import create_dispatcher
from app.observability import CORRELATION_HEADER, correlation_scope
from app.protocols.models import BinaryArtifact, ExecutionItem
from utils.errors import ConfigurationError, ParameterValidationError, UnsupportedOperationError

logger = logging.getLogger(__name__)

router = APIRouter()

TOKEN_HEADER = "x-bale-bot-token"


class BinaryPayload(BaseModel):
    """Anexo no formato do host (base64)."""

    model_config = ConfigDict(populate_by_name=True)

    data: str
    file_name: str = Field(default="file", alias="fileName")
    mime_type: str | None = Field(default=None, alias="mimeType")


class ItemPayload(BaseModel):
    parameters: dict[str, Any] = Field(default_factory=dict)
    binary: dict[str, BinaryPayload] = Field(default_factory=dict)


class ExecuteRequest(BaseModel):
    items: list[ItemPayload] = Field(default_factory=list)


def to_execution_items(request: ExecuteRequest) -> list[ExecutionItem]:
    """Converte o envelope em ExecutionItems.

    Raises:
        ValueError: Se algum anexo não for base64 válido
    """
    return [
        ExecutionItem(
            parameters=item.parameters,
            binary={
                name: BinaryArtifact.from_dict(artifact.model_dump(by_alias=True))
                for name, artifact in item.binary.items()
            },
        )
        for item in request.items
    ]


def _error(status_code: int, error_type: str, message: str, **details: Any) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error_type, "message": message, **details},
    )


@router.post("/execute", response_model=None)
async def execute_operation(payload: ExecuteRequest, request: Request) -> JSONResponse:
    """Executa a operação do item 0 sobre todos os itens."""
    with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
        try:
            items = to_execution_items(payload)
        except ValueError as exc:
            return _error(status.HTTP_422_UNPROCESSABLE_ENTITY, "invalid_binary", str(exc))

        try:
            dispatcher = create_dispatcher(token=request.headers.get(TOKEN_HEADER))
            result = await dispatcher.execute(items)
        except ConfigurationError as exc:
            logger.warning("bale_execute_not_configured", extra={"correlation_id": correlation_id})
            return _error(status.HTTP_503_SERVICE_UNAVAILABLE, "configuration_error", str(exc))
        except ParameterValidationError as exc:
            return _error(
                status.HTTP_422_UNPROCESSABLE_ENTITY,
                "parameter_validation_error",
                str(exc),
                parameter=exc.parameter,
            )
        except UnsupportedOperationError as exc:
            return _error(
                status.HTTP_400_BAD_REQUEST,
                "unsupported_operation",
                str(exc),
                resource=exc.resource,
                operation=exc.operation,
            )

        logger.info(
            "bale_execute_completed",
            extra={
                "correlation_id": correlation_id,
                "records": len(result.records),
                "failures": len(result.failures),
            },
        )
        return JSONResponse(content=result.to_dict())
