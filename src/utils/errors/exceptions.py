"""Exceções do adapter Bale.

Hierarquia:
- BaleAdapterError
  - ConfigurationError: falha de setup (token ausente, settings inválidas)
  - ParameterValidationError: parâmetro do item inválido ou ausente
  - MissingAttachmentError: campo binário pedido não existe no item
  - UnsupportedOperationError: par resource/operation sem handler
  - RemoteCallError: resposta não-2xx, `ok: false` ou falha de transporte
  - MediaResolutionError: falha em qualquer etapa getFile -> download
"""

from __future__ import annotations

from typing import Any


class BaleAdapterError(RuntimeError):
    """Base para erros do adapter."""


class ConfigurationError(BaleAdapterError):
    """Configuração ou credencial ausente/inválida."""


class ParameterValidationError(BaleAdapterError):
    """Parâmetro do item não passou na validação.

    Attributes:
        item_index: Índice do item (None para erros antes do loop)
        parameter: Nome do parâmetro envolvido, quando conhecido
    """

    def __init__(
        self,
        message: str,
        *,
        item_index: int | None = None,
        parameter: str | None = None,
    ) -> None:
        super().__init__(message)
        self.item_index = item_index
        self.parameter = parameter


class MissingAttachmentError(BaleAdapterError):
    """Operação binária sem o campo binário correspondente no item."""

    def __init__(self, property_name: str, *, item_index: int | None = None) -> None:
        super().__init__(f"Item has no binary property '{property_name}'")
        self.property_name = property_name
        self.item_index = item_index


class UnsupportedOperationError(BaleAdapterError):
    """Par resource/operation sem handler registrado."""

    def __init__(self, resource: str, operation: str) -> None:
        super().__init__(f"Unsupported operation '{operation}' for resource '{resource}'")
        self.resource = resource
        self.operation = operation


class RemoteCallError(BaleAdapterError):
    """Chamada à Bot API falhou.

    Attributes:
        method: Método da Bot API (ex: sendMessage)
        status_code: Status HTTP, se houve resposta
        error_code: `error_code` retornado pelo Bale, se houver
        description: `description` retornado pelo Bale, se houver
        body: Corpo JSON da resposta de erro, se houver
    """

    def __init__(
        self,
        method: str,
        message: str,
        *,
        status_code: int | None = None,
        error_code: int | None = None,
        description: str | None = None,
        body: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.status_code = status_code
        self.error_code = error_code
        self.description = description
        self.body = body

    def as_details(self) -> dict[str, Any]:
        """Resumo serializável do erro (sem token)."""
        return {
            "method": self.method,
            "status_code": self.status_code,
            "error_code": self.error_code,
            "description": self.description,
            "body": self.body or {},
        }


class MediaResolutionError(BaleAdapterError):
    """Falha ao resolver mídia de um evento inbound.

    Attributes:
        file_id: Identificador remoto do arquivo
        event_identity: Identidade do evento de origem (update_id, chat_id, message_id)
        stage: Etapa que falhou ("metadata" ou "download")
    """

    def __init__(
        self,
        message: str,
        *,
        file_id: str | None,
        event_identity: dict[str, Any] | None = None,
        stage: str | None = None,
    ) -> None:
        super().__init__(message)
        self.file_id = file_id
        self.event_identity = event_identity or {}
        self.stage = stage
