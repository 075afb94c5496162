"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    BaleAdapterError,
    ConfigurationError,
    MediaResolutionError,
    MissingAttachmentError,
    ParameterValidationError,
    RemoteCallError,
    UnsupportedOperationError,
)

__all__ = [
    "BaleAdapterError",
    "ConfigurationError",
    "MediaResolutionError",
    "MissingAttachmentError",
    "ParameterValidationError",
    "RemoteCallError",
    "UnsupportedOperationError",
]
