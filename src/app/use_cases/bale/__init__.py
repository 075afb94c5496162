"""Use cases do adapter Bale: dispatch de operações outbound."""

from app.use_cases.bale.dispatcher import Dispatcher
from app.use_cases.bale.handlers import HANDLERS, FailurePolicy, OperationHandler

__all__ = ["HANDLERS", "Dispatcher", "FailurePolicy", "OperationHandler"]
