"""Normalizer Bale — classificação de updates do webhook."""

from .extractor import Attachment, InboundEvent, classify_event
from .normalizer import BINARY_PROPERTY, build_inbound_record

__all__ = [
    "BINARY_PROPERTY",
    "Attachment",
    "InboundEvent",
    "build_inbound_record",
    "classify_event",
]
