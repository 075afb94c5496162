"""Normalizers por canal — conversão de payloads externos para modelos internos.

Estrutura:
- bale/: classificador de updates do webhook Bale e montagem do record
"""

from .bale import build_inbound_record, classify_event

__all__ = [
    "build_inbound_record",
    "classify_event",
]
