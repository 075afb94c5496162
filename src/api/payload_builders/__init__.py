"""Payload builders por canal — construção de payloads para APIs externas.

Estrutura:
- bale/: Bot API do Bale (tapi.bale.ai)
"""

__all__: list[str] = []
