"""Connectors — adapters de borda para APIs externas.

Estrutura:
- bale/: Bot API do Bale (tapi.bale.ai)
"""

__all__: list[str] = []
