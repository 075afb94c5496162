"""API — camada de borda com a Bot API do Bale.

Responsabilidades:
- Receber updates do webhook e validar o secret token
- Classificar updates em eventos internos
- Construir payloads das operações
- Falar HTTP com tapi.bale.ai

Subpastas:
- connectors/: cliente compartilhado, POST de baixo nível e webhook
- normalizers/: update -> InboundEvent -> record
- payload_builders/: parâmetros validados -> BaleRequest
- routes/: endpoints HTTP (webhook, execute, health)

NÃO PODE conter: orquestração de use cases.
"""
