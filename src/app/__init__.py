"""App — orquestração, casos de uso e infraestrutura do adapter Bale.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- coordinators/: fluxo inbound (update -> mídia -> record)
- use_cases/: dispatcher de operações outbound e tabela de handlers
- infra/: implementações concretas de IO (resolver de mídia, sinks, webhook)
- protocols/: contratos e modelos trocados com a camada api
- observability/: correlation_id dos logs
- constants/: enums de resource, operation, markup e eventos

Padrão: app executa; api adapta; utils apoia.
"""
