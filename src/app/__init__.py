"""App: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (inicialização, wiring)
- use_cases/: casos de uso (inputs/outputs, sem IO direto)
- services/: serviços de aplicação (escolha do cliente de email)
- infra/: implementações concretas de stores
- protocols/: contratos/interfaces e modelos canônicos
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; config configura; utils apoia.
"""
