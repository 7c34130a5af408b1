"""App — orquestração, casos de uso e infraestrutura do gateway de Flows.

Subpastas:
- bootstrap/: composition root (settings, chaves, wiring do dispatcher)
- use_cases/: dispatcher do endpoint de Flow
- services/: hook padrão de submissão
- infra/: criptografia do envelope e assinatura HMAC
- protocols/: contratos/interfaces
- observability/: correlation id e latência via logs estruturados

Padrão: app executa; api adapta; fsm governa; utils apoia.
"""
