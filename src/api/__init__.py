"""API — camada de borda HTTP.

Responsabilidades:
- Receber o request do endpoint de Flows
- Entregar corpo bruto e header de assinatura ao dispatcher
- Traduzir o resultado em resposta HTTP

NÃO PODE conter: criptografia, FSM ou regras de tela.
"""
