"""API: camada de borda: adapters entre intenções de email e apps externos.

Responsabilidades:
- Normalizar intenções mailto para modelos internos
- Construir deep links por cliente de email
- Validar sintaxe das URLs geradas

Subpastas:
- normalizers/: EmailIntent -> NormalizedMailRequest
- payload_builders/: descriptors, builder genérico e registry
- validators/: validação de URL

NÃO PODE conter: escolha de cliente, persistência de preferência, orquestração.
"""
