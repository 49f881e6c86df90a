"""Validators: validação de URLs geradas para apps externos.

Estrutura:
- deep_link/: sintaxe de deep links de clientes de email (RFC 3986)

Validators não corrigem entrada: rejeitam com erro tipado.
"""

__all__: list[str] = []
