"""Normalizers: conversão de entradas externas para modelos internos.

Estrutura:
- mailto/: EmailIntent -> NormalizedMailRequest (headers + destinatário)
"""

from .mailto import normalize_intent

__all__ = [
    "normalize_intent",
]
