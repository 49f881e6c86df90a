"""Normalizer mailto: headers em minúsculas e merge do destinatário.

Responsabilidades:
- Normalizar nomes de header de uma EmailIntent
- Mesclar header 'to' com o destinatário principal
- Produzir NormalizedMailRequest para os builders de deep link
"""

from .normalizer import (
    RECIPIENT_SEPARATOR,
    lowercase_headers,
    merge_recipient,
    normalize_intent,
)

__all__ = [
    "RECIPIENT_SEPARATOR",
    "lowercase_headers",
    "merge_recipient",
    "normalize_intent",
]
