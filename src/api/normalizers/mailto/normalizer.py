"""Normalizer mailto: converte EmailIntent para NormalizedMailRequest.

Regras:
- Nomes de header viram minúsculos (alguns sites capitalizam hnames no mailto:)
- Colisão por caixa: vence o valor posterior, a chave mantém a posição
  da primeira ocorrência (ordem de inserção do dict de entrada)
- Header 'to' é mesclado ao destinatário principal e removido

Não falha: intenção vazia gera destinatário vazio e headers vazios.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from app.protocols.models import EmailIntent, NormalizedMailRequest

logger = logging.getLogger(__name__)

# Vírgula + espaço já em percent-encoding (RFC 6068)
RECIPIENT_SEPARATOR = "%2C%20"

TO_HEADER = "to"


def lowercase_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Retorna cópia dos headers com nomes em minúsculas.

    Args:
        headers: Headers na caixa original

    Returns:
        Novo dict; em colisão o último valor vence
    """
    lowered: dict[str, str] = {}
    for name, value in headers.items():
        lowered[name.lower()] = value
    return lowered


def merge_recipient(primary_recipient: str, to_value: str) -> str:
    """Combina destinatário principal com o header 'to'."""
    if not primary_recipient:
        return to_value
    return RECIPIENT_SEPARATOR.join((primary_recipient, to_value))


def normalize_intent(intent: EmailIntent) -> NormalizedMailRequest:
    """Normaliza intenção de email para o modelo consumido pelos builders.

    Args:
        intent: Intenção com destinatário e headers brutos

    Returns:
        NormalizedMailRequest com destinatário mesclado e headers filtrados
    """
    headers = lowercase_headers(intent.headers)

    if len(headers) != len(intent.headers):
        logger.debug(
            "mailto_header_case_collision",
            extra={"collapsed": len(intent.headers) - len(headers)},
        )

    recipient = intent.primary_recipient
    if TO_HEADER in headers:
        recipient = merge_recipient(intent.primary_recipient, headers.pop(TO_HEADER))

    return NormalizedMailRequest(recipient=recipient, headers=headers)
