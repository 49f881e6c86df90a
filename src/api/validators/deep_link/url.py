"""Validação sintática de deep links (RFC 3986).

O core não faz escape dos valores; qualquer caractere ilegal que chegue
sem encoding torna a URL inválida aqui.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from utils.errors import MalformedURLError

_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")

# unreserved + reserved (gen-delims e sub-delims) + '%'
_ALLOWED_CHARS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
    "-._~:/?#[]@!$&'()*+,;=%"
)

_BAD_PERCENT_PATTERN = re.compile(r"%(?![0-9A-Fa-f]{2})")


def validate_deep_link(candidate: str) -> str:
    """Valida URL montada por um builder.

    Args:
        candidate: URL completa (scheme + query)

    Returns:
        A própria URL, se válida

    Raises:
        MalformedURLError: Se a string não for uma URL válida
    """
    if not _SCHEME_PATTERN.match(candidate):
        raise MalformedURLError("scheme ausente ou inválido")

    illegal = {char for char in candidate if char not in _ALLOWED_CHARS}
    if illegal:
        # Só códigos dos caracteres, nunca o conteúdo da URL
        codes = ", ".join(sorted(f"U+{ord(char):04X}" for char in illegal))
        raise MalformedURLError(f"caracteres ilegais ({codes})")

    if _BAD_PERCENT_PATTERN.search(candidate):
        raise MalformedURLError("percent-encoding incompleto")

    if candidate.count("#") > 1:
        raise MalformedURLError("mais de um fragmento")

    try:
        urlsplit(candidate)
    except ValueError as exc:
        raise MalformedURLError(str(exc)) from exc

    return candidate
