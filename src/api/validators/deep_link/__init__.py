"""Validadores de deep link de clientes de email.

Uso:
    from api.validators.deep_link import validate_deep_link

    url = validate_deep_link(candidate)  # levanta MalformedURLError
"""

from api.validators.deep_link.url import validate_deep_link

__all__ = [
    "validate_deep_link",
]
