"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    MailDeepLinkError,
    MailSchemesConfigError,
    MalformedURLError,
    UnknownMailProviderError,
)

__all__ = [
    "MailDeepLinkError",
    "MailSchemesConfigError",
    "MalformedURLError",
    "UnknownMailProviderError",
]
