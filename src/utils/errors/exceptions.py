"""Exceções de domínio para geração de deep links de clientes de email."""

from __future__ import annotations


class MailDeepLinkError(RuntimeError):
    """Base para falhas na geração de deep links."""


class MalformedURLError(MailDeepLinkError):
    """URL montada não é sintaticamente válida.

    Determinística: as mesmas entradas falham de novo, não há retry.
    O motivo nunca inclui a URL (pode conter PII).
    """

    def __init__(self, reason: str) -> None:
        super().__init__(f"URL malformada: {reason}")
        self.reason = reason


class UnknownMailProviderError(MailDeepLinkError, KeyError):
    """Identificador de cliente de email ausente do registry (erro de programação)."""

    def __init__(self, provider_id: str) -> None:
        super().__init__(f"Cliente de email desconhecido: {provider_id}")
        self.provider_id = provider_id

    def __str__(self) -> str:
        return str(self.args[0])


class MailSchemesConfigError(MailDeepLinkError):
    """Catálogo de clientes de email ausente ou inválido (modo estrito)."""
