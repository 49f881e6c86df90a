"""Protocolos de construção de deep links."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import EmailIntent, NormalizedMailRequest


class DeepLinkBuilderProtocol(Protocol):
    """Contrato mínimo para construir a URL de um cliente de email."""

    def build(self, request: NormalizedMailRequest) -> str: ...

    def build_from_intent(self, intent: EmailIntent) -> str: ...
