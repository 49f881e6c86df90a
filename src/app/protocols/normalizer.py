"""Protocolos de normalização de intenções de email."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import EmailIntent, NormalizedMailRequest


class MailIntentNormalizerProtocol(Protocol):
    """Contrato mínimo para normalização de EmailIntent."""

    def __call__(self, intent: EmailIntent) -> NormalizedMailRequest: ...
