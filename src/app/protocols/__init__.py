"""Protocolos e contratos do core da aplicação."""

from .models import (
    DeepLinkResult,
    EmailIntent,
    MailClientEntry,
    NormalizedMailRequest,
)
from .normalizer import MailIntentNormalizerProtocol
from .payload_builder import DeepLinkBuilderProtocol
from .preference_store import InstalledAppProbe, MailPreferenceStoreProtocol

__all__ = [
    "DeepLinkBuilderProtocol",
    "DeepLinkResult",
    "EmailIntent",
    "InstalledAppProbe",
    "MailClientEntry",
    "MailIntentNormalizerProtocol",
    "MailPreferenceStoreProtocol",
    "NormalizedMailRequest",
]
