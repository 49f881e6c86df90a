"""Use case para compor deep link no cliente de email escolhido."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.protocols.models import DeepLinkResult, EmailIntent
from app.services.mail_choice import resolve_mail_choice
from config.logging import log_fallback
from utils.errors import MalformedURLError

if TYPE_CHECKING:
    from api.payload_builders.mail_clients import MailClientRegistry
    from app.protocols.payload_builder import DeepLinkBuilderProtocol
    from app.protocols.preference_store import (
        InstalledAppProbe,
        MailPreferenceStoreProtocol,
    )

logger = logging.getLogger(__name__)

ERROR_SYSTEM_HANDLER = "SYSTEM_HANDLER"
ERROR_MALFORMED_URL = "MALFORMED_URL"


class ComposeMailDeepLinkUseCase:
    """Orquestra escolha do cliente, build e tratamento de erro."""

    def __init__(
        self,
        registry: MailClientRegistry,
        preferences: MailPreferenceStoreProtocol,
        probe: InstalledAppProbe,
        *,
        default_id: str | None = None,
    ) -> None:
        self._registry = registry
        self._preferences = preferences
        self._probe = probe
        self._default_id = default_id

    def resolve_choice(self) -> str:
        """Retorna o id do cliente efetivo para esta execução."""
        return resolve_mail_choice(
            self._preferences.get_choice(),
            self._registry.catalog(),
            self._probe,
            default_id=self._default_id,
        )

    def execute(self, intent: EmailIntent) -> DeepLinkResult:
        """Gera deep link para o cliente escolhido.

        Sem deep link (handler do sistema) ou com URL malformada, retorna
        falha tipada; o chamador usa o link mailto original.
        """
        provider_id = self.resolve_choice()

        if not self._registry.has_builder(provider_id):
            return DeepLinkResult(
                success=False,
                provider_id=provider_id,
                error_code=ERROR_SYSTEM_HANDLER,
                error_message="Cliente padrão do sistema: usar link mailto original",
            )

        builder: DeepLinkBuilderProtocol = self._registry.get_builder(provider_id)
        try:
            url = builder.build_from_intent(intent)
        except MalformedURLError as exc:
            log_fallback(logger, "mail_deep_link", reason="malformed_url")
            return DeepLinkResult(
                success=False,
                provider_id=provider_id,
                error_code=ERROR_MALFORMED_URL,
                error_message=str(exc),
            )

        logger.info("mail_deep_link_composed", extra={"provider_id": provider_id})
        return DeepLinkResult(success=True, provider_id=provider_id, url=url)
