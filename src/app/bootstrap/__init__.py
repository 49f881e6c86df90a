"""Bootstrap da aplicação: inicialização e wiring.

Composition root: configura logging, valida settings e conecta o
registry de clientes de email ao use case de composição.

Uso:
    from app.bootstrap import (
        create_compose_use_case,
        create_preference_store,
        initialize_app,
    )

    initialize_app()
    use_case = create_compose_use_case(create_preference_store(), probe=can_open_scheme)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.payload_builders.mail_clients import get_mail_client_registry
from app.infra.stores import MemoryMailPreferenceStore
from app.observability import get_correlation_id
from app.use_cases.mail import ComposeMailDeepLinkUseCase
from config.logging import configure_logging
from config.settings import get_base_settings, get_mail_settings
from config.settings.base import VALID_LOG_LEVELS

if TYPE_CHECKING:
    from app.protocols.preference_store import (
        InstalledAppProbe,
        MailPreferenceStoreProtocol,
    )

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação; deve ser chamada uma vez no início.

    Configura logging JSON com correlation_id e pré-carrega o registry.
    """
    settings = get_base_settings()
    validate_runtime_settings()

    # LOG_LEVEL inválido já foi reportado por validate_runtime_settings
    level = settings.log_level if settings.log_level in VALID_LOG_LEVELS else "INFO"
    configure_logging(
        level=level,
        service_name=settings.service_name,
        correlation_id_getter=get_correlation_id,
    )
    get_mail_client_registry()


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes (logging DEBUG)."""
    settings = get_base_settings()
    configure_logging(
        level="DEBUG",
        service_name=f"{settings.service_name}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    settings = get_base_settings()
    errors = settings.validate()

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": settings.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": settings.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if settings.requires_strict_validation:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {settings.environment}:\n{details}")


def create_compose_use_case(
    preferences: MailPreferenceStoreProtocol,
    probe: InstalledAppProbe,
) -> ComposeMailDeepLinkUseCase:
    """Cria use case de composição com o registry do processo."""
    return ComposeMailDeepLinkUseCase(
        registry=get_mail_client_registry(),
        preferences=preferences,
        probe=probe,
        default_id=get_mail_settings().default_mail_client,
    )


def create_preference_store() -> MemoryMailPreferenceStore:
    """Cria store em memória da escolha de cliente (chave de MAIL_PREFERENCE_KEY)."""
    return MemoryMailPreferenceStore(preference_key=get_mail_settings().preference_key)


__all__ = [
    "create_compose_use_case",
    "create_preference_store",
    "initialize_app",
    "initialize_test_app",
    "validate_runtime_settings",
]
