"""Registry de clientes de email: catálogo ordenado + builders por id."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import TYPE_CHECKING

from api.payload_builders.mail_clients.builder import DeepLinkBuilder
from api.payload_builders.mail_clients.providers import MAIL_CLIENT_DESCRIPTORS
from config.mail_schemes import get_mail_schemes
from config.settings import get_base_settings, get_mail_settings
from utils.errors import UnknownMailProviderError

if TYPE_CHECKING:
    from api.payload_builders.mail_clients.descriptor import MailClientDescriptor
    from app.protocols.models import MailClientEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MailClientOption:
    """Visão de catálogo exposta à UI (sem lógica de build)."""

    id: str
    name: str
    scheme: str
    has_deep_link: bool


class MailClientRegistry:
    """Catálogo somente leitura de clientes de email.

    Montado uma vez a partir das entradas do catálogo e da tabela de
    descriptors. Não expõe operações de mutação.
    """

    def __init__(
        self,
        entries: Iterable[MailClientEntry],
        descriptors: Mapping[str, MailClientDescriptor] = MAIL_CLIENT_DESCRIPTORS,
    ) -> None:
        self._entries: tuple[MailClientEntry, ...] = tuple(entries)
        if not self._entries:
            raise ValueError("Registry de clientes de email requer ao menos uma entrada")
        self._by_id: Mapping[str, MailClientEntry] = MappingProxyType(
            {entry.id: entry for entry in self._entries}
        )
        self._builders: Mapping[str, DeepLinkBuilder] = MappingProxyType(
            {
                entry.id: DeepLinkBuilder(descriptors[entry.id])
                for entry in self._entries
                if entry.id in descriptors
            }
        )

    @property
    def default_id(self) -> str:
        """Primeira entrada do catálogo (handler padrão do sistema)."""
        return self._entries[0].id

    def entries(self) -> tuple[MailClientOption, ...]:
        """Retorna catálogo ordenado para enumeração na UI."""
        return tuple(
            MailClientOption(
                id=entry.id,
                name=entry.name,
                scheme=entry.scheme,
                has_deep_link=entry.id in self._builders,
            )
            for entry in self._entries
        )

    def catalog(self) -> tuple[MailClientEntry, ...]:
        """Retorna as entradas brutas do catálogo, na ordem original."""
        return self._entries

    def get_entry(self, provider_id: str) -> MailClientEntry:
        """Retorna entrada do catálogo por id.

        Raises:
            UnknownMailProviderError: Se id não existe no catálogo
        """
        try:
            return self._by_id[provider_id]
        except KeyError:
            raise UnknownMailProviderError(provider_id) from None

    def has_builder(self, provider_id: str) -> bool:
        return provider_id in self._builders

    def get_builder(self, provider_id: str) -> DeepLinkBuilder:
        """Retorna builder do cliente.

        Raises:
            UnknownMailProviderError: Se não há builder para o id
        """
        try:
            return self._builders[provider_id]
        except KeyError:
            raise UnknownMailProviderError(provider_id) from None


@lru_cache(maxsize=1)
def get_mail_client_registry() -> MailClientRegistry:
    """Retorna registry do processo (catálogo carregado uma vez).

    Em staging/production o catálogo é carregado em modo estrito: arquivo
    ausente ou inválido levanta MailSchemesConfigError em vez de fallback.
    """
    settings = get_mail_settings()
    strict = get_base_settings().requires_strict_validation
    entries = get_mail_schemes(settings.mail_schemes_path, strict=strict)
    registry = MailClientRegistry(entries)
    logger.info(
        "mail_client_registry_ready",
        extra={
            "entries": len(entries),
            "deep_link_clients": sum(1 for option in registry.entries() if option.has_deep_link),
        },
    )
    return registry


def get_deep_link_builder(provider_id: str) -> DeepLinkBuilder:
    """Retorna o builder para o cliente de email.

    Args:
        provider_id: Id do catálogo (ex: 'outlook')

    Returns:
        Builder apropriado

    Raises:
        UnknownMailProviderError: Se cliente sem deep link ou inexistente
    """
    return get_mail_client_registry().get_builder(provider_id)
