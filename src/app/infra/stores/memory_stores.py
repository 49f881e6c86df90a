"""Stores em memória: apenas para desenvolvimento e testes.

ATENÇÃO: Sem persistência entre reinícios.
"""

from __future__ import annotations

from app.protocols.preference_store import MailPreferenceStoreProtocol

DEFAULT_PREFERENCE_KEY = "MailToOption"


class MemoryMailPreferenceStore(MailPreferenceStoreProtocol):
    """Store da escolha de cliente de email em memória: apenas para dev/test."""

    def __init__(
        self,
        preference_key: str = DEFAULT_PREFERENCE_KEY,
        initial: dict[str, str] | None = None,
    ) -> None:
        self._key = preference_key
        self._store: dict[str, str] = dict(initial or {})

    @property
    def preference_key(self) -> str:
        return self._key

    def get_choice(self) -> str | None:
        return self._store.get(self._key)

    def set_choice(self, provider_id: str) -> None:
        if not provider_id:
            raise ValueError("provider_id não pode ser vazio")
        self._store[self._key] = provider_id

    def clear(self) -> None:
        """Remove a escolha salva."""
        self._store.pop(self._key, None)
