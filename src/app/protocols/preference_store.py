"""Protocolos de persistência da escolha de cliente de email."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

# Probe injetado pelo chamador: scheme bruto -> app instalado?
InstalledAppProbe = Callable[[str], bool]


class MailPreferenceStoreProtocol(Protocol):
    """Contrato mínimo para ler/gravar o cliente de email escolhido."""

    def get_choice(self) -> str | None: ...

    def set_choice(self, provider_id: str) -> None: ...
