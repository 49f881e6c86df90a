"""Resolução do cliente de email efetivamente escolhido.

A detecção de app instalado é injetada (scheme -> bool); este módulo
não mantém cache e não toca no SO.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.protocols.models import MailClientEntry
    from app.protocols.preference_store import InstalledAppProbe

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MailOption:
    """Linha da lista de clientes: entrada + estado para a UI."""

    entry: MailClientEntry
    enabled: bool
    selected: bool


def probe_installed(
    entries: Sequence[MailClientEntry],
    probe: InstalledAppProbe,
) -> dict[str, bool]:
    """Consulta o probe uma vez por scheme do catálogo."""
    return {entry.scheme: bool(probe(entry.scheme)) for entry in entries}


def _pick_default(
    entries: Sequence[MailClientEntry],
    probe: InstalledAppProbe,
    default_id: str | None,
) -> str:
    """Padrão configurado só vale se está no catálogo e instalado."""
    if default_id:
        entry = next((item for item in entries if item.id == default_id), None)
        if entry is not None and probe(entry.scheme):
            return default_id
    return entries[0].id


def resolve_mail_choice(
    stored_choice: str | None,
    entries: Sequence[MailClientEntry],
    probe: InstalledAppProbe,
    *,
    default_id: str | None = None,
) -> str:
    """Retorna o id do cliente a usar.

    Mantém a escolha salva apenas se ela existe no catálogo e o app está
    instalado; caso contrário volta para o padrão: default_id, se está no
    catálogo e instalado, senão a primeira entrada.

    Args:
        stored_choice: Id persistido pelo usuário (ou None)
        entries: Catálogo ordenado
        probe: Função scheme -> instalado
        default_id: Id padrão configurado

    Returns:
        Id do cliente efetivo
    """
    if not entries:
        raise ValueError("Catálogo de clientes de email vazio")

    default_choice = _pick_default(entries, probe, default_id)
    if not stored_choice:
        return default_choice

    entry = next((item for item in entries if item.id == stored_choice), None)
    if entry is None:
        logger.info("mail_choice_unknown_stored", extra={"provider_id": stored_choice})
        return default_choice

    if not probe(entry.scheme):
        logger.info("mail_choice_not_installed", extra={"provider_id": stored_choice})
        return default_choice

    return stored_choice


def list_mail_options(
    entries: Sequence[MailClientEntry],
    current_choice: str,
    probe: InstalledAppProbe,
) -> list[MailOption]:
    """Monta as linhas da lista de clientes para a UI.

    Só fica marcada a entrada escolhida que também está habilitada.
    """
    installed = probe_installed(entries, probe)
    options: list[MailOption] = []
    for entry in entries:
        enabled = installed.get(entry.scheme, False)
        options.append(
            MailOption(
                entry=entry,
                enabled=enabled,
                selected=enabled and entry.id == current_choice,
            )
        )
    return options
