"""Loader do catálogo de clientes de email.

Carrega a lista ordenada {id, name, scheme} do YAML. O core trata o
catálogo como tabela opaca: só valida o shape de cada entrada.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from app.protocols.models import MailClientEntry
from utils.errors import MailSchemesConfigError

logger = logging.getLogger(__name__)

DEFAULT_MAIL_SCHEMES_PATH = Path(__file__).resolve().parent / "mail_schemes.yaml"

# Catálogo mínimo quando o YAML não pode ser lido
_FALLBACK_ENTRIES: tuple[MailClientEntry, ...] = (
    MailClientEntry(id="mailto", name="Mail", scheme="mailto:"),
)


def load_mail_schemes(
    path: Path | None = None,
    *,
    strict: bool = False,
) -> tuple[MailClientEntry, ...]:
    """Carrega entradas do catálogo na ordem do arquivo.

    Args:
        path: Caminho do YAML (padrão: mail_schemes.yaml do pacote)
        strict: Levanta erro em vez de usar fallback

    Returns:
        Tupla de MailClientEntry; ids duplicados mantêm a primeira ocorrência

    Raises:
        MailSchemesConfigError: Em modo estrito, se arquivo ausente ou inválido
    """
    source = path or DEFAULT_MAIL_SCHEMES_PATH

    try:
        raw = _read_yaml(source)
    except MailSchemesConfigError:
        if strict:
            raise
        logger.warning(
            "mail_schemes_fallback_used",
            extra={"path": str(source)},
        )
        return _FALLBACK_ENTRIES

    entries: list[MailClientEntry] = []
    seen: set[str] = set()
    for index, item in enumerate(raw):
        entry = _parse_entry(item, index, strict=strict)
        if entry is None:
            continue
        if entry.id in seen:
            logger.warning(
                "mail_schemes_duplicate_id",
                extra={"provider_id": entry.id, "index": index},
            )
            continue
        seen.add(entry.id)
        entries.append(entry)

    if not entries:
        if strict:
            raise MailSchemesConfigError("Catálogo de clientes de email vazio")
        return _FALLBACK_ENTRIES

    logger.debug("mail_schemes_loaded", extra={"count": len(entries)})
    return tuple(entries)


def _read_yaml(source: Path) -> list[Any]:
    """Lê o YAML e garante que a raiz é uma lista."""
    if not source.exists():
        raise MailSchemesConfigError(f"Arquivo de catálogo não encontrado: {source}")

    try:
        with source.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise MailSchemesConfigError(f"YAML de catálogo inválido: {exc}") from exc

    if not isinstance(data, list):
        raise MailSchemesConfigError("YAML de catálogo deve ser uma lista")
    return data


def _parse_entry(item: Any, index: int, *, strict: bool) -> MailClientEntry | None:
    """Valida uma entrada; inválidas são ignoradas fora do modo estrito."""
    if not isinstance(item, dict):
        if strict:
            raise MailSchemesConfigError(f"Entrada {index} do catálogo não é um mapa")
        logger.warning("mail_schemes_invalid_entry", extra={"index": index})
        return None
    try:
        return MailClientEntry.model_validate(item)
    except ValidationError as exc:
        if strict:
            raise MailSchemesConfigError(f"Entrada {index} do catálogo inválida") from exc
        logger.warning("mail_schemes_invalid_entry", extra={"index": index})
        return None


@lru_cache(maxsize=4)
def get_mail_schemes(
    path: Path | None = None,
    *,
    strict: bool = False,
) -> tuple[MailClientEntry, ...]:
    """Retorna catálogo cacheado (carregado uma vez por processo)."""
    return load_mail_schemes(path, strict=strict)
