"""Settings do catálogo e da escolha de cliente de email.

Centralizar a leitura de env aqui evita espalhar parse de configuracao
pelos services e use cases.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class MailSettings(BaseModel):
    """Configuracoes usadas pelo registry e pela escolha de cliente."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    mail_schemes_path: Path | None = Field(
        default=None,
        description="YAML alternativo do catalogo de clientes de email.",
    )
    default_mail_client: str = Field(
        default="mailto",
        min_length=1,
        description="Id do cliente usado quando nao ha escolha valida.",
    )
    preference_key: str = Field(
        default="MailToOption",
        min_length=1,
        description="Chave onde a escolha do usuario e persistida.",
    )


def _read_optional_env(key: str) -> str | None:
    """Retorna valor opcional da env sem propagar string vazia."""
    raw_value = os.getenv(key)
    if raw_value is None:
        return None
    stripped_value = raw_value.strip()
    return stripped_value or None


def _load_mail_from_env() -> MailSettings:
    """Carrega MailSettings a partir de variaveis de ambiente."""
    schemes_path = _read_optional_env("MAIL_SCHEMES_PATH")
    return MailSettings(
        mail_schemes_path=Path(schemes_path) if schemes_path else None,
        default_mail_client=_read_optional_env("MAIL_DEFAULT_CLIENT") or "mailto",
        preference_key=_read_optional_env("MAIL_PREFERENCE_KEY") or "MailToOption",
    )


@lru_cache(maxsize=1)
def get_mail_settings() -> MailSettings:
    """Retorna instancia cacheada de MailSettings."""
    return _load_mail_from_env()


__all__ = ["MailSettings", "get_mail_settings"]
