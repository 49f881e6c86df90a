"""Agregador de settings do serviço de deep links de email.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Mail client settings
from config.settings.mail import (
    MailSettings,
    get_mail_settings,
)

__all__ = [
    # Base
    "BaseSettings",
    "Environment",
    # Mail
    "MailSettings",
    "get_base_settings",
    "get_mail_settings",
]
