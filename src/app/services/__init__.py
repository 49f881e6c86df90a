"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.mail_choice import (
    MailOption,
    list_mail_options,
    probe_installed,
    resolve_mail_choice,
)

__all__ = [
    "MailOption",
    "list_mail_options",
    "probe_installed",
    "resolve_mail_choice",
]
