"""Catálogo estático de clientes de email (id, nome, scheme)."""

from config.mail_schemes.loader import (
    DEFAULT_MAIL_SCHEMES_PATH,
    get_mail_schemes,
    load_mail_schemes,
)

__all__ = [
    "DEFAULT_MAIL_SCHEMES_PATH",
    "get_mail_schemes",
    "load_mail_schemes",
]
