"""Tabela estática de descriptors por cliente de email.

Headers mailto padrão: subject, body, cc, bcc.
"""

from __future__ import annotations

from types import MappingProxyType

from api.payload_builders.mail_clients.descriptor import MailClientDescriptor

SPARK = MailClientDescriptor(
    scheme_prefix="readdle-spark://compose?",
    supported_headers=("subject", "recipient", "textbody", "html", "cc", "bcc"),
    recipient_param="recipient",
    body_alias_param="textbody",
)

AIRMAIL = MailClientDescriptor(
    scheme_prefix="airmail://compose?",
    supported_headers=("subject", "from", "to", "cc", "bcc", "plainBody", "htmlBody"),
    recipient_param="to",
    body_alias_param="htmlBody",
)

# Prefixo sem '?': o param do destinatário carrega o '?'
MYMAIL = MailClientDescriptor(
    scheme_prefix="mymail-mailto://",
    supported_headers=("to", "subject", "body", "cc", "bcc"),
    recipient_param="?to",
)

MAILRU = MYMAIL.with_scheme_prefix("mailru-mailto://")

OUTLOOK = MailClientDescriptor(
    scheme_prefix="ms-outlook://emails/new?",
    supported_headers=("to", "cc", "bcc", "subject", "body"),
    recipient_param="to",
)

# Mapeamento de id do catálogo para descriptor (somente leitura)
MAIL_CLIENT_DESCRIPTORS: MappingProxyType[str, MailClientDescriptor] = MappingProxyType(
    {
        "spark": SPARK,
        "airmail": AIRMAIL,
        "mymail": MYMAIL,
        "mailru": MAILRU,
        "outlook": OUTLOOK,
    }
)
