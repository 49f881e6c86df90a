"""Builders de deep link para clientes de email.

Um único algoritmo parametrizado por descriptor: clientes são dados,
não tipos. Variantes (ex: Mail.Ru) derivam por composição de descriptor.
"""

from api.payload_builders.mail_clients.builder import (
    DeepLinkBuilder,
    build_deep_link,
    build_query_fragments,
)
from api.payload_builders.mail_clients.descriptor import MailClientDescriptor
from api.payload_builders.mail_clients.factory import (
    MailClientOption,
    MailClientRegistry,
    get_deep_link_builder,
    get_mail_client_registry,
)
from api.payload_builders.mail_clients.providers import MAIL_CLIENT_DESCRIPTORS

__all__ = [
    "MAIL_CLIENT_DESCRIPTORS",
    "DeepLinkBuilder",
    "MailClientDescriptor",
    "MailClientOption",
    "MailClientRegistry",
    "build_deep_link",
    "build_query_fragments",
    "get_deep_link_builder",
    "get_mail_client_registry",
]
