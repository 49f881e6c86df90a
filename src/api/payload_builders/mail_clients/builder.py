"""Builder genérico de deep link, parametrizado por descriptor."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.normalizers.mailto import normalize_intent
from api.validators.deep_link import validate_deep_link

if TYPE_CHECKING:
    from api.payload_builders.mail_clients.descriptor import MailClientDescriptor
    from app.protocols.models import EmailIntent, NormalizedMailRequest
    from app.protocols.normalizer import MailIntentNormalizerProtocol

logger = logging.getLogger(__name__)

BODY_HEADER = "body"


def build_query_fragments(
    request: NormalizedMailRequest,
    descriptor: MailClientDescriptor,
) -> list[str]:
    """Monta fragmentos 'nome=valor' dos headers, na ordem normalizada.

    As duas checagens são independentes: um provider que suporta 'body'
    e define alias emite os dois fragmentos.
    """
    fragments: list[str] = []
    for name, value in request.headers.items():
        if descriptor.supports(name):
            fragments.append(f"{name}={value}")
        if name == BODY_HEADER and descriptor.body_alias_param:
            fragments.append(f"{descriptor.body_alias_param}={value}")
    return fragments


def build_deep_link(
    request: NormalizedMailRequest,
    descriptor: MailClientDescriptor,
) -> str:
    """Constrói URL de composição para um cliente de email.

    Args:
        request: Requisição já normalizada
        descriptor: Configuração do cliente alvo

    Returns:
        URL válida do scheme do cliente

    Raises:
        MalformedURLError: Se a URL montada não for sintaticamente válida
    """
    recipient_fragment = f"{descriptor.recipient_param}={request.recipient}"
    query = "&".join(build_query_fragments(request, descriptor))

    url = descriptor.scheme_prefix + recipient_fragment
    if query:
        url = f"{url}&{query}"

    logger.debug(
        "mail_deep_link_built",
        extra={
            "scheme_prefix": descriptor.scheme_prefix,
            "header_count": len(request.headers),
        },
    )
    return validate_deep_link(url)


class DeepLinkBuilder:
    """Builder de deep link para um descriptor específico."""

    def __init__(
        self,
        descriptor: MailClientDescriptor,
        normalizer: MailIntentNormalizerProtocol = normalize_intent,
    ) -> None:
        self._descriptor = descriptor
        self._normalize = normalizer

    @property
    def descriptor(self) -> MailClientDescriptor:
        return self._descriptor

    def build(self, request: NormalizedMailRequest) -> str:
        """Constrói URL a partir de requisição normalizada."""
        return build_deep_link(request, self._descriptor)

    def build_from_intent(self, intent: EmailIntent) -> str:
        """Normaliza a intenção e constrói a URL."""
        return self.build(self._normalize(intent))
