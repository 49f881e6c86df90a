"""Modelos canônicos de protocolo para composição de email.

Contratos compartilhados entre api/ (normalizers, builders) e app/
(use cases, services). Valores de header chegam prontos para URL:
o core apenas concatena, nunca faz escape.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class EmailIntent(BaseModel):
    """Intenção de compor email: destinatário principal + headers mailto.

    Nomes de header são case-insensitive e podem chegar em qualquer caixa.
    A ordem de inserção do dict é preservada e define o desempate de colisões.
    """

    model_config = ConfigDict(frozen=True)

    primary_recipient: str = Field(
        default="",
        description="Destinatário do mailto (pode ser vazio).",
    )
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Headers mailto (subject, body, cc, bcc, to, ...).",
    )


class NormalizedMailRequest(BaseModel):
    """Saída do normalizer, consumida por todos os builders."""

    model_config = ConfigDict(frozen=True)

    recipient: str = Field(
        default="",
        description="Destinatário final, já mesclado com o header 'to'.",
    )
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Headers em minúsculas, sem a chave 'to'.",
    )


class MailClientEntry(BaseModel):
    """Entrada do catálogo de clientes de email exposta à UI."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(..., min_length=1, description="Identificador estável do cliente.")
    name: str = Field(..., min_length=1, description="Nome exibido na UI.")
    scheme: str = Field(
        ...,
        min_length=1,
        description="Scheme bruto usado para checar se o app está instalado.",
    )


class DeepLinkResult(BaseModel):
    """Resultado tipado da composição de deep link."""

    model_config = ConfigDict(frozen=True)

    success: bool
    provider_id: str
    url: str | None = None
    error_code: str | None = None
    error_message: str | None = None
