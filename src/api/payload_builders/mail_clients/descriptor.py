"""Descriptor estático de um cliente de email."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class MailClientDescriptor:
    """Configuração de scheme de um cliente de email.

    Attributes:
        scheme_prefix: Prefixo fixo da URL (pode ou não terminar em '?')
        supported_headers: Headers aceitos como query params; demais são descartados
        recipient_param: Nome do param do destinatário ('?to' quando o prefixo
            não termina em '?')
        body_alias_param: Nome extra sob o qual o header 'body' também é emitido
    """

    scheme_prefix: str
    supported_headers: tuple[str, ...]
    recipient_param: str
    body_alias_param: str | None = None

    def supports(self, header_name: str) -> bool:
        """Comparação exata: 'plainBody' nunca casa com header em minúsculas."""
        return header_name in self.supported_headers

    def with_scheme_prefix(self, scheme_prefix: str) -> MailClientDescriptor:
        """Retorna variante com outro prefixo, mesma tabela de headers."""
        return replace(self, scheme_prefix=scheme_prefix)
