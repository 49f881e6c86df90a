"""Use cases de composição de email via deep link."""

from app.use_cases.mail.compose_deep_link import (
    ERROR_MALFORMED_URL,
    ERROR_SYSTEM_HANDLER,
    ComposeMailDeepLinkUseCase,
)

__all__ = [
    "ERROR_MALFORMED_URL",
    "ERROR_SYSTEM_HANDLER",
    "ComposeMailDeepLinkUseCase",
]
