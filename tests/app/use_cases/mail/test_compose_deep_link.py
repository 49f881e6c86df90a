"""Testes para app.use_cases.mail.ComposeMailDeepLinkUseCase."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from api.payload_builders.mail_clients import MailClientRegistry
from app.infra.stores import MemoryMailPreferenceStore
from app.protocols.models import EmailIntent
from app.use_cases.mail import (
    ERROR_MALFORMED_URL,
    ERROR_SYSTEM_HANDLER,
    ComposeMailDeepLinkUseCase,
)
from config.mail_schemes import load_mail_schemes

INTENT = EmailIntent(
    primary_recipient="a@x.com",
    headers={"To": "b@x.com", "Subject": "Hi", "Body": "Hello"},
)


def _all_installed(scheme: str) -> bool:
    return True


@pytest.fixture()
def registry() -> MailClientRegistry:
    return MailClientRegistry(load_mail_schemes())


def _use_case(
    registry: MailClientRegistry,
    choice: str | None,
    probe=_all_installed,
    default_id: str | None = None,
) -> ComposeMailDeepLinkUseCase:
    store = MemoryMailPreferenceStore()
    if choice:
        store.set_choice(choice)
    return ComposeMailDeepLinkUseCase(registry, store, probe, default_id=default_id)


class TestComposeMailDeepLinkUseCase:
    """Testes para execute e resolve_choice."""

    def test_success_for_installed_choice(self, registry: MailClientRegistry) -> None:
        result = _use_case(registry, "outlook").execute(INTENT)
        assert result.success is True
        assert result.provider_id == "outlook"
        assert result.url == (
            "ms-outlook://emails/new?to=a@x.com%2C%20b@x.com&subject=Hi&body=Hello"
        )
        assert result.error_code is None

    def test_spark_uses_body_alias(self, registry: MailClientRegistry) -> None:
        result = _use_case(registry, "spark").execute(INTENT)
        assert result.url == (
            "readdle-spark://compose?recipient=a@x.com%2C%20b@x.com&subject=Hi&textbody=Hello"
        )

    def test_system_handler_when_no_choice(self, registry: MailClientRegistry) -> None:
        result = _use_case(registry, None).execute(INTENT)
        assert result.success is False
        assert result.provider_id == "mailto"
        assert result.error_code == ERROR_SYSTEM_HANDLER
        assert result.url is None

    def test_not_installed_choice_falls_back_to_system(
        self, registry: MailClientRegistry
    ) -> None:
        use_case = _use_case(registry, "airmail", probe=lambda scheme: scheme == "mailto:")
        result = use_case.execute(INTENT)
        assert result.provider_id == "mailto"
        assert result.error_code == ERROR_SYSTEM_HANDLER

    def test_default_id_applies_without_choice(self, registry: MailClientRegistry) -> None:
        use_case = _use_case(registry, None, default_id="mymail")
        assert use_case.resolve_choice() == "mymail"
        result = use_case.execute(EmailIntent(headers={"Subject": "Hi"}))
        assert result.url == "mymail-mailto://?to=&subject=Hi"

    def test_default_id_not_installed_falls_back_to_system(
        self, registry: MailClientRegistry
    ) -> None:
        """Escolha e padrão sem app instalado caem no handler do sistema."""
        use_case = _use_case(
            registry,
            "spark",
            probe=lambda scheme: scheme == "mailto:",
            default_id="outlook",
        )
        result = use_case.execute(EmailIntent(primary_recipient="a@x.com"))
        assert result.success is False
        assert result.provider_id == "mailto"
        assert result.error_code == ERROR_SYSTEM_HANDLER
        assert result.url is None

    def test_malformed_url_returns_typed_failure(
        self, registry: MailClientRegistry, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """URL malformada vira falha tipada e log de fallback (sem retry)."""
        fallback = MagicMock()
        monkeypatch.setattr("app.use_cases.mail.compose_deep_link.log_fallback", fallback)
        intent = EmailIntent(headers={"Subject": "Hello World"})

        result = _use_case(registry, "mailru").execute(intent)

        assert result.success is False
        assert result.provider_id == "mailru"
        assert result.error_code == ERROR_MALFORMED_URL
        assert "caracteres ilegais" in (result.error_message or "")
        fallback.assert_called_once()
        assert fallback.call_args[1]["reason"] == "malformed_url"

    def test_probe_receives_raw_scheme(self, registry: MailClientRegistry) -> None:
        probe = MagicMock(return_value=True)
        _use_case(registry, "spark", probe=probe).execute(INTENT)
        probe.assert_called_once_with("readdle-spark://")
