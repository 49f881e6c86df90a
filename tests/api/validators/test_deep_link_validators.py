"""Testes para api.validators.deep_link."""

from __future__ import annotations

import pytest

from api.validators.deep_link import validate_deep_link
from utils.errors import MalformedURLError


class TestValidateDeepLink:
    """Testes para validate_deep_link."""

    @pytest.mark.parametrize(
        "url",
        [
            "ms-outlook://emails/new?to=a@x.com%2C%20b@x.com&subject=Hi",
            "mymail-mailto://?to=",
            "readdle-spark://compose?recipient=&textbody=hello",
            "scheme-c://?to=&subject=Hi&body=Hello#frag",
            "mailto:a@x.com",
        ],
    )
    def test_valid_urls_returned_unchanged(self, url: str) -> None:
        assert validate_deep_link(url) == url

    @pytest.mark.parametrize("url", ["//compose?to=", "1abc://x", "?to=a", ""])
    def test_missing_or_invalid_scheme(self, url: str) -> None:
        with pytest.raises(MalformedURLError, match="scheme"):
            validate_deep_link(url)

    @pytest.mark.parametrize(
        "value",
        ["Hello World", "a<b>", 'say "hi"', "x{y}", "a|b", "a\\b", "caf\u00e9", "a^b", "a`b", "l1\nl2"],
    )
    def test_illegal_characters(self, value: str) -> None:
        with pytest.raises(MalformedURLError, match="caracteres ilegais"):
            validate_deep_link(f"ms-outlook://emails/new?to=&subject={value}")

    @pytest.mark.parametrize("value", ["%", "%2", "%zz", "100%"])
    def test_incomplete_percent_encoding(self, value: str) -> None:
        with pytest.raises(MalformedURLError, match="percent-encoding"):
            validate_deep_link(f"airmail://compose?to=&subject={value}")

    def test_more_than_one_fragment(self) -> None:
        with pytest.raises(MalformedURLError, match="fragmento"):
            validate_deep_link("ms-outlook://emails/new?to=&subject=#a#b")

    def test_unbalanced_ipv6_bracket(self) -> None:
        """urlsplit rejeita host com colchete aberto."""
        with pytest.raises(MalformedURLError):
            validate_deep_link("scheme-x://[::1?to=")

    def test_reason_does_not_leak_url_content(self) -> None:
        """Mensagem cita só códigos de caractere, nunca valores (PII)."""
        with pytest.raises(MalformedURLError) as exc_info:
            validate_deep_link("ms-outlook://emails/new?to=secret person@x.com")
        assert "secret" not in str(exc_info.value)
        assert "U+0020" in exc_info.value.reason
