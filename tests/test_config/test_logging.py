"""Testes para config.logging.

Cobre: configure_logging, get_logger, log_fallback,
CorrelationIdFilter, create_json_formatter.
"""

from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    log_fallback,
)
from config.logging.config import DEFAULT_SERVICE_NAME


def _record(msg: str = "message", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.mark.usefixtures("restore_root_logger")
class TestConfigureLogging:
    """Testes para configure_logging."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("INFO", logging.INFO),
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
        ],
    )
    def test_configure_logging_levels(self, level: str, expected: int) -> None:
        """Nível aplicado ao root logger (case insensitive)."""
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_configure_logging_invalid_level_raises(self) -> None:
        """Nível inválido levanta ValueError."""
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_configure_logging_replaces_handlers(self) -> None:
        """configure_logging substitui handlers existentes."""
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_handler_has_correlation_filter(self) -> None:
        configure_logging(correlation_id_getter=lambda: "corr")
        handler = logging.getLogger().handlers[0]
        assert any(isinstance(f, CorrelationIdFilter) for f in handler.filters)

    def test_default_service_name_constant(self) -> None:
        assert DEFAULT_SERVICE_NAME == "mailto-deeplinks"


class TestGetLogger:
    """Testes para get_logger."""

    def test_same_name_returns_same_instance(self) -> None:
        logger = get_logger("api.payload_builders.mail_clients")
        assert isinstance(logger, logging.Logger)
        assert logger is get_logger("api.payload_builders.mail_clients")


class TestLogFallback:
    """Testes para log_fallback."""

    def test_log_fallback_basic(self) -> None:
        """Template lazy com componente e extra padronizado."""
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "mail_deep_link")
        args, kwargs = logger.info.call_args
        assert args == ("Fallback applied for %s", "mail_deep_link")
        assert kwargs["extra"] == {"fallback_used": True, "component": "mail_deep_link"}

    def test_log_fallback_with_reason_and_elapsed(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "mail_deep_link", reason="malformed_url", elapsed_ms=1.5)
        extra = logger.info.call_args[1]["extra"]
        assert extra["reason"] == "malformed_url"
        assert extra["elapsed_ms"] == 1.5


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_adds_correlation_id_and_service(self) -> None:
        filter_ = CorrelationIdFilter("mail_svc", lambda: "corr-123")
        record = _record()
        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "mail_svc"

    def test_preserves_explicit_correlation_id(self) -> None:
        filter_ = CorrelationIdFilter("svc", lambda: "from-getter")
        record = _record()
        record.correlation_id = "explicit-id"
        filter_.filter(record)
        assert record.correlation_id == "explicit-id"

    def test_empty_string_without_getter(self) -> None:
        filter_ = CorrelationIdFilter("svc")
        record = _record()
        filter_.filter(record)
        assert record.correlation_id == ""


class TestCreateJsonFormatter:
    """Testes para create_json_formatter e constantes."""

    def test_required_fields(self) -> None:
        assert set(REQUIRED_LOG_FIELDS) == {
            "asctime", "levelname", "name", "message", "correlation_id", "service",
        }
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_formats_record_as_json(self) -> None:
        """Saída JSON com campos renomeados e extras."""
        formatter = create_json_formatter()
        record = _record("mail_deep_link_composed")
        record.correlation_id = "abc-123"
        record.service = "mailto-deeplinks"
        record.provider_id = "outlook"
        payload = json.loads(formatter.format(record))
        assert payload["message"] == "mail_deep_link_composed"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "test.logger"
        assert payload["correlation_id"] == "abc-123"
        assert payload["service"] == "mailto-deeplinks"
        assert payload["provider_id"] == "outlook"
