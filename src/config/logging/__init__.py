"""Logging estruturado JSON do serviço.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="mailto-deeplinks")
    logger = get_logger(__name__)

Campos obrigatórios em todo log: correlation_id, service, level,
logger, message, asctime.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
