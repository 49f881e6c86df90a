"""Configuração do pytest para o projeto mailto-deeplinks."""

import logging
import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from api.payload_builders.mail_clients import get_mail_client_registry  # noqa: E402
from config.mail_schemes import get_mail_schemes  # noqa: E402
from config.settings import get_base_settings, get_mail_settings  # noqa: E402

_CACHED_GETTERS = (
    get_base_settings,
    get_mail_settings,
    get_mail_schemes,
    get_mail_client_registry,
)


@pytest.fixture(autouse=True)
def _reset_cached_singletons():
    """Limpa caches de settings/registry entre testes (env via monkeypatch)."""
    for getter in _CACHED_GETTERS:
        getter.cache_clear()
    yield
    for getter in _CACHED_GETTERS:
        getter.cache_clear()


@pytest.fixture()
def restore_root_logger():
    """Restaura handlers e nível do root logger após configure_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)
