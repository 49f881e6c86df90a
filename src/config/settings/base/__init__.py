"""Agregador de settings base.

Re-exporta todas as settings base para uso externo.
"""

from __future__ import annotations

from config.settings.base.core import (
    STRICT_VALIDATION_ENVS,
    VALID_LOG_LEVELS,
    BaseSettings,
    Environment,
    get_base_settings,
)

__all__ = [
    "STRICT_VALIDATION_ENVS",
    "VALID_LOG_LEVELS",
    "BaseSettings",
    "Environment",
    "get_base_settings",
]
