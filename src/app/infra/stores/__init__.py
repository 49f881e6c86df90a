"""Stores concretas (implementações de protocolos de persistência)."""

from app.infra.stores.memory_stores import (
    DEFAULT_PREFERENCE_KEY,
    MemoryMailPreferenceStore,
)

__all__ = [
    "DEFAULT_PREFERENCE_KEY",
    "MemoryMailPreferenceStore",
]
