"""Namespaced settings cache with pluggable persistence."""

from .manager import SettingsManager
from .wrapper import SettingsWrapper
from .backends import MemoryBackend, NullBackend, PersistenceBackend, StoragePersistence
from .config import ManagerConfig, create_manager, load_config

__all__ = [
    "SettingsManager",
    "SettingsWrapper",
    "PersistenceBackend",
    "NullBackend",
    "MemoryBackend",
    "StoragePersistence",
    "ManagerConfig",
    "create_manager",
    "load_config",
]
