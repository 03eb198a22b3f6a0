"""Persistence backends for the settings manager."""

from .interfaces import PersistenceBackend
from .memory_backend import MemoryBackend
from .null_backend import NullBackend
from .storage_backend import StoragePersistence

__all__ = ["PersistenceBackend", "MemoryBackend", "NullBackend", "StoragePersistence"]
