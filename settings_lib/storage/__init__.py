"""Storage abstraction package for settings_lib."""

from .base import StorageBackend
from .memory_storage import MemoryStorage
from .serializer import JSONSerializer, PickleSerializer, YAMLSerializer, get_serializer

__all__ = [
    "StorageBackend",
    "MemoryStorage",
    "JSONSerializer",
    "PickleSerializer",
    "YAMLSerializer",
    "get_serializer",
]
