"""Simple memory-backed storage backend

This backend stores Python objects in memory as a data structure `[<namespace>][<key>]`.
"""
from threading import RLock
from typing import Dict, Any, Iterable, List

from .base import StorageBackend


class MemoryStorage(StorageBackend):
    def __init__(self):
        self._lock = RLock()
        self._store: Dict[str, Dict[str, Any]] = {}

    def save(self, namespace: str, key: str, value: Any) -> None:
        with self._lock:
            self._store.setdefault(namespace, {})[key] = value

    def load(self, namespace: str, key: str) -> Any:
        with self._lock:
            ns = self._store.get(namespace, {})
            if key not in ns:
                raise KeyError(key)
            return ns[key]

    def list_keys(self, namespace: str) -> Iterable[str]:
        # Copy so callers may save while iterating.
        with self._lock:
            keys: List[str] = list(self._store.get(namespace, {}).keys())
        return keys
