"""Memory-backed persistence backend.

Keeps a deep-copied snapshot per namespace in `snapshots`. Nothing survives
the process; useful for tests and for running without a store.
"""
import copy
import logging
from threading import RLock
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class MemoryBackend:
    extension = ""

    def __init__(self, initial: Optional[Dict[str, Dict[str, Any]]] = None):
        self._lock = RLock()
        self.snapshots: Dict[str, Dict[str, Any]] = copy.deepcopy(initial) if initial else {}

    def init(self, settings: Dict[str, Dict[str, Any]]) -> bool:
        with self._lock:
            for namespace, values in self.snapshots.items():
                settings[namespace] = copy.deepcopy(values)
        logger.debug("loaded %d namespaces from memory", len(self.snapshots))
        return True

    def update(self, settings: Dict[str, Dict[str, Any]], namespace: Optional[str] = None) -> bool:
        with self._lock:
            if namespace is None:
                self.snapshots = copy.deepcopy(settings)
            elif namespace in settings:
                self.snapshots[namespace] = copy.deepcopy(settings[namespace])
        return True
