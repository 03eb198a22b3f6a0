"""Persistence backend writing settings objects into a `StorageBackend`.

Each settings namespace is stored as one key under `storage_namespace`.
When a serializer is given the stored value is the serialized bytes,
otherwise a deep copy of the settings object is handed to the store.
"""
from __future__ import annotations
import copy
import logging
import pickle
from typing import Any, Dict, Optional

import yaml

from settings_lib.storage.interfaces import StorageProtocol
from settings_lib.storage.serializer import Serializer

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_NAMESPACE = "settings"

# Storage and codec failures reported as an unsuccessful persistence. pickle
# raises EOFError on truncated input and AttributeError on unpicklable locals.
PERSISTENCE_ERRORS = (
    KeyError, OSError, EOFError, ValueError, TypeError, AttributeError,
    pickle.PickleError, yaml.YAMLError,
)


class StoragePersistence:
    """Adapter from the `init`/`update` hooks onto a namespaced key/value store."""

    def __init__(
        self,
        storage: StorageProtocol,
        serializer: Optional[Serializer] = None,
        storage_namespace: str = DEFAULT_STORAGE_NAMESPACE,
    ) -> None:
        if not isinstance(storage, StorageProtocol):
            raise TypeError(f"{type(storage).__name__} is not a storage backend")
        self.storage = storage
        self.serializer = serializer
        self.storage_namespace = storage_namespace

    @property
    def extension(self) -> str:
        return getattr(self.serializer, "extension", "")

    def _encode(self, values: Dict[str, Any]) -> Any:
        if self.serializer is None:
            return copy.deepcopy(values)
        return self.serializer.dump(values)

    def _decode(self, stored: Any) -> Dict[str, Any]:
        if self.serializer is None:
            values = copy.deepcopy(stored)
        else:
            values = self.serializer.load(stored)
        if values is None:
            return {}
        if not isinstance(values, dict):
            raise ValueError(f"expected a settings object, got {type(values).__name__}")
        return values

    def init(self, settings: Dict[str, Dict[str, Any]]) -> bool:
        # The cache is only touched once every namespace has decoded.
        loaded: Dict[str, Dict[str, Any]] = {}
        try:
            for namespace in list(self.storage.list_keys(self.storage_namespace)):
                loaded[namespace] = self._decode(self.storage.load(self.storage_namespace, namespace))
        except PERSISTENCE_ERRORS:
            logger.exception("Failed to load settings from %s", type(self.storage).__name__)
            return False
        settings.update(loaded)
        logger.info("Loaded settings for %d namespaces", len(loaded))
        return True

    def update(self, settings: Dict[str, Dict[str, Any]], namespace: Optional[str] = None) -> bool:
        if namespace is None:
            targets = list(settings.keys())
        elif namespace in settings:
            targets = [namespace]
        else:
            logger.debug("nothing cached for %s; nothing to persist", namespace)
            targets = []
        try:
            for ns in targets:
                self.storage.save(self.storage_namespace, ns, self._encode(settings[ns]))
        except PERSISTENCE_ERRORS:
            logger.exception("Failed to persist settings for %s", namespace or "all namespaces")
            return False
        logger.debug("persisted %d namespaces", len(targets))
        return True
