"""Namespaced settings cache.

`SettingsManager` owns an in-memory mapping `{namespace: {key: value}}` and
delegates persistence to a backend implementing `init`/`update`. Writes are
applied to the cache synchronously and only then handed to the backend, so
the cache may run ahead of the store when persistence fails. There is no
rollback.
"""
from __future__ import annotations
import inspect
import logging
from typing import Any, Dict, List, Optional

from settings_lib.backends.interfaces import PersistenceBackend
from settings_lib.backends.null_backend import NullBackend
from settings_lib.wrapper import SettingsWrapper

logger = logging.getLogger(__name__)

# File extension used by the settings format of the base manager.
extension = ""


async def _resolve(result: Any) -> bool:
    # Backends may answer synchronously or hand back an awaitable.
    if inspect.isawaitable(result):
        result = await result
    return bool(result)


class SettingsManager:
    """A settings manager caching settings per namespace."""

    def __init__(self, backend: Optional[PersistenceBackend] = None) -> None:
        if backend is None:
            backend = NullBackend()
        if not isinstance(backend, PersistenceBackend):
            raise TypeError(f"{type(backend).__name__} does not implement init/update")
        self.backend = backend
        # The settings cache.
        self.settings: Dict[str, Dict[str, Any]] = {}

    @property
    def extension(self) -> str:
        return getattr(self.backend, "extension", extension)

    async def init(self) -> bool:
        """Load persisted settings into the cache.

        Returns the success reported by the backend.
        """
        ok = await _resolve(self.backend.init(self.settings))
        logger.debug("settings manager init via %s: %s", type(self.backend).__name__, ok)
        return ok

    async def update(self, namespace: Optional[str] = None) -> bool:
        """Persist the cache, or only `namespace` when given.

        Returns the success reported by the backend.
        """
        return await _resolve(self.backend.update(self.settings, namespace))

    def ensure(self, namespace: str) -> bool:
        """Ensure the cache has a settings object for `namespace`.

        Returns True when a settings object was created.
        """
        if namespace not in self.settings:
            self.settings[namespace] = {}
            logger.debug("made settings object for %s as it did not exist before", namespace)
            return True
        return False

    async def set(self, namespace: str, key: str, value: Any) -> bool:
        self.ensure(namespace)
        logger.debug("set '%s' to '%s' for %s", key, value, namespace)
        self.settings[namespace][key] = value
        return await self.update(namespace)

    async def clear(self, namespace: str, key: str) -> bool:
        # The key stays in the settings object with an absent value.
        self.ensure(namespace)
        logger.debug("cleared '%s' for %s", key, namespace)
        self.settings[namespace][key] = None
        return await self.update(namespace)

    def get(self, namespace: str, key: str) -> Any:
        """Return the value of `key` in `namespace`, or None when absent.

        Never creates the namespace.
        """
        ns = self.settings.get(namespace)
        if ns is None:
            return None
        return ns.get(key)

    def has_namespace(self, namespace: str) -> bool:
        return namespace in self.settings

    def namespaces(self) -> List[str]:
        return list(self.settings.keys())

    def create_wrapper(self, namespace: str) -> SettingsWrapper:
        """Create a wrapper applying every call to `namespace`."""
        return SettingsWrapper(namespace, self)
