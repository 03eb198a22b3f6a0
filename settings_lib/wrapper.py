from __future__ import annotations
from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from settings_lib.manager import SettingsManager


class SettingsWrapper:
    """A view over a `SettingsManager` bound to a single namespace.

    Holds no state of its own; every call is passed straight to the manager
    with the namespace filled in.
    """

    def __init__(self, namespace: str, manager: 'SettingsManager') -> None:
        self.namespace = namespace
        self.manager = manager

    def get(self, key: str) -> Any:
        return self.manager.get(self.namespace, key)

    async def set(self, key: str, value: Any) -> bool:
        return await self.manager.set(self.namespace, key, value)

    async def clear(self, key: str) -> bool:
        return await self.manager.clear(self.namespace, key)

    def __repr__(self) -> str:  # pragma: no cover - convenience
        return f"SettingsWrapper(namespace={self.namespace!r})"
