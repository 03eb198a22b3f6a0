from typing import Any, Awaitable, Dict, Optional, Protocol, Union, runtime_checkable


@runtime_checkable
class PersistenceBackend(Protocol):
    """Persistence hooks used by `settings_lib.manager.SettingsManager`.

    Both hooks receive the manager's cache by reference and report success
    as a boolean, either directly or through an awaitable. Failure is never
    signalled by raising.
    """

    def init(self, settings: Dict[str, Dict[str, Any]]) -> Union[bool, Awaitable[bool]]: ...

    def update(
        self,
        settings: Dict[str, Dict[str, Any]],
        namespace: Optional[str] = None,
    ) -> Union[bool, Awaitable[bool]]: ...
