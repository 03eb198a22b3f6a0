from typing import Protocol, Any, Iterable, runtime_checkable


@runtime_checkable
class StorageProtocol(Protocol):
    """Storage protocol mirroring `settings_lib.storage.StorageBackend`.

    Lets duck-typed stores that do not subclass the ABC be handed to
    `StoragePersistence`. Semantics follow the abstract base class in
    `settings_lib.storage.base` (KeyError for missing keys).
    """

    def save(self, namespace: str, key: str, value: Any) -> None: ...

    def load(self, namespace: str, key: str) -> Any: ...

    def list_keys(self, namespace: str) -> Iterable[str]: ...
