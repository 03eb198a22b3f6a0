"""Manager configuration.

Selects the persistence backend a `SettingsManager` is built with. The
configuration is a small YAML document, e.g.::

    backend: storage
    serializer: yaml
    storage_namespace: settings
    log_level: INFO

`backend` is one of `null`, `memory`, `storage`, or a `module:Class` import
path of a custom backend which is constructed with `options` as keyword
arguments.
"""
from __future__ import annotations
import importlib
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, field_validator

from settings_lib.backends import MemoryBackend, NullBackend, PersistenceBackend, StoragePersistence
from settings_lib.backends.storage_backend import DEFAULT_STORAGE_NAMESPACE
from settings_lib.manager import SettingsManager
from settings_lib.storage.interfaces import StorageProtocol
from settings_lib.storage.memory_storage import MemoryStorage
from settings_lib.storage.serializer import get_serializer

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path('data/config/settings.yml')


class ManagerConfig(BaseModel):
    backend: str = "null"
    serializer: Optional[str] = None
    storage_namespace: str = DEFAULT_STORAGE_NAMESPACE
    log_level: str = "WARNING"
    options: Dict[str, Any] = {}

    @field_validator('log_level')
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level '{value}'")
        return level


def load_config(path: Optional[Path | str] = None) -> ManagerConfig:
    """Read a `ManagerConfig` from YAML. A missing file gives the defaults."""
    cfg_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not cfg_path.exists():
        logger.debug("No settings config at %s; using defaults", cfg_path)
        return ManagerConfig()
    try:
        with cfg_path.open('r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid settings config {cfg_path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Settings config {cfg_path} must be a mapping")
    return ManagerConfig.model_validate(data)


def _import_backend(path: str) -> Any:
    module_name, _, attr = path.partition(':')
    if not module_name or not attr:
        raise ValueError(f"Unknown backend '{path}'")
    try:
        module = importlib.import_module(module_name)
        return getattr(module, attr)
    except (ImportError, AttributeError) as e:
        raise ValueError(f"Cannot import backend '{path}': {e}") from e


def create_backend(config: ManagerConfig, storage: Optional[StorageProtocol] = None) -> PersistenceBackend:
    name = config.backend
    if name == 'null':
        return NullBackend()
    if name == 'memory':
        return MemoryBackend(**config.options)
    if name == 'storage':
        serializer = get_serializer(config.serializer) if config.serializer else None
        return StoragePersistence(
            storage if storage is not None else MemoryStorage(),
            serializer=serializer,
            storage_namespace=config.storage_namespace,
        )
    backend = _import_backend(name)(**config.options)
    if not isinstance(backend, PersistenceBackend):
        raise ValueError(f"Backend '{name}' does not implement init/update")
    return backend


def create_manager(config: Optional[ManagerConfig] = None, storage: Optional[StorageProtocol] = None) -> SettingsManager:
    """Build a `SettingsManager` with the backend selected by `config`."""
    config = config or ManagerConfig()
    backend = create_backend(config, storage)
    logger.info("Settings manager using %s backend", type(backend).__name__)
    return SettingsManager(backend)
