"""Backend that persists nothing.

Used by `SettingsManager` when no backend is configured. Both hooks report
failure so callers can tell that settings only live in the cache.
"""
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class NullBackend:
    extension = ""

    def init(self, settings: Dict[str, Dict[str, Any]]) -> bool:
        logger.debug("settings manager does not initialize")
        return False

    def update(self, settings: Dict[str, Dict[str, Any]], namespace: Optional[str] = None) -> bool:
        logger.debug("settings manager does not update")
        return False
