from __future__ import annotations
import logging
from pathlib import Path
import yaml
from typing import Optional

from settings_lib.config import DEFAULT_CONFIG_PATH

LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s]: %(message)s'


def configure_logging(config_path: Optional[Path] = None, level: Optional[str] = None) -> logging.Logger:
    """Configure root logging for an application using settings_lib.

    An explicit `level` wins; otherwise `log_level` is read from the YAML
    settings config when present. Falls back to WARNING. Returns a module
    logger for the caller.
    """
    DEFAULT_LOG_LEVEL = logging.WARNING

    if level is None:
        cfg_path = config_path or DEFAULT_CONFIG_PATH
        if cfg_path.exists():
            try:
                with cfg_path.open('r', encoding='utf-8') as _f:
                    _cfg = yaml.safe_load(_f) or {}
                    level = _cfg.get('log_level') if isinstance(_cfg, dict) else None
            except (OSError, yaml.YAMLError):
                # If config parse fails, fall back to default level
                level = None

    if level:
        _lvl = logging.getLevelName(str(level).upper())
        if isinstance(_lvl, int):
            DEFAULT_LOG_LEVEL = _lvl

    # Reconfigure root handlers to use the selected level and format
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(level=DEFAULT_LOG_LEVEL, format=LOG_FORMAT)
    logger = logging.getLogger(__name__)
    logger.debug("Log level set to %s", logging.getLevelName(DEFAULT_LOG_LEVEL))

    return logger
