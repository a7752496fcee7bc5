# src/strtools/util/__init__.py
"""
util.
====

Does: Provide the sorted container, config loading and topic debug logging.
Returns: Public API via Sorted, load_config/clear_config_cache and debug/reload_topics.
Used by: split, escape, dialect loading, the demo CLI and tests.
"""

from __future__ import annotations

from .config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
    resolve_data_dir,
    temp_data_dir,
)
from .log import (
    debug,
    reload_topics,
)
from .sorted import Sorted

__all__ = [
    "Sorted",
    # Config loading
    "load_config",
    "clear_config_cache",
    "resolve_data_dir",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "reload_topics",
]
