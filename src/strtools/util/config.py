# src/strtools/util/config.py
"""
config.

Does: Load `<data>/<name>.json` configs, optionally with JSON5 comments, and
      validate them once per file version. Validated results are cached on
      (path, mtime, validator) so repeated dialect lookups don't re-read disk.
Returns: load_config(), resolve_data_dir(), clear_config_cache(), temp_data_dir.
Used by: split dialects (splitting/dialects.py), tests needing hot reload.

The data directory is the explicit `base_dir`, else STRTOOLS_DATA_DIR / DATA_DIR,
else the nearest `data/` walking up from this package (the bundled `strtools/data`).
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import Any, Literal

import json5

from strtools.errors import ConfigurationError, StrToolsError

Mode = Literal["raw", "validated_dict"]
Validator = Callable[[dict[str, Any]], Any]

__all__ = [
    "Mode",
    "load_config",
    "resolve_data_dir",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

ENV_VARS = ("STRTOOLS_DATA_DIR", "DATA_DIR")


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(StrToolsError, FileNotFoundError):
    """Raise when no data directory can be resolved."""


class ConfigFileNotFound(StrToolsError, FileNotFoundError):
    """Raise when a config file is missing, unreadable or outside the data dir."""


class ConfigParseError(ConfigurationError):
    """Raise when a config file is not valid JSON/JSON5 or fails validation."""


class ConfigTypeError(StrToolsError, TypeError):
    """Raise when the parsed document has the wrong top-level shape."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
_CONFIG_CACHE: dict[tuple[Path, float, str, bool, Validator | None], Any] = {}


def clear_config_cache() -> None:
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
    log.debug("Config cache cleared.")


def _bundled_data_dir() -> Path:
    here = Path(__file__).resolve()
    for parent in here.parents:
        cand = parent / "data"
        if cand.is_dir():
            return cand
    raise DataDirNotFound(f"no 'data' directory above {here}")


def resolve_data_dir(base_dir: Path | None = None) -> Path:
    """Resolve the data directory: explicit > env override > bundled."""
    if base_dir is not None:
        return Path(base_dir).resolve()
    for var in ENV_VARS:
        value = os.environ.get(var)
        if value:
            return Path(value).expanduser().resolve()
    return _bundled_data_dir()


def _config_path(file: str | os.PathLike[str], data_dir: Path) -> Path:
    name = os.fspath(file)
    if not name.endswith(".json"):
        name += ".json"
    path = (data_dir / name).resolve()
    if not path.is_relative_to(data_dir):
        raise ConfigFileNotFound(f"refusing to read {path}: outside data dir {data_dir}")
    if not path.is_file():
        raise ConfigFileNotFound(f"config file not found: {path}")
    return path


def _read(path: Path, allow_comments: bool) -> Any:
    try:
        with path.open("r", encoding="utf-8") as f:
            return json5.load(f) if allow_comments else json.load(f)
    except OSError as e:
        raise ConfigFileNotFound(f"cannot read {path}: {e}") from e
    except ValueError as e:
        # JSONDecodeError and json5 syntax errors are both ValueErrors
        raise ConfigParseError(f"invalid {'JSON5' if allow_comments else 'JSON'} in {path.name}: {e}") from e


def _validated(data: Any, path: Path, validator: Validator | None) -> Any:
    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected an object, got {type(data).__name__}")
    if validator is None:
        return data
    try:
        return validator(data)
    except (ValueError, TypeError, KeyError) as e:
        raise ConfigParseError(f"{path.name}: {e}") from e


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: Path | None = None,
    validator: Validator | None = None,
    allow_comments: bool = False,
) -> Any:
    """
    Does: Read `<data>/<file>.json`. In "validated_dict" mode the document must
          be an object and is passed through `validator`.
    Returns: The parsed (and validated) document, shared between callers until
             the file's mtime changes or the cache is cleared.
    """
    if mode not in ("raw", "validated_dict"):
        raise ValueError(f"unknown config mode {mode!r}")
    path = _config_path(file, resolve_data_dir(base_dir))
    key = (path, path.stat().st_mtime, mode, allow_comments, validator)

    with _CACHE_LOCK:
        if key in _CONFIG_CACHE:
            log.debug("Config cache HIT: %s (mode=%s)", path.name, mode)
            return _CONFIG_CACHE[key]

    data = _read(path, allow_comments)
    if mode == "validated_dict":
        data = _validated(data, path, validator)

    with _CACHE_LOCK:
        _CONFIG_CACHE[key] = data
    log.debug("Config cache MISS → STORED: %s (mode=%s)", path.name, mode)
    return data


# ── Context manager to temporarily override the data directory ───────────────
class temp_data_dir:
    """Temporarily point STRTOOLS_DATA_DIR at `path` for the block."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get(ENV_VARS[0])
        os.environ[ENV_VARS[0]] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop(ENV_VARS[0], None)
        else:
            os.environ[ENV_VARS[0]] = self._old
        clear_config_cache()
