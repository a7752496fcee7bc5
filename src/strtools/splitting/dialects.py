# src/strtools/splitting/dialects.py
"""
dialects.

Does: Name reusable split configurations (escape, delimiters, mode, limit)
      and load them from `<data>/dialects.json` through load_config.
Returns: SplitDialect, load_dialects(), get_dialect(), split_with_dialect().
Used by: Callers that parse the same user-facing formats repeatedly
         (paths, `rule/replace/flags` regex rules, key=value pairs), demo CLI.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from strtools.errors import ConfigurationError, EscapeIsDelimiterError, UnknownDialectError
from strtools.splitting.delimiters import DelimiterSet
from strtools.splitting.non_escaped import _check_max_splits, _segments
from strtools.util.config import load_config
from strtools.util.suggest import suggest
from strtools.util.text import TextLike, ensure_char, ensure_text

__all__ = [
    "SplitDialect",
    "load_dialects",
    "get_dialect",
    "split_with_dialect",
    "DIALECTS_FILE",
]

log = logging.getLogger(__name__)

DIALECTS_FILE = "dialects"
SplitMode = Literal["raw", "sanitized"]
_MODES = ("raw", "sanitized")


@dataclass(frozen=True)
class SplitDialect:
    name: str
    escape: str
    delimiters: DelimiterSet
    mode: SplitMode = "raw"
    max_splits: int | None = None

    def __post_init__(self) -> None:
        ensure_char(self.escape, "escape char")
        if self.delimiters.contains_escape(self.escape):
            raise EscapeIsDelimiterError(self.escape)
        if self.mode not in _MODES:
            raise ConfigurationError(f"dialect {self.name!r}: mode must be one of {_MODES}")
        if self.max_splits is not None:
            _check_max_splits(self.max_splits)

    @classmethod
    def from_mapping(cls, name: str, raw: dict[str, Any]) -> SplitDialect:
        try:
            escape = raw["escape"]
            delimiters = raw["delimiters"]
        except KeyError as e:
            raise ConfigurationError(f"dialect {name!r} is missing {e.args[0]!r}") from e
        return cls(
            name=name,
            escape=escape,
            delimiters=DelimiterSet(delimiters),
            mode=raw.get("mode", "raw"),
            max_splits=raw.get("max_splits"),
        )

    def split(self, input: TextLike) -> Iterator[str]:
        """Does: Split `input` with this dialect's configuration (lazy, single use)."""
        return _segments(
            ensure_text(input),
            self.escape,
            self.delimiters,
            sanitize=self.mode == "sanitized",
            max_splits=self.max_splits,
        )


def _validate(data: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, SplitDialect] = {}
    for name, raw in data.items():
        if not isinstance(raw, dict):
            raise TypeError(f"dialect {name!r} must be an object, got {type(raw).__name__}")
        out[name] = SplitDialect.from_mapping(name, raw)
    return out


def load_dialects(*, base_dir: Path | None = None) -> dict[str, SplitDialect]:
    """
    Does: Read and validate every dialect in `<data>/dialects.json`.
    Returns: Mapping name -> SplitDialect, shared until dialects.json changes.
    """
    dialects = load_config(
        DIALECTS_FILE,
        mode="validated_dict",
        base_dir=base_dir,
        validator=_validate,
        allow_comments=True,
    )
    log.debug("Loaded %d split dialects: %s", len(dialects), sorted(dialects))
    return dialects


def get_dialect(name: str, *, base_dir: Path | None = None) -> SplitDialect:
    dialects = load_dialects(base_dir=base_dir)
    try:
        return dialects[name]
    except KeyError:
        raise UnknownDialectError(name, suggest(name, dialects)) from None


def split_with_dialect(input: TextLike, name: str, *, base_dir: Path | None = None) -> Iterator[str]:
    return get_dialect(name, base_dir=base_dir).split(input)
