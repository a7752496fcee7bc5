# src/strtools/util/suggest.py
"""
suggest.

Does: Pick the closest known name for an unknown one, for "did you mean"
      hints in configuration errors.
Returns: suggest() -> best choice or None below the score cutoff.
Used by: numeral kind lookup (parse/kinds.py) and split dialect lookup.
"""

from __future__ import annotations

from collections.abc import Iterable

from rapidfuzz import fuzz, process

__all__ = ["suggest"]

SUGGEST_THRESHOLD = 60


def suggest(name: str, choices: Iterable[str], *, cutoff: int = SUGGEST_THRESHOLD) -> str | None:
    match = process.extractOne(
        (name or "").lower().strip(),
        list(choices),
        scorer=fuzz.ratio,
        score_cutoff=cutoff,
    )
    return match[0] if match else None
