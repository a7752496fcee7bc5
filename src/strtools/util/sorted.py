# src/strtools/util/sorted.py
"""
sorted.

Does: Provide `Sorted`, an immutable sequence whose ascending order is checked
      (or established) once at construction, so lookups can binary search.
Returns: Sorted container with read-only access and bisect-based membership.
Used by: DelimiterSet (split) and escape_charset (escape).
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar, overload

from strtools.errors import NotSortedError

__all__ = ["Sorted"]

T = TypeVar("T")


def _is_sorted(items: Sequence[Any]) -> bool:
    return all(items[i] <= items[i + 1] for i in range(len(items) - 1))


class Sorted(Sequence[T], Generic[T]):
    """
    Does: Hold items in ascending order; construct through `new`, `new_sorted`
          or `new_unique` rather than calling the class directly.
    """

    __slots__ = ("_items",)

    def __init__(self, items: tuple[T, ...]):
        self._items = items

    # ── Smart constructors ───────────────────────────────────────────────────
    @classmethod
    def new(cls, items: Iterable[T]) -> Sorted[T]:
        """Wrap `items` as-is; raise NotSortedError if they are not ascending."""
        frozen = tuple(items)
        if not _is_sorted(frozen):
            raise NotSortedError("the sequence was not sorted")
        return cls(frozen)

    @classmethod
    def new_sorted(cls, items: Iterable[T]) -> Sorted[T]:
        return cls(tuple(sorted(items)))  # type: ignore[type-var]

    @classmethod
    def new_unique(cls, items: Iterable[T]) -> Sorted[T]:
        """Sort and drop duplicates."""
        return cls(tuple(sorted(set(items))))  # type: ignore[type-var]

    # ── Read-only access ─────────────────────────────────────────────────────
    def index_of(self, item: T) -> int:
        """Return the position of `item` (binary search), or -1 if absent."""
        i = bisect_left(self._items, item)  # type: ignore[type-var]
        if i < len(self._items) and self._items[i] == item:
            return i
        return -1

    def __contains__(self, item: object) -> bool:
        try:
            return self.index_of(item) >= 0  # type: ignore[arg-type]
        except TypeError:
            # incomparable types are never members
            return False

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Sorted):
            return self._items == other._items
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"Sorted({list(self._items)!r})"

    def as_tuple(self) -> tuple[T, ...]:
        return self._items
