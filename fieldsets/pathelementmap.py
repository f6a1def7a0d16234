"""A sorted map keyed by path elements."""

from __future__ import annotations

from bisect import bisect_left
from typing import Any, Iterator

from fieldsets.element import PathElement


def _entry_key(entry: tuple[PathElement, Any]) -> PathElement:
    return entry[0]


class PathElementMap:
    """Maps PathElement to arbitrary values, kept in path element order."""

    def __init__(self) -> None:
        self._entries: list[tuple[PathElement, Any]] = []

    def _locate(self, pe: PathElement) -> tuple[int, bool]:
        loc = bisect_left(self._entries, pe, key=_entry_key)
        found = loc < len(self._entries) and self._entries[loc][0].equals(pe)
        return loc, found

    def insert(self, pe: PathElement, v: Any) -> None:
        """Associate v with pe, replacing any value already there."""
        loc, found = self._locate(pe)
        if found:
            self._entries[loc] = (self._entries[loc][0], v)
        else:
            self._entries.insert(loc, (pe, v))

    def get(self, pe: PathElement, default: Any = None) -> Any:
        """Return the value for pe, or default when there is none."""
        loc, found = self._locate(pe)
        return self._entries[loc][1] if found else default

    def __setitem__(self, pe: PathElement, v: Any) -> None:
        self.insert(pe, v)

    def __getitem__(self, pe: PathElement) -> Any:
        loc, found = self._locate(pe)
        if not found:
            raise KeyError(pe)
        return self._entries[loc][1]

    def __contains__(self, pe: object) -> bool:
        if not isinstance(pe, PathElement):
            return False
        return self._locate(pe)[1]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PathElement]:
        return (pe for pe, _ in self._entries)

    def items(self) -> Iterator[tuple[PathElement, Any]]:
        return iter(list(self._entries))

    def __repr__(self) -> str:
        return f"PathElementMap({self._entries!r})"