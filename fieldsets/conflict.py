"""Conflicts between a change and the managers that own the changed fields."""

from __future__ import annotations

import json
from typing import Iterable, Iterator, Mapping

from fieldsets.managers import VersionedSet
from fieldsets.path import Path
from fieldsets.set import Set


def _quote(s: str) -> str:
    return json.dumps(s, ensure_ascii=False)


class Conflict(Exception):
    """A conflict on one field with the manager that currently owns it."""

    def __init__(self, manager: str, path: Path) -> None:
        self.manager = manager
        self.path = Path(path)
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"conflict with {_quote(self.manager)}: {self.path}"

    def __repr__(self) -> str:
        return f"Conflict(manager={self.manager!r}, path={str(self.path)!r})"

    def equals(self, other: Conflict) -> bool:
        """Return True if both name the same manager and path."""
        return self.manager == other.manager and self.path.equals(other.path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Conflict):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.manager, str(self.path)))


class Conflicts(Exception):
    """Several conflicts, reported grouped by manager."""

    def __init__(self, conflicts: Iterable[Conflict] = ()) -> None:
        self.conflicts: tuple[Conflict, ...] = tuple(conflicts)
        super().__init__(str(self))

    def __str__(self) -> str:
        if len(self.conflicts) == 1:
            return str(self.conflicts[0])
        by_manager: dict[str, list[Path]] = {}
        for c in self.conflicts:
            by_manager.setdefault(c.manager, []).append(c.path)
        messages = []
        for manager in sorted(by_manager):
            messages.append(f"conflicts with {_quote(manager)}:")
            messages.extend(f"- {p}" for p in by_manager[manager])
        return "\n".join(messages)

    def __repr__(self) -> str:
        return f"Conflicts({list(self.conflicts)!r})"

    def __iter__(self) -> Iterator[Conflict]:
        return iter(self.conflicts)

    def __len__(self) -> int:
        return len(self.conflicts)

    def __getitem__(self, i: int) -> Conflict:
        return self.conflicts[i]

    def equals(self, other: Conflicts) -> bool:
        """Return True if both hold equal conflicts in the same order."""
        return len(self) == len(other) and all(
            a.equals(b) for a, b in zip(self.conflicts, other.conflicts)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Conflicts):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def to_set(self) -> Set:
        """Gather the paths of all conflicts into one set."""
        return Set(c.path for c in self.conflicts)


def conflicts_from_managers(sets: Mapping[str, VersionedSet]) -> Conflicts:
    """Make one conflict for every path owned by every manager."""
    return Conflicts(
        Conflict(manager, path) for manager, vs in sets.items() for path in vs.set
    )