"""Ownership of field sets by managers, each at an API version."""

from __future__ import annotations

from dataclasses import dataclass

from fieldsets.set import Set

APIVersion = str


@dataclass(frozen=True)
class VersionedSet:
    """A field set owned at an API version, and whether it came from an apply."""

    set: Set
    api_version: APIVersion
    applied: bool = False


class ManagedFields(dict):
    """Maps a manager name to the VersionedSet it owns."""

    def equals(self, other: ManagedFields) -> bool:
        """Return True if both have the same managers, versions, flags and sets."""
        if len(self) != len(other):
            return False
        for manager, left in self.items():
            right = other.get(manager)
            if right is None:
                return False
            if left.api_version != right.api_version or left.applied != right.applied:
                return False
            if not left.set.equals(right.set):
                return False
        return True

    def copy(self) -> ManagedFields:
        """Return a shallow copy."""
        return ManagedFields(self)

    def difference(self, other: ManagedFields) -> ManagedFields:
        """Return the symmetric difference, per manager.

        When a manager's versions differ, its entry from other is kept whole.
        Managers whose difference is empty are left out.
        """
        diff = ManagedFields()
        for manager, left in self.items():
            right = other.get(manager)
            if right is None:
                if not left.set.empty():
                    diff[manager] = left
                continue
            if left.api_version != right.api_version:
                diff[manager] = right
                continue
            new_set = left.set.difference(right.set).union(right.set.difference(left.set))
            if not new_set.empty():
                diff[manager] = VersionedSet(new_set, right.api_version, False)
        for manager, vs in other.items():
            if manager in self:
                continue
            if not vs.set.empty():
                diff[manager] = vs
        return diff

    def __str__(self) -> str:
        lines = []
        for manager, vs in self.items():
            lines.append(f"{manager}:\n")
            lines.append(f"- Applied: {'true' if vs.applied else 'false'}\n")
            lines.append(f"- APIVersion: {vs.api_version}\n")
            lines.append(f"- Set: {vs.set}\n")
        return "".join(lines)