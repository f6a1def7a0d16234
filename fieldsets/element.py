"""Path elements: how to select a child of a containing object."""

from __future__ import annotations

import enum
import heapq
from bisect import bisect_left
from dataclasses import dataclass
from typing import Any, Iterable, Iterator

from fieldsets.value import (
    Field,
    FieldList,
    compare_values,
    value_to_string,
    values_equal,
)


class Kind(enum.IntEnum):
    """The kind of a path element, in sort order."""

    FIELD = 0
    KEY = 1
    VALUE = 2
    INDEX = 3
    INVALID = 4


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


@dataclass(frozen=True, eq=False)
class PathElement:
    """Selects a map field, a keyed list item, a set value or a list index."""

    kind: Kind = Kind.INVALID
    payload: Any = None

    @classmethod
    def field(cls, name: str) -> PathElement:
        return cls(Kind.FIELD, name)

    @classmethod
    def key(cls, fields: FieldList) -> PathElement:
        return cls(Kind.KEY, FieldList(fields).sorted())

    @classmethod
    def value(cls, v: Any) -> PathElement:
        return cls(Kind.VALUE, v)

    @classmethod
    def index(cls, i: int) -> PathElement:
        return cls(Kind.INDEX, i)

    @property
    def field_name(self) -> str | None:
        return self.payload if self.kind is Kind.FIELD else None

    @property
    def key_fields(self) -> FieldList | None:
        return self.payload if self.kind is Kind.KEY else None

    @property
    def element_value(self) -> Any:
        return self.payload if self.kind is Kind.VALUE else None

    @property
    def list_index(self) -> int | None:
        return self.payload if self.kind is Kind.INDEX else None

    def compare(self, other: PathElement) -> int:
        if self.kind != other.kind:
            return _cmp(self.kind, other.kind)
        if self.kind is Kind.KEY:
            return self.payload.compare(other.payload)
        if self.kind is Kind.VALUE:
            return compare_values(self.payload, other.payload)
        if self.kind is Kind.INVALID:
            return 0
        return _cmp(self.payload, other.payload)

    def equals(self, other: PathElement) -> bool:
        if self.kind != other.kind:
            return False
        if self.kind is Kind.KEY:
            return self.payload.equals(other.payload)
        if self.kind is Kind.VALUE:
            return values_equal(self.payload, other.payload)
        if self.kind is Kind.INVALID:
            return True
        return self.payload == other.payload

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathElement):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other: PathElement) -> bool:
        return self.compare(other) < 0

    def __hash__(self) -> int:
        return hash((self.kind, str(self)))

    def __str__(self) -> str:
        if self.kind is Kind.FIELD:
            return "." + self.payload
        if self.kind is Kind.KEY:
            return "[" + ",".join(
                f"{f.name}={value_to_string(f.value)}" for f in self.payload
            ) + "]"
        if self.kind is Kind.VALUE:
            return f"[={value_to_string(self.payload)}]"
        if self.kind is Kind.INDEX:
            return f"[{self.payload}]"
        return "{{invalid path element}}"


def key_by_fields(*args: Any) -> FieldList:
    """Build a sorted key from alternating names and values."""
    if len(args) % 2:
        raise ValueError("must have a value for every name")
    names, values = args[0::2], args[1::2]
    for name in names:
        if not isinstance(name, str):
            raise TypeError(f"key name must be a string, got {name!r}")
    return FieldList(Field(n, v) for n, v in zip(names, values)).sorted()


class PathElementSet:
    """A sorted set of path elements."""

    def __init__(self, elements: Iterable[PathElement] = ()):
        self._members: list[PathElement] = []
        for pe in elements:
            self.insert(pe)

    @classmethod
    def _from_sorted(cls, members: Iterable[PathElement]) -> PathElementSet:
        out = cls()
        out._members = list(members)
        return out

    def insert(self, pe: PathElement) -> None:
        loc = bisect_left(self._members, pe)
        if loc < len(self._members) and self._members[loc].equals(pe):
            return
        self._members.insert(loc, pe)

    def union(self, other: PathElementSet) -> PathElementSet:
        merged: list[PathElement] = []
        for pe in heapq.merge(self._members, other._members):
            if not merged or not merged[-1].equals(pe):
                merged.append(pe)
        return self._from_sorted(merged)

    def intersection(self, other: PathElementSet) -> PathElementSet:
        return self._from_sorted(pe for pe in self._members if other.has(pe))

    def difference(self, other: PathElementSet) -> PathElementSet:
        return self._from_sorted(pe for pe in self._members if not other.has(pe))

    def has(self, pe: PathElement) -> bool:
        loc = bisect_left(self._members, pe)
        return loc < len(self._members) and self._members[loc].equals(pe)

    def equals(self, other: PathElementSet) -> bool:
        return len(self._members) == len(other._members) and all(
            a.equals(b) for a, b in zip(self._members, other._members)
        )

    __contains__ = has

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathElementSet):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[PathElement]:
        return iter(self._members)

    def __repr__(self) -> str:
        return f"PathElementSet({self._members!r})"