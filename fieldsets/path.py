"""Paths: sequences of path elements selecting nested fields."""

from __future__ import annotations

from typing import Any, Iterable

from fieldsets.element import PathElement
from fieldsets.value import FieldList


class Path(tuple):
    """An immutable sequence of PathElement."""

    def __new__(cls, elements: Iterable[PathElement] = ()):
        return super().__new__(cls, tuple(elements))

    def __str__(self) -> str:
        return "".join(str(pe) for pe in self)

    def __add__(self, other: Iterable[PathElement]) -> Path:
        return Path(tuple.__add__(self, tuple(other)))

    def equals(self, other: Path) -> bool:
        return len(self) == len(other) and all(a.equals(b) for a, b in zip(self, other))

    def compare(self, other: Path) -> int:
        for a, b in zip(self, other):
            c = a.compare(b)
            if c:
                return c
        return (len(self) > len(other)) - (len(self) < len(other))


def make_path(*args: Any) -> Path:
    """Build a Path from PathElements, ints (indices), strings (fields) and FieldLists (keys)."""
    elements = []
    for part in args:
        if isinstance(part, PathElement):
            elements.append(part)
        elif isinstance(part, bool):
            raise TypeError(f"unable to make {part!r} into a path element")
        elif isinstance(part, int):
            elements.append(PathElement.index(part))
        elif isinstance(part, str):
            elements.append(PathElement.field(part))
        elif isinstance(part, FieldList):
            if not part:
                raise ValueError(
                    "associative list key type path elements must have at least one key (got zero)"
                )
            elements.append(PathElement.key(part))
        else:
            raise TypeError(f"unable to make {part!r} into a path element")
    return Path(elements)