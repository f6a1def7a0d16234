"""Plain data values used inside path elements, with a total order."""

from __future__ import annotations

import json
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Iterable

_NUMBER, _STRING, _BOOL, _LIST, _MAP, _NULL = range(6)


def _rank(v: Any) -> int:
    if v is None:
        return _NULL
    if isinstance(v, bool):
        return _BOOL
    if isinstance(v, (int, float)):
        return _NUMBER
    if isinstance(v, str):
        return _STRING
    if isinstance(v, (list, tuple)):
        return _LIST
    if isinstance(v, dict):
        return _MAP
    raise TypeError(f"unsupported value type: {type(v).__name__}")


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def compare_values(a: Any, b: Any) -> int:
    """Return -1, 0 or 1 ordering two values: numbers, strings, bools, lists, maps, null."""
    ra, rb = _rank(a), _rank(b)
    if ra != rb:
        return _cmp(ra, rb)
    if ra == _NULL:
        return 0
    if ra in (_NUMBER, _STRING, _BOOL):
        return _cmp(a, b)
    if ra == _LIST:
        for x, y in zip(a, b):
            c = compare_values(x, y)
            if c:
                return c
        return _cmp(len(a), len(b))
    left = sorted(a.items())
    right = sorted(b.items())
    for (ka, va), (kb, vb) in zip(left, right):
        c = _cmp(ka, kb) or compare_values(va, vb)
        if c:
            return c
    return _cmp(len(left), len(right))


def values_equal(a: Any, b: Any) -> bool:
    """Return True if two values are equal under compare_values."""
    return compare_values(a, b) == 0


def _float_to_string(f: float) -> str:
    if f.is_integer() and abs(f) < 1e21:
        return str(int(f))
    return repr(f)


def value_to_string(v: Any) -> str:
    """Render a value in human-readable form; strings are quoted."""
    if v is None:
        return "null"
    if isinstance(v, bool):
        return "true" if v else "false"
    if isinstance(v, int):
        return str(v)
    if isinstance(v, float):
        return _float_to_string(v)
    if isinstance(v, str):
        return json.dumps(v, ensure_ascii=False)
    if isinstance(v, (list, tuple)):
        return "[" + ",".join(value_to_string(x) for x in v) + "]"
    if isinstance(v, dict):
        return "{" + ",".join(f"{k}={value_to_string(x)}" for k, x in v.items()) + "}"
    raise TypeError(f"unsupported value type: {type(v).__name__}")


@dataclass(frozen=True)
class Field:
    """A named value, one component of an associative-list key."""

    name: str
    value: Any


class FieldList(tuple):
    """An ordered tuple of Field objects."""

    def __new__(cls, fields: Iterable[Field] = ()):
        return super().__new__(cls, tuple(fields))

    def compare(self, other: FieldList) -> int:
        for a, b in zip(self, other):
            c = _cmp(a.name, b.name) or compare_values(a.value, b.value)
            if c:
                return c
        return _cmp(len(self), len(other))

    def equals(self, other: FieldList) -> bool:
        return len(self) == len(other) and all(
            a.name == b.name and values_equal(a.value, b.value)
            for a, b in zip(self, other)
        )

    def sorted(self) -> FieldList:
        return FieldList(sorted(self, key=lambda f: f.name))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldList):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __hash__(self) -> int:
        return hash(tuple((f.name, value_to_string(f.value)) for f in self))


value_sort_key = cmp_to_key(compare_values)