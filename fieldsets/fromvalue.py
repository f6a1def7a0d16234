"""Build a field set from a plain data value, guessing list keys."""

from __future__ import annotations

from typing import Any

from fieldsets.element import PathElement
from fieldsets.path import Path
from fieldsets.set import Set
from fieldsets.value import Field, FieldList

ASSOCIATIVE_LIST_CANDIDATE_FIELD_NAMES = ("key", "id", "name")


def set_from_value(v: Any) -> Set:
    """Return a set holding every leaf field mentioned in v."""
    s = Set()
    _walk(Path(), v, s)
    return s


def _walk(path: Path, v: Any, out: Set) -> None:
    if isinstance(v, (list, tuple)):
        for i, item in enumerate(v):
            _walk(path + (guess_best_list_path_element(i, item),), item, out)
        return
    if isinstance(v, dict):
        for k, item in v.items():
            _walk(path + (PathElement.field(k),), item, out)
        return
    if v is not None and not isinstance(v, (bool, int, float, str)):
        raise TypeError(f"unsupported value type: {type(v).__name__}")
    if path:
        out.insert(path)


def guess_best_list_path_element(index: int, item: Any) -> PathElement:
    """Reference a list item by its scalar key fields if it has any, else by index."""
    if not isinstance(item, dict):
        return PathElement.index(index)
    keys = [
        Field(name, item[name])
        for name in ASSOCIATIVE_LIST_CANDIDATE_FIELD_NAMES
        if name in item
        and item[name] is not None
        and not isinstance(item[name], (dict, list, tuple))
    ]
    if keys:
        return PathElement.key(FieldList(keys))
    return PathElement.index(index)