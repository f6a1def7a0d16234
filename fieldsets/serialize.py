"""JSON encoding of whole field sets, one object level per path element."""

from __future__ import annotations

import heapq
import json
from itertools import groupby
from typing import IO, Any, Iterator, Union

from fieldsets.element import PathElement
from fieldsets.serialize_pe import (
    UnknownPathElementTypeError,
    deserialize_path_element,
    serialize_path_element,
)
from fieldsets.set import Set

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _quote(s: str) -> str:
    out = json.dumps(s, ensure_ascii=False)
    for ch, rep in _HTML_ESCAPES.items():
        out = out.replace(ch, rep)
    return out


def _entries(s: Set) -> Iterator[tuple[PathElement, bool, Set | None]]:
    """Yield (element, is member, child set) in element order."""
    tagged = heapq.merge(
        ((pe, None) for pe in s.members),
        ((pe, sub) for pe, sub in s.children.items()),
        key=lambda t: t[0],
    )
    for pe, group in groupby(tagged, key=lambda t: t[0]):
        subs = [sub for _, sub in group]
        is_member = any(sub is None for sub in subs)
        child = next((sub for sub in subs if sub is not None), None)
        yield pe, is_member, child


def _emit(s: Set, include_self: bool) -> str:
    parts = []
    if include_self and not (len(s.members) == 0 and len(s.children) == 0):
        parts.append('".":{}')
    for pe, is_member, child in _entries(s):
        key = _quote(serialize_path_element(pe))
        if child is None:
            parts.append(key + ":{}")
        else:
            parts.append(key + ":{" + _emit(child, is_member) + "}")
    return ",".join(parts)


def set_to_json(s: Set) -> str:
    """Encode a set as a JSON document."""
    return "{" + _emit(s, False) + "}"


class _Object(list):
    """The key/value pairs of a JSON object, in document order."""


def _read(obj: Any) -> tuple[Set | None, bool]:
    """Return the child set (or None) and whether this node is itself a member."""
    if not isinstance(obj, _Object):
        raise ValueError(f"expected a JSON object, got {obj!r}")
    children: Set | None = None
    is_member = False
    for key, val in obj:
        if key == ".":
            is_member = True
            continue
        try:
            pe = deserialize_path_element(key)
        except UnknownPathElementTypeError:
            # Dropped: a later format may know what these are.
            continue
        except ValueError as exc:
            raise ValueError(f"parsing key as path element: {exc}") from exc
        grandchildren, child_is_member = _read(val)
        if child_is_member:
            if children is None:
                children = Set()
            children.members.insert(pe)
        if grandchildren is not None:
            if children is None:
                children = Set()
            node = children.children.descend(pe)
            node.members = grandchildren.members
            node.children = grandchildren.children
    if children is None:
        is_member = True
    return children, is_member


def set_from_json(data: Union[str, bytes, IO[Any]]) -> Set:
    """Decode a set from a JSON document given as text, bytes or a readable file."""
    if hasattr(data, "read"):
        data = data.read()
    if isinstance(data, (bytes, bytearray)):
        data = data.decode("utf-8")
    doc = json.loads(data, object_pairs_hook=_Object)
    found, _ = _read(doc)
    return found if found is not None else Set()