"""Text encoding of single path elements: f:, k:, v: and i: prefixes."""

from __future__ import annotations

import json
import re
from typing import Any

from fieldsets.element import Kind, PathElement
from fieldsets.value import Field, FieldList

_INDEX_RE = re.compile(r"[+-]?[0-9]+")


class UnknownPathElementTypeError(ValueError):
    """The element's type prefix is not one that is understood."""

    def __init__(self, message: str = "unknown path element type"):
        super().__init__(message)


def _dump(v: Any) -> str:
    return json.dumps(v, separators=(",", ":"), sort_keys=True, ensure_ascii=False)


def serialize_path_element(pe: PathElement) -> str:
    """Encode a path element as a string."""
    if pe.kind is Kind.FIELD:
        return "f:" + pe.payload
    if pe.kind is Kind.KEY:
        body = ",".join(f"{_dump(f.name)}:{_dump(f.value)}" for f in pe.payload)
        return "k:{" + body + "}"
    if pe.kind is Kind.VALUE:
        return "v:" + _dump(pe.payload)
    if pe.kind is Kind.INDEX:
        return f"i:{pe.payload}"
    raise ValueError("invalid PathElement")


def deserialize_path_element(s: str) -> PathElement:
    """Decode a string produced by serialize_path_element."""
    if len(s) < 2:
        raise ValueError("key must be 2 characters long")
    if s[1] != ":":
        raise ValueError(f"missing colon: {s}")
    kind, body = s[0], s[2:]
    if kind == "f":
        return PathElement.field(body)
    if kind == "v":
        return PathElement.value(json.loads(body))
    if kind == "k":
        pairs = json.loads(body, object_pairs_hook=lambda items: items)
        if not isinstance(pairs, list):
            raise ValueError(f"key must be a JSON object: {s}")
        return PathElement.key(FieldList(Field(k, _unpair(v)) for k, v in pairs))
    if kind == "i":
        if not _INDEX_RE.fullmatch(body):
            raise ValueError(f"invalid index: {body!r}")
        return PathElement.index(int(body))
    raise UnknownPathElementTypeError()


def _unpair(v: Any) -> Any:
    """Turn the pair lists made by object_pairs_hook back into dicts."""
    if isinstance(v, list):
        if v and all(isinstance(x, tuple) for x in v):
            return {k: _unpair(x) for k, x in v}
        return [_unpair(x) for x in v]
    if isinstance(v, tuple):
        return {v[0]: _unpair(v[1])}
    return v