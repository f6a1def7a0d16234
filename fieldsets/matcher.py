"""Patterns, with wildcards, that select field paths from a set."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from fieldsets.element import PathElement
from fieldsets.value import FieldList


@dataclass(frozen=True)
class PathElementMatcher:
    """Matches one path element, or any when wildcard is set."""

    wildcard: bool = False
    path_element: PathElement = field(default_factory=PathElement)

    def compare(self, other: PathElementMatcher) -> int:
        """Order matchers: wildcards first, then by path element."""
        if self.wildcard and not other.wildcard:
            return -1
        if other.wildcard:
            return 1
        return self.path_element.compare(other.path_element)

    def matches(self, pe: PathElement) -> bool:
        """Return True if pe is matched by this matcher."""
        return self.wildcard or self.path_element.equals(pe)


@dataclass(frozen=True)
class SetMemberMatcher:
    """Matches members of a set; children of matched members go to child."""

    path: PathElementMatcher
    child: SetMatcher


def _member_sort_key(m: SetMemberMatcher) -> tuple[int, Any]:
    if m.path.wildcard:
        return (0, None)
    return (1, m.path.path_element)


@dataclass(frozen=True)
class SetMatcher:
    """Matches fields of a Set, structured like a Set with wildcard support.

    When wildcard is set, members are ignored and everything matches.
    """

    wildcard: bool = False
    members: tuple[SetMemberMatcher, ...] = ()

    def merge(self, other: SetMatcher) -> SetMatcher:
        """Return a matcher matching everything either matcher matches."""
        if self.wildcard or other.wildcard:
            return new_set_matcher(True)
        merged = list(self.members)
        for m in other.members:
            found = next(
                (i for i, mine in enumerate(self.members) if mine.path.compare(m.path) == 0),
                None,
            )
            if found is None:
                merged.append(m)
            else:
                merged[found] = SetMemberMatcher(
                    path=merged[found].path,
                    child=merged[found].child.merge(m.child),
                )
        return new_set_matcher(False, *merged)


def new_set_matcher(wildcard: bool, *args: SetMemberMatcher) -> SetMatcher:
    """Build a SetMatcher with its members sorted, wildcard members first."""
    return SetMatcher(wildcard=wildcard, members=tuple(sorted(args, key=_member_sort_key)))


def match_any_path_element() -> PathElementMatcher:
    """Return a matcher that matches any path element."""
    return PathElementMatcher(wildcard=True)


def match_any_set() -> SetMatcher:
    """Return a matcher that matches any set."""
    return SetMatcher(wildcard=True)


def _to_element_matcher(part: Any) -> PathElementMatcher:
    if isinstance(part, PathElementMatcher):
        return part
    if isinstance(part, PathElement):
        return PathElementMatcher(path_element=part)
    if isinstance(part, FieldList):
        if not part:
            raise ValueError(
                "associative list key type path elements must have at least one key (got zero)"
            )
        return PathElementMatcher(path_element=PathElement.key(part))
    if isinstance(part, str):
        return PathElementMatcher(path_element=PathElement.field(part))
    if isinstance(part, int) and not isinstance(part, bool):
        return PathElementMatcher(path_element=PathElement.index(part))
    raise TypeError(f"unexpected type {type(part).__name__}")


def prefix_matcher(*args: Any) -> SetMatcher:
    """Build a matcher for every path that starts with the given parts.

    Parts may be PathElementMatchers (e.g. match_any_path_element()),
    PathElements, FieldLists (list keys), strings (field names) or ints
    (list indices).
    """
    current = match_any_set()
    for part in reversed(args):
        current = SetMatcher(
            members=(SetMemberMatcher(path=_to_element_matcher(part), child=current),)
        )
    return current