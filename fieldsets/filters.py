"""Filters that remove field paths from a set."""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Hashable, Mapping, Protocol

from fieldsets.matcher import SetMatcher, match_any_set
from fieldsets.set import Set


class Filter(Protocol):
    def filter(self, s: Set) -> Set: ...


@dataclass(frozen=True)
class ExcludeSetFilter:
    """Removes the paths of an exclude set and everything below them."""

    exclude: Set

    def filter(self, s: Set) -> Set:
        return s.recursive_difference(self.exclude)


@dataclass(frozen=True)
class IncludeMatcherFilter:
    """Keeps only the paths that a matcher matches."""

    matcher: SetMatcher

    def filter(self, s: Set) -> Set:
        return s.filter_include_matches(self.matcher)


def include_matcher_filter(*args: SetMatcher) -> IncludeMatcherFilter:
    """Build a filter keeping paths matched by any matcher; no matchers keeps all."""
    if not args:
        return IncludeMatcherFilter(match_any_set())
    return IncludeMatcherFilter(reduce(lambda a, b: a.merge(b), args))


def exclude_filter_map(reset_fields: Mapping[Hashable, Set]) -> dict[Hashable, ExcludeSetFilter]:
    """Turn a mapping of version to exclude set into a mapping of version to filter."""
    return {version: ExcludeSetFilter(s) for version, s in reset_fields.items()}