"""Sets of field paths, stored as a tree of path elements."""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterable, Iterator

from fieldsets.element import PathElement, PathElementSet
from fieldsets.matcher import SetMatcher
from fieldsets.path import Path

_Node = tuple[PathElement, "Set"]


def _node_key(node: _Node) -> PathElement:
    return node[0]


def _align(
    left: Iterable[_Node], right: Iterable[_Node]
) -> Iterator[tuple[PathElement, Set | None, Set | None]]:
    """Walk two sorted node sequences together, pairing equal path elements."""
    li, ri = iter(left), iter(right)
    a, b = next(li, None), next(ri, None)
    while a is not None or b is not None:
        if b is None or (a is not None and a[0] < b[0]):
            yield a[0], a[1], None
            a = next(li, None)
        elif a is None or b[0] < a[0]:
            yield b[0], None, b[1]
            b = next(ri, None)
        else:
            yield a[0], a[1], b[1]
            a, b = next(li, None), next(ri, None)


class SetNodeMap:
    """Maps path elements to subsets, kept in path element order."""

    def __init__(self) -> None:
        self._nodes: list[_Node] = []

    @classmethod
    def _from_sorted(cls, nodes: Iterable[_Node]) -> SetNodeMap:
        out = cls()
        out._nodes = list(nodes)
        return out

    def _locate(self, pe: PathElement) -> tuple[int, bool]:
        loc = bisect_left(self._nodes, pe, key=_node_key)
        return loc, loc < len(self._nodes) and self._nodes[loc][0].equals(pe)

    def descend(self, pe: PathElement) -> Set:
        """Return the subset for pe, adding an empty one if there is none."""
        loc, found = self._locate(pe)
        if found:
            return self._nodes[loc][1]
        subset = Set()
        self._nodes.insert(loc, (pe, subset))
        return subset

    def get(self, pe: PathElement) -> Set | None:
        """Return the subset for pe, or None."""
        loc, found = self._locate(pe)
        return self._nodes[loc][1] if found else None

    def size(self) -> int:
        """Return the total number of members of all subsets."""
        return sum(subset.size() for _, subset in self._nodes)

    def empty(self) -> bool:
        """Return True if no subset has any member."""
        return all(subset.empty() for _, subset in self._nodes)

    def equals(self, other: SetNodeMap) -> bool:
        """Return True if both maps have the same structure."""
        return len(self._nodes) == len(other._nodes) and all(
            pa.equals(pb) and sa.equals(sb)
            for (pa, sa), (pb, sb) in zip(self._nodes, other._nodes)
        )

    def union(self, other: SetNodeMap) -> SetNodeMap:
        """Return the nodes appearing in either map, merging shared subsets."""
        nodes = []
        for pe, left, right in _align(self._nodes, other._nodes):
            if left is not None and right is not None:
                nodes.append((pe, left.union(right)))
            else:
                nodes.append((pe, left if left is not None else right))
        return self._from_sorted(nodes)

    def intersection(self, other: SetNodeMap) -> SetNodeMap:
        """Return the non-empty intersections of subsets present in both."""
        nodes = []
        for pe, left, right in _align(self._nodes, other._nodes):
            if left is None or right is None:
                continue
            res = left.intersection(right)
            if not res.empty():
                nodes.append((pe, res))
        return self._from_sorted(nodes)

    def difference(self, other: Set) -> SetNodeMap:
        """Return the subsets minus the matching children of other."""
        nodes = []
        for pe, left, right in _align(self._nodes, other.children._nodes):
            if left is None:
                continue
            if right is None:
                nodes.append((pe, left))
                continue
            diff = left.difference(right)
            if not diff.empty():
                nodes.append((pe, diff))
        return self._from_sorted(nodes)

    def recursive_difference(self, other: Set) -> SetNodeMap:
        """Like difference, but drops whole subtrees whose element is a member of other."""
        nodes = []
        for pe, left, right in _align(self._nodes, other.children._nodes):
            if left is None or other.members.has(pe):
                continue
            if right is None:
                nodes.append((pe, left))
                continue
            diff = left.recursive_difference(right)
            if not diff.empty():
                nodes.append((pe, diff))
        return self._from_sorted(nodes)

    def filter_include_matches(self, pattern: SetMatcher) -> SetNodeMap:
        """Keep only the subtrees that the pattern matches."""
        if pattern.wildcard:
            return self
        nodes = []
        for pe, subset in self._nodes:
            matcher = next((m for m in pattern.members if m.path.matches(pe)), None)
            if matcher is None:
                continue
            child = subset.filter_include_matches(matcher.child)
            if child.size() > 0:
                nodes.append((pe, child))
        return self._from_sorted(nodes)

    def leaves(self) -> SetNodeMap:
        """Return the same nodes with each subset reduced to its leaves."""
        return self._from_sorted((pe, subset.leaves()) for pe, subset in self._nodes)

    def items(self) -> Iterator[_Node]:
        return iter(list(self._nodes))

    def __iter__(self) -> Iterator[PathElement]:
        return (pe for pe, _ in self._nodes)

    def __contains__(self, pe: object) -> bool:
        return isinstance(pe, PathElement) and self._locate(pe)[1]

    def __len__(self) -> int:
        return len(self._nodes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SetNodeMap):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SetNodeMap({self._nodes!r})"


class Set:
    """A set of field paths.

    Parents of inserted paths are not members unless inserted themselves.
    """

    def __init__(self, paths: Iterable[Path] = ()) -> None:
        self.members = PathElementSet()
        self.children = SetNodeMap()
        for p in paths:
            self.insert(p)

    @classmethod
    def _of(cls, members: PathElementSet, children: SetNodeMap) -> Set:
        out = cls()
        out.members = members
        out.children = children
        return out

    def insert(self, path: Iterable[PathElement]) -> None:
        """Add a path; the empty path is ignored."""
        path = tuple(path)
        if not path:
            return
        node = self
        for pe in path[:-1]:
            node = node.children.descend(pe)
        node.members.insert(path[-1])

    def union(self, other: Set) -> Set:
        return Set._of(self.members.union(other.members), self.children.union(other.children))

    def intersection(self, other: Set) -> Set:
        return Set._of(
            self.members.intersection(other.members),
            self.children.intersection(other.children),
        )

    def difference(self, other: Set) -> Set:
        """Remove paths of other; a parent minus its child stays, a child minus its parent stays."""
        return Set._of(self.members.difference(other.members), self.children.difference(other))

    def recursive_difference(self, other: Set) -> Set:
        """Remove every path of other together with everything below it."""
        return Set._of(
            self.members.difference(other.members),
            self.children.recursive_difference(other),
        )

    def filter_include_matches(self, pattern: SetMatcher) -> Set:
        """Return only the paths that the pattern matches."""
        if pattern.wildcard:
            return self
        members = PathElementSet(
            m for m in self.members if any(pm.path.matches(m) for pm in pattern.members)
        )
        return Set._of(members, self.children.filter_include_matches(pattern))

    def size(self) -> int:
        return len(self.members) + self.children.size()

    def empty(self) -> bool:
        return len(self.members) == 0 and self.children.empty()

    def has(self, path: Iterable[PathElement]) -> bool:
        """Return True if the path is a member; the empty path never is."""
        path = tuple(path)
        if not path:
            return False
        node: Set | None = self
        for pe in path[:-1]:
            node = node.children.get(pe)
            if node is None:
                return False
        return node.members.has(path[-1])

    def equals(self, other: Set) -> bool:
        return self.members.equals(other.members) and self.children.equals(other.children)

    def with_prefix(self, pe: PathElement) -> Set:
        """Return the paths under pe, with pe removed."""
        subset = self.children.get(pe)
        return subset if subset is not None else Set()

    def leaves(self) -> Set:
        """Return only the paths that have no members below them."""
        leaves = PathElementSet._from_sorted(m for m in self.members if m not in self.children)
        return Set._of(leaves, self.children.leaves())

    def _iter_prefix(self, prefix: Path) -> Iterator[Path]:
        for pe in self.members:
            yield prefix + (pe,)
        for pe, subset in self.children.items():
            yield from subset._iter_prefix(prefix + (pe,))

    def __iter__(self) -> Iterator[Path]:
        """Yield member paths in preorder."""
        return self._iter_prefix(Path())

    def __contains__(self, path: object) -> bool:
        return isinstance(path, tuple) and self.has(path)

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.empty()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "\n".join(str(p) for p in self)

    def __repr__(self) -> str:
        return f"Set([{', '.join(repr(str(p)) for p in self)}])"