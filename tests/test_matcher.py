import pytest

from fieldsets.element import PathElement, key_by_fields
from fieldsets.matcher import (
    PathElementMatcher,
    SetMatcher,
    SetMemberMatcher,
    match_any_path_element,
    match_any_set,
    new_set_matcher,
    prefix_matcher,
)
from fieldsets.value import FieldList


def _chain(matcher):
    """Follow a single-member matcher chain, returning the element matchers."""
    out = []
    while not matcher.wildcard:
        assert len(matcher.members) == 1
        out.append(matcher.members[0].path)
        matcher = matcher.members[0].child
    return out


def test_wildcard_element_matches_everything():
    m = match_any_path_element()
    for pe in (
        PathElement.field("a"),
        PathElement.index(7),
        PathElement.value("v1"),
        PathElement.key(key_by_fields("name", "x")),
    ):
        assert m.matches(pe)


def test_element_matcher_matches_equal_only():
    m = PathElementMatcher(path_element=PathElement.field("spec"))
    assert m.matches(PathElement.field("spec"))
    assert not m.matches(PathElement.field("status"))
    assert not m.matches(PathElement.index(0))


def test_compare_orders_wildcard_first():
    wild = match_any_path_element()
    plain = PathElementMatcher(path_element=PathElement.field("a"))
    assert wild.compare(plain) < 0
    assert plain.compare(wild) > 0
    assert plain.compare(PathElementMatcher(path_element=PathElement.field("a"))) == 0


def test_compare_plain_follows_element_order():
    a = PathElementMatcher(path_element=PathElement.field("anteater"))
    b = PathElementMatcher(path_element=PathElement.field("zebra"))
    assert a.compare(b) < 0
    assert b.compare(a) > 0


def test_match_any_set():
    m = match_any_set()
    assert m.wildcard
    assert m.members == ()


def test_prefix_matcher_structure():
    m = prefix_matcher("spec", "containers", match_any_path_element(), "resources")
    chain = _chain(m)
    assert len(chain) == 4
    assert chain[0].matches(PathElement.field("spec"))
    assert chain[1].matches(PathElement.field("containers"))
    assert chain[2].wildcard
    assert chain[3].matches(PathElement.field("resources"))


def test_prefix_matcher_accepts_all_part_kinds():
    key = FieldList(key_by_fields("key1", "value1"))
    m = prefix_matcher(PathElement.value("v1"), key, 1)
    chain = _chain(m)
    assert chain[0].matches(PathElement.value("v1"))
    assert chain[1].matches(PathElement.key(key))
    assert chain[2].matches(PathElement.index(1))
    assert not chain[2].matches(PathElement.index(2))


def test_prefix_matcher_empty_is_wildcard():
    assert prefix_matcher().wildcard


def test_prefix_matcher_rejects_empty_key():
    with pytest.raises(ValueError):
        prefix_matcher("spec", FieldList())


@pytest.mark.parametrize("bad", [True, 1.5, None, {"a": 1}])
def test_prefix_matcher_rejects_unexpected_types(bad):
    with pytest.raises(TypeError):
        prefix_matcher("spec", bad)


def test_new_set_matcher_sorts_members():
    child = match_any_set()
    members = [
        SetMemberMatcher(PathElementMatcher(path_element=PathElement.index(2)), child),
        SetMemberMatcher(PathElementMatcher(path_element=PathElement.field("b")), child),
        SetMemberMatcher(match_any_path_element(), child),
        SetMemberMatcher(PathElementMatcher(path_element=PathElement.field("a")), child),
    ]
    m = new_set_matcher(False, *members)
    assert m.members[0].path.wildcard
    paths = [mm.path for mm in m.members]
    assert all(a.compare(b) <= 0 for a, b in zip(paths, paths[1:]))
    assert len(m.members) == len(members)


def test_merge_with_wildcard_is_wildcard():
    m = prefix_matcher("spec")
    assert m.merge(match_any_set()).wildcard
    assert match_any_set().merge(m).wildcard


def test_merge_shares_common_prefix():
    merged = prefix_matcher("spec", "f1").merge(prefix_matcher("spec", "f3"))
    assert not merged.wildcard
    assert len(merged.members) == 1
    assert merged.members[0].path.matches(PathElement.field("spec"))
    child = merged.members[0].child
    assert len(child.members) == 2
    assert child.members[0].path.matches(PathElement.field("f1"))
    assert child.members[1].path.matches(PathElement.field("f3"))


def test_merge_distinct_prefixes_sorted():
    merged = prefix_matcher("zzz").merge(prefix_matcher("aaa"))
    assert len(merged.members) == 2
    assert merged.members[0].path.matches(PathElement.field("aaa"))
    assert merged.members[1].path.matches(PathElement.field("zzz"))


def test_merge_keeps_wildcard_ahead_of_specific():
    merged = prefix_matcher("list", 1, "f2").merge(
        prefix_matcher("list", match_any_path_element(), "f1")
    )
    inner = merged.members[0].child
    assert len(inner.members) == 2
    assert inner.members[0].path.wildcard
    assert inner.members[0].child.members[0].path.matches(PathElement.field("f1"))


def test_merge_does_not_modify_operands():
    a = prefix_matcher("spec", "f1")
    b = prefix_matcher("spec", "f3")
    a.merge(b)
    assert len(a.members[0].child.members) == 1
    assert len(b.members[0].child.members) == 1
    assert isinstance(a, SetMatcher)