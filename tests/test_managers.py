import pytest

from fieldsets.managers import ManagedFields, VersionedSet
from fieldsets.path import make_path
from fieldsets.set import Set


def _ns(*names):
    return Set(make_path(n) for n in names)


def _mf(**entries):
    return ManagedFields(entries)


def _vs(names, version="v1"):
    return VersionedSet(_ns(*names), version, False)


DIFFERENCE_CASES = [
    ("empty", {}, {}, {}),
    (
        "empty rhs",
        {"default": (["numeric", "string", "bool"], "v1")},
        {},
        {"default": (["numeric", "string", "bool"], "v1")},
    ),
    (
        "empty lhs",
        {},
        {"default": (["numeric", "string", "bool"], "v1")},
        {"default": (["numeric", "string", "bool"], "v1")},
    ),
    (
        "different managers",
        {"one": (["numeric", "string", "bool"], "v1")},
        {"two": (["numeric", "string", "bool"], "v1")},
        {
            "one": (["numeric", "string", "bool"], "v1"),
            "two": (["numeric", "string", "bool"], "v1"),
        },
    ),
    (
        "same manager, different version",
        {"one": (["numeric", "string", "integer"], "v1")},
        {"one": (["numeric", "string", "bool"], "v2")},
        {"one": (["numeric", "string", "bool"], "v2")},
    ),
    (
        "set difference",
        {"one": (["numeric", "string"], "v1")},
        {"one": (["string", "bool"], "v1")},
        {"one": (["numeric", "bool"], "v1")},
    ),
]


def _build(spec):
    return ManagedFields(
        {name: VersionedSet(_ns(*fields), version, False) for name, (fields, version) in spec.items()}
    )


@pytest.mark.parametrize("name,lhs,rhs,out", DIFFERENCE_CASES, ids=[c[0] for c in DIFFERENCE_CASES])
def test_difference(name, lhs, rhs, out):
    got = _build(lhs).difference(_build(rhs))
    expected = _build(out)
    assert got == expected
    assert got.equals(expected)


EQUALS_CASES = [
    ("empty", _mf(), _mf(), True),
    (
        "same everything",
        _mf(one=_vs(["numeric", "string", "bool"])),
        _mf(one=_vs(["numeric", "string", "bool"])),
        True,
    ),
    ("empty rhs", _mf(default=_vs(["numeric", "string", "bool"])), _mf(), False),
    ("empty lhs", _mf(), _mf(default=_vs(["numeric", "string", "bool"])), False),
    (
        "different managers",
        _mf(one=_vs(["numeric", "string", "bool"])),
        _mf(two=_vs(["numeric", "string", "bool"])),
        False,
    ),
    (
        "same manager, different version",
        _mf(one=_vs(["numeric", "string", "integer"], "v1")),
        _mf(one=_vs(["numeric", "string", "bool"], "v2")),
        False,
    ),
    (
        "set difference",
        _mf(one=_vs(["numeric", "string"])),
        _mf(one=_vs(["string", "bool"])),
        False,
    ),
]


@pytest.mark.parametrize("name,lhs,rhs,equal", EQUALS_CASES, ids=[c[0] for c in EQUALS_CASES])
def test_equals(name, lhs, rhs, equal):
    assert lhs.equals(rhs) is equal
    assert lhs.difference(rhs).equals(ManagedFields()) is equal


def test_equals_checks_applied_flag():
    lhs = _mf(one=VersionedSet(_ns("a"), "v1", True))
    rhs = _mf(one=VersionedSet(_ns("a"), "v1", False))
    assert not lhs.equals(rhs)


def test_copy_is_independent():
    original = _mf(one=_vs(["a"]))
    dup = original.copy()
    dup["two"] = _vs(["b"])
    assert isinstance(dup, ManagedFields)
    assert list(original) == ["one"]
    assert dup["one"] is original["one"]


def test_str():
    mf = _mf(one=_vs(["a"]))
    assert str(mf) == "one:\n- Applied: false\n- APIVersion: v1\n- Set: .a\n"