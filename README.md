# fieldsets

`fieldsets` describes and manipulates sets of fields inside nested,
JSON-like objects. It records which fields each manager owns, does set
algebra on those fields, and reports conflicts between managers.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Concepts

- **`fieldsets.value`**: `Field` (a name and a value), `FieldList` (an
  ordered tuple of fields, used as an associative-list key), and
  `compare_values`, `values_equal` and `value_to_string`, which give plain
  values (numbers, strings, bools, lists, dicts, `None`) a total order and
  a readable form.
- **`fieldsets.element.PathElement`** selects one child of a containing
  object. It is exactly one of: a field name (`PathElement.field("spec")`),
  an associative-list key (`PathElement.key(key_by_fields("name", "app"))`),
  a set value (`PathElement.value(5)`), or a list index
  (`PathElement.index(0)`). Elements are totally ordered: field names
  first, then keys, then values, then indices. `PathElementSet` is a
  sorted set of them.
- **`fieldsets.path.Path`** is a tuple of path elements. `make_path`
  builds one from strings (field names), ints (indices), non-empty
  `FieldList` keys and `PathElement`s; any other argument raises
  `TypeError`, and an empty key raises `ValueError`. Use
  `PathElement.value(...)` for set members.
- **`fieldsets.pathelementmap.PathElementMap`** maps path elements to
  arbitrary values, kept in element order.
- **`fieldsets.set.Set`** is a tree of paths. It supports `insert`, `has`,
  `union`, `intersection`, `difference`, `recursive_difference`,
  `filter_include_matches`, `leaves`, `with_prefix`, `size`, `empty` and
  `equals`; iterating it yields its paths in preorder.
- **`fieldsets.managers.ManagedFields`** is a dict from manager name to a
  `VersionedSet`, which pairs a set with an API version and an "applied"
  flag.

## Example

```python
from fieldsets.element import key_by_fields
from fieldsets.path import make_path
from fieldsets.set import Set

owned = Set()
owned.insert(make_path("spec", "containers", key_by_fields("name", "app"), "image"))
owned.insert(make_path("metadata", "labels", "tier"))

print(owned.has(make_path("metadata", "labels", "tier")))   # True
print(owned.has(make_path("metadata", "labels")))           # False: parents are not members
print(owned)   # one path per line, e.g. .metadata.labels.tier
```

### Serialization

Path elements have a compact string form (`f:spec`, `i:0`, `v:"x"`,
`k:{"name":"app"}`), and whole sets serialize to nested JSON objects:

```python
from fieldsets.serialize import set_to_json, set_from_json
from fieldsets.serialize_pe import serialize_path_element, deserialize_path_element

data = set_to_json(owned)            # a str
assert set_from_json(data).equals(owned)

pe = deserialize_path_element('k:{"name":"app"}')
assert serialize_path_element(pe) == 'k:{"name":"app"}'
```

`set_from_json` accepts text, bytes or a readable file. Malformed
elements raise `ValueError`; an element whose type prefix is not
recognised raises `UnknownPathElementTypeError` (a `ValueError`
subclass). When a whole set is read back, elements of an unrecognised
kind are dropped without complaint.

### Building a set from an object

`set_from_value` walks a plain Python value (dicts, lists and scalars)
and collects every leaf. List items that are dicts with scalar `key`,
`id` or `name` fields are referenced by those fields; other items by
index:

```python
from fieldsets.fromvalue import set_from_value

s = set_from_value({"a": [{"name": "x", "v": 1}]})
# paths: .a[name="x"].name and .a[name="x"].v
```

### Filtering

```python
from fieldsets.filters import ExcludeSetFilter, exclude_filter_map, include_matcher_filter
from fieldsets.matcher import match_any_path_element, prefix_matcher

only_resources = include_matcher_filter(
    prefix_matcher("spec", "containers", match_any_path_element(), "resources")
)
filtered = only_resources.filter(owned)

without_labels = ExcludeSetFilter(Set([make_path("metadata", "labels")])).filter(owned)

per_version = exclude_filter_map({"v1": Set([make_path("status")])})
```

`include_matcher_filter` with several matchers keeps whatever any of them
matches; with none it keeps everything. `ExcludeSetFilter` removes each
excluded path together with everything below it.

### Managers and conflicts

```python
from fieldsets.conflict import conflicts_from_managers
from fieldsets.managers import ManagedFields, VersionedSet

managers = ManagedFields({"bob": VersionedSet(owned, "v1", False)})
conflicts = conflicts_from_managers(managers)
print(str(conflicts))
```

`ManagedFields.difference` gives the per-manager symmetric difference of
two ownership maps; a manager whose version differs keeps the other
map's entry whole. `Conflict` and `Conflicts` are exceptions; the
message of `Conflicts` groups the paths by manager in sorted order, and
`Conflicts.to_set` gathers all their paths into one `Set`.

### Indented YAML snippets

`fieldsets.tabs.fix_tabs` strips the first line's leading tabs from every
line of a block of text, which keeps inline YAML in tests readable. It
raises `ValueError` when a line has fewer leading tabs than the first.

## What this package does not do

It works on field paths and field sets only. It has no schemas or typed
objects, so it cannot validate, merge or compare objects, and it has no
apply or update logic that moves ownership between managers. There is no
command-line tool.