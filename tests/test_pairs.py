from __future__ import annotations

import pytest

from handykit import merge_objects, object_to_pairs, pairs_to_object, query_string_to_object


def test_merge_objects_is_shallow_and_ordered() -> None:
    nested = {"x": 1}
    merged = merge_objects({"a": 1, "n": nested}, None, {"b": 2}, {"a": 3})

    assert merged == {"a": 3, "n": {"x": 1}, "b": 2}
    assert merged["n"] is nested
    assert merge_objects() == {}


def test_pairs_conversions() -> None:
    assert object_to_pairs({"a": 1, "b": 2}) == [("a", 1), ("b", 2)]
    assert pairs_to_object([["a", 1], ("b", 2), ("a", 3)]) == {"a": 3, "b": 2}
    assert pairs_to_object(object_to_pairs({"k": [1]})) == {"k": [1]}


def test_pairs_to_object_rejects_malformed_pairs() -> None:
    with pytest.raises(ValueError):
        pairs_to_object([("a", 1, 2)])


def test_query_string_to_object() -> None:
    assert query_string_to_object("?key1=value1&key2=value2") == {
        "key1": "value1",
        "key2": "value2",
    }


def test_query_string_decoding_and_edge_cases() -> None:
    parsed = query_string_to_object("name=John%20Doe&flag&eq=a=b&plus=1+1&&name=Jane")

    assert parsed == {"name": "Jane", "flag": "", "eq": "a=b", "plus": "1+1"}
    assert query_string_to_object("") == {}
    assert query_string_to_object("?") == {}
