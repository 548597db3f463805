"""Tests for dotted-path queries and exports on Queryable."""

import pytest
import yaml

import pynub as nb

NESTED = """
1:
  2: two
"""

DEEP = """
1:
  2:
    3: three
"""

LISTED = """
foo:
  - name: 1
  - name: 2
  - name: 3
"""


class TestYamlPath:
    def test_missing_keys(self) -> None:  # noqa: D102
        q = nb.load_yaml(NESTED)
        assert q.any()
        assert not q.yaml("foo").any()
        assert not q.yaml("foo.foo").any()
        assert q.yaml("foo").nil()

    def test_nested_strings(self) -> None:  # noqa: D102
        assert nb.load_yaml(NESTED).yaml("1.2").to_str() == "two"
        assert nb.load_yaml(DEEP).yaml("1.2.3").to_str() == "three"

    def test_nested_maps(self) -> None:  # noqa: D102
        assert nb.load_yaml(NESTED).yaml("1").to_map() == {"2": "two"}
        assert nb.load_yaml(DEEP).yaml("1.2").to_map() == {"3": "three"}

    def test_scalar_with_remaining_segments(self) -> None:  # noqa: D102
        assert not nb.load_yaml(NESTED).yaml("1.2.3").any()

    def test_sequence(self) -> None:  # noqa: D102
        q = nb.Queryable.from_yaml("foo:\n  - 1\n  - 2\n  - 3\n")
        assert q.yaml("foo").to_strs() == ["1", "2", "3"]
        assert q.yaml("foo").to_ints() == [1, 2, 3]

    def test_bracket_predicate(self) -> None:
        """[key:value] selects the first mapping whose key matches the inferred value."""
        q = nb.load_yaml(LISTED)
        assert q.yaml("foo.[name:2]").to_map() == {"name": 2.0}
        assert not q.yaml("fee.[name:2]").any()
        assert not q.yaml("foo.[fee:2]").any()
        assert not q.yaml("foo.[name:5]").any()

    def test_bracket_predicate_quoted(self) -> None:  # noqa: D102
        q = nb.Queryable({"users": [{"id": "7", "n": "a"}, {"id": 7, "n": "b"}]})
        assert q.yaml('users.[id:"7"].n').to_str() == "a"
        assert q.yaml("users.[id:7].n").to_str() == "b"

    def test_bracket_predicate_keeps_bools_apart_from_numbers(self) -> None:  # noqa: D102
        q = nb.Queryable({"foo": [{"name": True, "tag": "bool"}, {"name": 1, "tag": "int"}]})
        assert q.yaml("foo.[name:1].tag").to_str() == "int"
        assert q.yaml("foo.[name:true].tag").to_str() == "bool"
        assert not nb.Queryable({"foo": [{"name": 1}]}).yaml("foo.[name:true]").any()

    def test_integer_index(self) -> None:  # noqa: D102
        q = nb.load_yaml(LISTED)
        assert q.yaml("foo.0.name").to_int() == 1
        assert q.yaml("foo.[-1].name").to_int() == 3  # noqa: PLR2004
        assert not q.yaml("foo.3").any()

    def test_invalid_yaml_raises(self) -> None:  # noqa: D102
        with pytest.raises(yaml.YAMLError):
            nb.load_yaml("a: [1, 2")

    def test_path_separator_config(self) -> None:  # noqa: D102
        nb.set_config(path_separator="/")
        try:
            assert nb.load_yaml(NESTED).yaml("1/2").to_str() == "two"
        finally:
            nb.set_config(path_separator=".")


class TestQueryable:
    @pytest.mark.parametrize(
        ("obj", "expected"),
        [([], False), ({}, False), ("", False), (None, False), (1, True), ("2", True), ([0], True)],
    )
    def test_any(self, obj: object, expected: bool) -> None:  # noqa: D102, FBT001
        assert nb.Queryable(obj).any() is expected

    def test_iter_yields_keyvals_for_maps(self) -> None:  # noqa: D102
        items = list(nb.Queryable({"a": 1, "b": 2}))
        assert items == [nb.KeyVal("a", 1), nb.KeyVal("b", 2)]
        assert items[0].key == "a"
        assert items[0].val == 1

    def test_kind_predicates(self) -> None:  # noqa: D102
        assert nb.Queryable([]).is_list()
        assert not nb.Queryable("ab").is_list()
        assert nb.Queryable({}).is_map()
        assert nb.Queryable("ab").is_str()
        assert nb.Queryable(5).len() == 1


class TestExports:
    def test_absent_gives_defaults(self) -> None:
        """Every export is total on an absent value."""
        q = nb.Queryable()
        assert q.to_str() == ""
        assert q.to_int() == 0
        assert q.to_obj() is None
        assert q.to_ints() == []
        assert q.to_strs() == []
        assert q.to_map() == {}
        assert q.to_str_map() == {}
        assert q.to_list() == []
        assert q.to_maps() == []
        assert q.to_str_maps() == []

    def test_incompatible_gives_defaults(self) -> None:  # noqa: D102
        assert nb.Queryable(5).to_str() == ""
        assert nb.Queryable("5").to_int() == 0
        assert nb.Queryable(True).to_int() == 0
        assert nb.Queryable("abc").to_map() == {}
        assert nb.Queryable({"a": 1}).to_ints() == []

    def test_to_list(self) -> None:  # noqa: D102
        assert nb.Queryable([1, "a"]).to_list() == [1, "a"]
        assert nb.Queryable(1).to_list() == [1]
        assert nb.Queryable({"k": "v"}).to_list() == [nb.KeyVal("k", "v")]

    def test_maps_skip_non_mappings(self) -> None:  # noqa: D102
        q = nb.Queryable([{"a": 1}, "x", {2: None}])
        assert q.to_maps() == [{"a": 1}, {"2": None}]
        assert q.to_str_maps() == [{"a": "1"}, {"2": "None"}]

    def test_to_str_map(self) -> None:  # noqa: D102
        assert nb.Queryable({"a": 1, "b": [1]}).to_str_map() == {"a": "1", "b": "[1]"}


def test_dump_yaml_round_trip() -> None:
    """Wrappers are unwrapped and keys stringified before dumping."""
    text = nb.dump_yaml(nb.StrMap({"a": {1: [1, 2]}}))
    assert nb.load_yaml(text).yaml("a.1").to_ints() == [1, 2]
    assert "'1':" in text
