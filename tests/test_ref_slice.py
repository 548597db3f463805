"""Tests for RefSlice type establishment and the slice factories."""

import logging
from dataclasses import dataclass

import pytest

import pynub as nb


@dataclass(slots=True)
class Obj:  # noqa: D101
    name: str


class TestRefSlice:
    def test_starts_nil_without_type(self) -> None:  # noqa: D102
        data = nb.RefSlice()
        assert data.nil()
        assert data.elem_type() is None
        assert repr(data) == "RefSlice(<nil>)"
        assert repr(nb.RefSlice().append(None)) == "RefSlice(None)"

    def test_first_insert_establishes_type(self) -> None:
        """The first element fixes the element type, later ones must match."""
        data = nb.RefSlice().append(Obj("a"))
        assert data.elem_type() is Obj
        data.append(Obj("b"))
        with pytest.raises(nb.TypeMismatchError, match="can't insert type 'str' into 'list\\[Obj\\]'"):
            data.append("c")
        assert data == [Obj("a"), Obj("b")]

    def test_failed_append_all_establishes_nothing(self) -> None:
        """A rejected batch leaves both the contents and the element type untouched."""
        data = nb.RefSlice()
        with pytest.raises(nb.TypeMismatchError):
            data.append_all(1.0, "x")
        assert data.nil()
        assert data.elem_type() is None
        assert data.append("x") == ["x"]

    def test_leading_none_accepts_anything(self) -> None:  # noqa: D102
        data = nb.RefSlice().append(None).append(1).append("a")
        assert data.elem_type() is object
        assert data == [None, 1, "a"]

    def test_subclasses_accepted(self) -> None:
        """Later elements only need to be instances of the established type."""
        data = nb.RefSlice([ValueError("a")])
        assert data.elem_type() is ValueError
        data.append(UnicodeError("b"))
        assert data.len() == 2  # noqa: PLR2004
        with pytest.raises(nb.TypeMismatchError):
            data.append(RuntimeError("b"))

    def test_new_containers_keep_type(self) -> None:
        """Copies and derived containers keep the established type."""
        data = nb.RefSlice([1.0, 2.0, 3.0])
        for derived in (data.copy(), data.slice(0, 0), data.select(lambda x: x > 1), data.pop_n(1)):
            assert derived.elem_type() is float
            with pytest.raises(nb.TypeMismatchError):
                derived.append("x")

    def test_operations_match_specialized(self) -> None:
        """The generic container gives the same results as the specialized one."""
        values = [3, 1, 2, 3, 1]
        ref, typed = nb.RefSlice(values), nb.IntSlice(values)
        for op in (
            lambda s: s.uniq(),
            lambda s: s.sort(),
            lambda s: s.slice(1, -2),
            lambda s: s.reverse(),
            lambda s: s.copy().drop(0, 1),
            lambda s: s.copy().insert(-2, 9),
        ):
            assert op(ref).inner() == op(typed).inner()
        assert ref.join() == typed.join()
        assert ref.index(2) == typed.index(2)

    def test_from_treats_mapping_as_single(self) -> None:  # noqa: D102
        assert nb.RefSlice.from_({"a": 1}).len() == 1
        assert nb.RefSlice.from_([{"a": 1}, {"b": 2}]).len() == 2  # noqa: PLR2004

    def test_unhashable_uniq(self) -> None:
        """uniq works with unhashable elements."""
        data = nb.RefSlice([[1], [2], [1]])
        assert data.uniq() == [[1], [2]]
        assert nb.RefSlice([{"a": 1}, {"a": 1}, {"b": 2}]).uniq_in_place() == [{"a": 1}, {"b": 2}]
        assert nb.RefSlice([[1]]).union([[1], [3]]) == [[1], [3]]

    def test_concat_nil_container(self) -> None:
        """A nil container adds no elements and leaves the element type unset."""
        assert nb.IntSlice([1, 2]).concat_in_place(nb.RefSlice()) == [1, 2]
        assert nb.IntSlice([1]).concat(nb.IntSlice(None)) == [1]
        data = nb.RefSlice().concat_in_place(nb.IntSlice(None))
        assert data.len() == 0
        assert data.elem_type() is None
        with pytest.raises(nb.TypeMismatchError):
            data.append(1).append("a")
        assert not nb.IntSlice([1]).any_s(nb.RefSlice())

    def test_sort_non_orderable_raises(self) -> None:  # noqa: D102
        with pytest.raises(TypeError):
            nb.RefSlice([{"a": 1}, {"b": 2}]).sort()

    def test_type_establishment_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:  # noqa: D102
        with caplog.at_level(logging.DEBUG, logger="pynub"):
            nb.RefSlice().append(1.5)
        assert "established as float" in caplog.text


class TestFactories:
    @pytest.mark.parametrize(
        ("obj", "cls", "expected"),
        [
            ([1, 2], nb.IntSlice, [1, 2]),
            (1, nb.IntSlice, [1]),
            ("1", nb.StrSlice, ["1"]),
            (("a", "b"), nb.StrSlice, ["a", "b"]),
            ([True], nb.BoolSlice, [True]),
            (1.5, nb.RefSlice, [1.5]),
            ({"1": "one"}, nb.RefSlice, [{"1": "one"}]),
            ([None, ""], nb.StrSlice, [""]),
            ([[1, 2]], nb.RefSlice, [[1, 2]]),
        ],
    )
    def test_slice_of(self, obj: object, cls: type, expected: list[object]) -> None:
        """The specialized container is chosen for int, str and bool."""
        result = nb.slice_of(obj)
        assert type(result) is cls
        assert result == expected

    def test_slice_of_empty(self) -> None:  # noqa: D102
        assert nb.slice_of(None).nil()
        assert nb.slice_of([None]).nil()
        empty = nb.slice_of([])
        assert empty.empty()
        assert not empty.nil()

    def test_slice_of_wrapped(self) -> None:  # noqa: D102
        source = nb.IntSlice([1, 2])
        result = nb.slice_of(source)
        assert result == [1, 2]
        result.append(3)
        assert source == [1, 2]

    def test_slice_v(self) -> None:  # noqa: D102
        assert type(nb.slice_v(1, 2)) is nb.IntSlice
        assert nb.slice_v(1, 2) == [1, 2]
        assert nb.slice_v([1, 2]) == [[1, 2]]
        assert nb.slice_v(None, "") == [""]
        assert nb.slice_v().nil()
        assert not nb.slice_v().any()
        assert nb.slice_v(Obj("a"), Obj("b")).inner() == [Obj("a"), Obj("b")]

    def test_slice_v_mixed_types_raises(self) -> None:  # noqa: D102
        with pytest.raises(nb.TypeMismatchError):
            nb.slice_v(1, "a")
