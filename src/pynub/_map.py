from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any, Self

import cytoolz as cz

from ._core import CommonBase, deref
from ._core._format import dict_repr
from ._query import Queryable, resolve
from ._yaml import same_value, yaml_type

if TYPE_CHECKING:
    from ._slice import RefSlice, StrSlice
    from ._str import Str


def _merge_values(values: list[Any]) -> Any:  # noqa: ANN401
    match values:
        case [Mapping() as a, Mapping() as b]:
            return merge_map(a, b)
        case _:
            return values[-1]


def merge_map(a: Mapping[str, Any] | None, b: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge **b** into **a**, recursively.

    **b** wins on collisions, except when both values are mappings, which are merged in turn.

    An absent or empty side gives back the other one, two of them give an empty dict.

    Example:
    ```python
    >>> import pynub as nb
    >>> nb.merge_map({"a": {"x": 1, "y": 1}, "b": 1}, {"a": {"y": 2}, "b": 2})
    {'a': {'x': 1, 'y': 2}, 'b': 2}
    >>> nb.merge_map(None, {})
    {}

    ```
    """
    match (bool(a), bool(b)):
        case (False, False):
            return {}
        case (False, True):
            return dict(b)  # type: ignore[arg-type]
        case (True, False):
            return dict(a)  # type: ignore[arg-type]
        case _:
            return cz.dicttoolz.merge_with(_merge_values, a, b)


class StrMap(CommonBase[dict[str, Any]], Mapping[str, Any]):
    """A chainable wrapper around a `dict` with `str` keys, typically loaded from YAML.

    Lookups take dotted paths (see `Queryable.yaml()`) and give empty values when the path is missing.

    Args:
        data (Mapping[str, Any] | None): The mapping to wrap, shared rather than copied.

    Example:
    ```python
    >>> import pynub as nb
    >>> m = nb.StrMap({"a": {"b": "c", "list": [1, 2]}})
    >>> m.str_("a.b")
    Str('c')
    >>> m.str_slice("a.list")
    StrSlice('1', '2')
    >>> m.str_map("a.missing").any()
    False

    ```
    """

    __slots__ = ()

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._inner = {} if data is None else data  # type: ignore[assignment]

    @classmethod
    def new(cls) -> Self:
        """Create an empty map."""
        return cls()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({dict_repr(self._inner)})"

    def __getitem__(self, key: str) -> Any:  # noqa: ANN401
        return self._inner[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._inner)

    def __len__(self) -> int:
        return len(self._inner)

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def _lookup(self, key: str) -> Any:  # noqa: ANN401
        return resolve(self._inner, key).unwrap_or(None)

    def q(self) -> Queryable:
        """Wrap the map in a `Queryable`."""
        return Queryable(self._inner)

    def add(self, key: str, value: Any) -> Self:  # noqa: ANN401
        """Set **key** to **value**, unwrapping a `StrMap` value to its dict.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.StrMap().add("a", 1).add("b", nb.StrMap({"c": 2})).inner()
        {'a': 1, 'b': {'c': 2}}

        ```
        """
        self._inner[key] = value.inner() if isinstance(value, StrMap) else value
        return self

    def any(self) -> bool:
        """Test if the map has anything in it."""
        return len(self._inner) > 0

    def len(self) -> int:
        return len(self._inner)

    def equals(self, other: object) -> bool:
        """Test deep equality with another `StrMap` or mapping."""
        other = deref(other)
        return isinstance(other, Mapping) and dict(self._inner) == dict(other)

    def merge(self, *others: Mapping[str, Any] | None) -> Self:
        """Merge each of **others** into this map, the last one taking the highest precedence.

        `None` entries are skipped.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.StrMap({"a": 1, "b": {"c": 1}}).merge({"b": {"d": 2}}, None, {"a": 3}).inner()
        {'a': 3, 'b': {'c': 1, 'd': 2}}

        ```
        """
        for other in others:
            if other is not None:
                self._inner = merge_map(self._inner, other)
        return self

    def merge_n(self, *others: StrMap | None) -> Self:
        """Like `merge()`, taking `StrMap` instances."""
        return self.merge(*(None if o is None else o.inner() for o in others))

    def slice(self, key: str) -> list[Any]:
        """Return the sequence found at **key** as a new list, `[]` if there is none."""
        match self._lookup(key):
            case list() | tuple() as found:
                return list(found)
            case _:
                return []

    def str_(self, key: str) -> Str:
        """Return the string found at **key**, an empty `Str` if there is none."""
        from ._str import Str

        found = self._lookup(key)
        return Str(found if isinstance(found, str) else "")

    def str_map(self, key: str) -> StrMap:
        """Return the mapping found at **key**, an empty `StrMap` if there is none.

        The returned map shares its storage with this one.
        """
        match self._lookup(key):
            case Mapping() as found:
                return self.__class__(found)
            case _:
                return self.__class__()

    def str_map_by_name(self, key: str, k: str, v: str) -> StrMap:
        """Return the first mapping of the sequence at **key** whose **k** entry matches **v**.

        **v** matches either as is or through `yaml_type()`, so `"2"` finds both `"2"` and `2`.

        Example:
        ```python
        >>> import pynub as nb
        >>> m = nb.StrMap({"items": [{"name": "a", "id": 1}, {"name": "b", "id": 2}]})
        >>> m.str_map_by_name("items", "id", "2").inner()
        {'name': 'b', 'id': 2}
        >>> m.str_map_by_name("items", "name", "z").any()
        False

        ```
        """
        targets = (v, yaml_type(v))
        for elem in self.slice(key):
            match elem:
                case Mapping() if k in elem and any(same_value(elem[k], t) for t in targets):
                    return self.__class__(elem)
                case _:
                    pass
        return self.__class__()

    def str_map_slice(self, key: str) -> RefSlice[dict[str, Any]]:
        """Return the mappings of the sequence at **key** as a `RefSlice` of dicts, skipping other elements."""
        from ._slice import RefSlice

        return RefSlice(x for x in self.slice(key) if isinstance(x, Mapping))

    def str_slice(self, key: str) -> StrSlice:
        """Return the `str()` of each element of the sequence at **key**."""
        from ._slice import StrSlice

        return StrSlice(str(x) for x in self.slice(key))

