"""Dotted-path queries over loosely typed data, and total export helpers.

A path like `"foo.[name:2].bar"` is resolved one segment at a time:

- on a mapping, a segment is a key, compared through `str(key)`;
- on a sequence, `[k:v]` selects the first mapping element whose `k` equals `yaml_type(v)`, and `[i]` or `i` selects by index;
- anything else ends the lookup with nothing.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping, Sequence
from functools import lru_cache
from typing import Any, Self

from ._core import CommonBase, abs_index, get_config
from ._results import NONE, Option, Some
from ._types import KeyVal
from ._yaml import same_value, yaml_type

_INT = re.compile(r"^-?\d+$")


@lru_cache(maxsize=8)
def _segment_pattern(separator: str) -> re.Pattern[str]:
    return re.compile(rf"\[[^\]]*\]|[^{re.escape(separator)}]+")


def split_path(path: str) -> list[str]:
    """Split **path** on the configured separator, leaving bracketed segments whole.

    Example:
    ```python
    >>> from pynub._query import split_path
    >>> split_path("foo.[name:1.5].bar")
    ['foo', '[name:1.5]', 'bar']

    ```
    """
    return _segment_pattern(get_config().path_separator).findall(path)


def _is_seq(obj: object) -> bool:
    return isinstance(obj, Sequence) and not isinstance(obj, str | bytes)


def _key_lookup(data: Mapping[Any, Any], key: str) -> Option[Any]:
    for k, v in data.items():
        if str(k) == key:
            return Some(v)
    return NONE


def _seq_lookup(data: Sequence[Any], segment: str) -> Option[Any]:
    body = segment[1:-1] if segment.startswith("[") and segment.endswith("]") else segment
    if _INT.match(body):
        i = abs_index(len(data), int(body))
        return NONE if i == -1 else Some(data[i])
    key, found, raw = body.partition(":")
    if not found:
        return NONE
    target = yaml_type(raw.strip())
    for elem in data:
        if not isinstance(elem, Mapping):
            continue
        match _key_lookup(elem, key.strip()):
            case Some(value) if same_value(value, target):
                return Some(elem)
            case _:
                pass
    return NONE


def resolve(data: object, path: str) -> Option[Any]:
    """Follow **path** through **data**, `NONE` if any segment is missing."""
    current: Option[Any] = Some(data)
    for segment in split_path(path):
        match current:
            case Some(Mapping() as m):
                current = _key_lookup(m, segment)
            case Some(seq) if _is_seq(seq):
                current = _seq_lookup(seq, segment)
            case _:
                return NONE
    return current


class Queryable(CommonBase[Any]):
    """A wrapper around any value, giving path queries and conversions that never raise.

    `Queryable(None)` is the absent value: `any()` is `False` and every export returns its empty default.

    Example:
    ```python
    >>> import pynub as nb
    >>> q = nb.Queryable({"foo": [{"name": 1}, {"name": 2}]})
    >>> q.yaml("foo.[name:2]").to_map()
    {'name': 2}
    >>> q.yaml("foo.[name:5]").any()
    False
    >>> q.yaml("foo.-1.name").to_int()
    2

    ```
    """

    __slots__ = ()

    def __init__(self, data: Any = None) -> None:  # noqa: ANN401
        self._inner = data

    @classmethod
    def from_yaml(cls, text: str | bytes) -> Self:
        """Parse a YAML document, see `load_yaml()`."""
        from ._yaml import load_yaml

        return cls(load_yaml(text).inner())

    def __repr__(self) -> str:
        return f"Queryable({self._inner!r})"

    def __iter__(self) -> Iterator[Any]:
        return self.iter()

    def __len__(self) -> int:
        return self.len()

    def iter(self) -> Iterator[Any]:
        """Iterate over the value.

        Mappings yield `KeyVal` pairs, sequences their elements, a scalar yields itself once and nothing yields nothing.

        Example:
        ```python
        >>> import pynub as nb
        >>> list(nb.Queryable({"a": 1}))
        [('a', 1)]
        >>> list(nb.Queryable("ab")), list(nb.Queryable(None))
        (['ab'], [])

        ```
        """
        match self._inner:
            case None:
                return iter(())
            case Mapping():
                return (KeyVal(k, v) for k, v in self._inner.items())
            case data if _is_seq(data):
                return iter(data)
            case _:
                return iter((self._inner,))

    def nil(self) -> bool:
        return self._inner is None

    def is_map(self) -> bool:
        return isinstance(self._inner, Mapping)

    def is_list(self) -> bool:
        return _is_seq(self._inner)

    def is_str(self) -> bool:
        return isinstance(self._inner, str)

    def len(self) -> int:
        """Return the number of elements of a collection or string, `1` for a scalar, `0` when absent."""
        match self._inner:
            case None:
                return 0
            case str() | bytes() | Mapping():
                return len(self._inner)
            case data if _is_seq(data):
                return len(data)
            case _:
                return 1

    def any(self) -> bool:
        """Test if there is something: a non empty collection or string, or any scalar.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.Queryable([]).any(), nb.Queryable(1).any(), nb.Queryable("2").any(), nb.Queryable().any()
        (False, True, True, False)

        ```
        """
        return self.len() > 0

    def yaml(self, path: str) -> Queryable:
        """Resolve the dotted **path**, returning `Queryable(None)` when anything is missing.

        Example:
        ```python
        >>> import pynub as nb
        >>> q = nb.Queryable({"1": {"2": "two"}})
        >>> q.yaml("1.2")
        Queryable('two')
        >>> q.yaml("1.2.3")
        Queryable(None)

        ```
        """
        return self.__class__(resolve(self._inner, path).unwrap_or(None))

    # exports
    # ------------------------------------------------------------

    def to_obj(self) -> Any:  # noqa: ANN401
        """Return the wrapped value as is."""
        return self._inner

    def to_str(self) -> str:
        """Return the value if it is a `str`, `""` otherwise."""
        return self._inner if isinstance(self._inner, str) else ""

    def to_int(self) -> int:
        """Return the value if it is an `int`, `0` otherwise."""
        match self._inner:
            case bool():
                return 0
            case int():
                return self._inner
            case _:
                return 0

    def to_ints(self) -> list[int]:
        """Return the `int` elements of a sequence, skipping the others.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.Queryable([1, "a", 2, True]).to_ints()
        [1, 2]
        >>> nb.Queryable(3).to_ints()
        []

        ```
        """
        if not self.is_list():
            return []
        return [x for x in self._inner if isinstance(x, int) and not isinstance(x, bool)]

    def to_strs(self) -> list[str]:
        """Return the `str()` of each element of a sequence, `[]` otherwise.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.Queryable.from_yaml("foo: [1, 2, 3]").yaml("foo").to_strs()
        ['1', '2', '3']

        ```
        """
        if not self.is_list():
            return []
        return [str(x) for x in self._inner]

    def to_list(self) -> list[Any]:
        """Return every item yielded by `iter()` in a new list."""
        return list(self.iter())

    def to_map(self) -> dict[str, Any]:
        """Return the value if it is a mapping, as a `dict` with `str` keys, `{}` otherwise."""
        if not self.is_map():
            return {}
        return {str(k): v for k, v in self._inner.items()}

    def to_str_map(self) -> dict[str, str]:
        """Return a mapping value with both keys and values turned into `str`, `{}` otherwise.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.Queryable({1: 2, "a": None}).to_str_map()
        {'1': '2', 'a': 'None'}

        ```
        """
        return {k: str(v) for k, v in self.to_map().items()}

    def to_maps(self) -> list[dict[str, Any]]:
        """Return the mapping elements of a sequence, skipping the others."""
        if not self.is_list():
            return []
        return [self.__class__(x).to_map() for x in self._inner if isinstance(x, Mapping)]

    def to_str_maps(self) -> list[dict[str, str]]:
        """Return the mapping elements of a sequence as `str` to `str` dicts, skipping the others."""
        if not self.is_list():
            return []
        return [
            self.__class__(x).to_str_map() for x in self._inner if isinstance(x, Mapping)
        ]
