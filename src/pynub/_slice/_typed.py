from __future__ import annotations

from collections.abc import Iterable
from typing import Any, ClassVar, Self

from ._base import Slice, as_items


class _TypedSlice[T](Slice[T]):
    """A `Slice` whose element type is fixed by the class itself.

    Passing `None` creates a nil container, anything else is validated element by element.
    """

    _elem_type: ClassVar[type]
    __slots__ = ()

    def __init__(self, data: Iterable[T] | None = ()) -> None:
        self._inner = None if data is None else []
        if data is not None:
            self.append_all(*data)

    @classmethod
    def new(cls) -> Self:
        """Create an empty container."""
        return cls()

    @classmethod
    def from_(cls, data: T | Iterable[T], *more_data: T) -> Self:
        """Create a container from a single value, an iterable, or several values.

        Strings count as a single value.
        """
        return cls(as_items(data, *more_data))

    def _target_type(self, items: list[Any]) -> type:  # noqa: ARG002
        return self._elem_type


class IntSlice(_TypedSlice[int]):
    """A list of `int`, `bool` excluded.

    Example:
    ```python
    >>> import pynub as nb
    >>> nb.IntSlice([3, 1, 2]).sort().append(4).first_n(2)
    IntSlice(1, 2)
    >>> nb.IntSlice.from_(1, 2)
    IntSlice(1, 2)
    >>> nb.IntSlice([True])
    Traceback (most recent call last):
        ...
    pynub._core._errors.TypeMismatchError: can't insert type 'bool' into 'list[int]'

    ```
    """

    _elem_type = int
    __slots__ = ()


class StrSlice(_TypedSlice[str]):
    """A list of `str`.

    Example:
    ```python
    >>> import pynub as nb
    >>> nb.StrSlice.from_("abc")
    StrSlice('abc')
    >>> nb.StrSlice(["b", "a"]).sort().join("").inner()
    'ab'

    ```
    """

    _elem_type = str
    __slots__ = ()


class BoolSlice(_TypedSlice[bool]):
    """A list of `bool`."""

    _elem_type = bool
    __slots__ = ()
