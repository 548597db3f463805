from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Self

from ._base import Slice, as_items

logger = logging.getLogger(__name__)


class RefSlice[T](Slice[T]):
    """A list of any element type, established at runtime.

    A `RefSlice` created without data is nil and has no element type yet.

    The first inserted element fixes it to `type(elem)`, and every later insertion must be an instance of that type.

    A leading `None` fixes the type to `object`, which accepts anything.

    Example:
    ```python
    >>> import pynub as nb
    >>> data = nb.RefSlice()
    >>> data.nil(), data.elem_type()
    (True, None)
    >>> data.append(1.5).append(2.0)
    RefSlice(1.5, 2.0)
    >>> data.elem_type()
    <class 'float'>
    >>> data.append("x")
    Traceback (most recent call last):
        ...
    pynub._core._errors.TypeMismatchError: can't insert type 'str' into 'list[float]'

    ```
    """

    _elem_type: type | None
    __slots__ = ("_elem_type",)

    def __init__(self, data: Iterable[T] | None = None) -> None:
        self._elem_type = None
        self._inner = None if data is None else []
        if data is not None:
            self.append_all(*data)

    @classmethod
    def new(cls) -> Self:
        """Create a nil container."""
        return cls()

    @classmethod
    def from_(cls, data: T | Iterable[T], *more_data: T) -> Self:
        """Create a container from a single value, an iterable, or several values.

        Strings and mappings count as a single value.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.RefSlice.from_({"a": 1})
        RefSlice({'a': 1})
        >>> nb.RefSlice.from_([1.0, 2.0])
        RefSlice(1.0, 2.0)

        ```
        """
        return cls(as_items(data, *more_data))

    def elem_type(self) -> type | None:
        """Return the established element type, `None` if nothing was inserted yet."""
        return self._elem_type

    def _target_type(self, items: list[Any]) -> type:
        if self._elem_type is not None:
            return self._elem_type
        first = items[0]
        return object if first is None else type(first)

    def _adopt(self, tp: type) -> None:
        if self._elem_type is None:
            logger.debug("RefSlice element type established as %s", tp.__name__)
            self._elem_type = tp

    def _new(self, data: list[T] | None) -> Self:
        new = super()._new(data)
        new._elem_type = self._elem_type
        return new
