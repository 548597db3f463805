from __future__ import annotations

from typing import Any

from .._core import deref
from ._base import Slice, as_items
from ._ref import RefSlice
from ._typed import BoolSlice, IntSlice, StrSlice

_SPECIALIZED: dict[type, type[Slice[Any]]] = {
    bool: BoolSlice,
    int: IntSlice,
    str: StrSlice,
}


def _build(items: list[Any]) -> Slice[Any]:
    match items:
        case [first, *_] if type(first) in _SPECIALIZED:
            return _SPECIALIZED[type(first)](items)
        case _:
            return RefSlice(items)


def slice_of(obj: object = None) -> Slice[Any]:
    """Create the best suited container for **obj**.

    - `None` gives a nil `RefSlice`.
    - An iterable (other than a string or a mapping) gives a container of its elements.
    - Anything else gives a container of that single element.

    `int`, `str` and `bool` elements get their specialized container, everything else a `RefSlice`.

    `None` elements are skipped, and only `None` elements give a nil `RefSlice`.

    Example:
    ```python
    >>> import pynub as nb
    >>> nb.slice_of([1, 2, 3])
    IntSlice(1, 2, 3)
    >>> nb.slice_of("abc")
    StrSlice('abc')
    >>> nb.slice_of([None, 1.5])
    RefSlice(1.5)
    >>> nb.slice_of().nil()
    True
    >>> nb.slice_of([]).nil()
    False

    ```
    """
    obj = deref(obj)
    if obj is None:
        return RefSlice()
    items = as_items(obj)
    if items and all(x is None for x in items):
        return RefSlice()
    return _build([x for x in items if x is not None])


def slice_v(*items: object) -> Slice[Any]:
    """Create the best suited container from the given items.

    Example:
    ```python
    >>> import pynub as nb
    >>> nb.slice_v(True, False)
    BoolSlice(True, False)
    >>> nb.slice_v(None, "a", "b")
    StrSlice('a', 'b')
    >>> nb.slice_v({"a": 1})
    RefSlice({'a': 1})
    >>> nb.slice_v([1, 2])
    RefSlice([1, 2])
    >>> nb.slice_v(), nb.slice_v(None)
    (RefSlice(<nil>), RefSlice(<nil>))

    ```
    """
    found = [x for x in (deref(i) for i in items) if x is not None]
    if not found:
        return RefSlice()
    return _build(found)
