from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable, Collection, Iterable, Iterator, Mapping
from typing import TYPE_CHECKING, Any, Self

import cytoolz as cz
import more_itertools as mit

from .._core import (
    CommonBase,
    IndexOutOfBoundsError,
    NubError,
    TypeMismatchError,
    abs_index,
    abs_indices,
    abs_neg,
    deref,
    get_config,
)
from .._core._format import seq_repr
from .._results import NONE, Err, Ok, Option, Result, Some

if TYPE_CHECKING:
    from .._str import Str
    from .._types import SupportsRichComparison
    from ._ref import RefSlice


def as_items(data: object, *more_data: object) -> tuple[Any, ...]:
    """Turn **data** into a tuple of elements.

    Strings, bytes and mappings count as single values, other iterables are expanded.
    `None` and nil containers contribute nothing.
    """
    data = deref(data)
    if data is None:
        return more_data
    if isinstance(data, str | bytes | Mapping) or not cz.itertoolz.isiterable(data):
        return (data, *more_data)
    return (*data, *more_data)


def _unique[T](items: list[T]) -> list[T]:
    try:
        return list(mit.unique_everseen(items))
    except TypeError:
        # unhashable elements, compare by equality
        seen: list[T] = []
        for item in items:
            if item not in seen:
                seen.append(item)
        return seen


class Slice[T](CommonBase[list[T] | None], Collection[T]):
    """Base class of every pynub list container.

    A `Slice` wraps exactly one python `list`, or nothing at all:

    - **nil**: no storage was ever allocated, `inner()` is `None`.
    - **empty**: storage exists but holds no elements.

    Both are "nothing to iterate", but `nil()` and `empty()` stay distinct predicates.

    All elements share one type. Subclasses decide which one through `_target_type()`, and every insertion is checked against it.

    Mutating methods work in place and return `Self` for chaining.

    Methods returning a new container (`copy`, `slice`, `select`, `reverse`, `sort`, `uniq`, ...) never share storage with the original.

    Indices accept negative notation, and ranges are inclusive: `slice(0, -1)` is everything.
    """

    __slots__ = ()

    def __len__(self) -> int:
        return self.len()

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner or ())

    def __contains__(self, elem: object) -> bool:
        return self.contains(elem)

    def __eq__(self, other: object) -> bool:
        other = deref(other)
        if isinstance(other, tuple):
            other = list(other)
        return self._inner == other

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return seq_repr(self.__class__.__name__, self._inner)

    # element type handling
    # ------------------------------------------------------------

    @abstractmethod
    def _target_type(self, items: list[Any]) -> type:
        """Element type every item of **items** must match."""
        ...

    def _adopt(self, tp: type) -> None:  # noqa: ARG002
        """Record **tp** as the established element type."""
        return None

    def _new(self, data: list[T] | None) -> Self:
        """Create a container of the same kind around **data**, without checks."""
        new = object.__new__(self.__class__)
        new._inner = data
        return new

    @staticmethod
    def _matches(tp: type, elem: object) -> bool:
        if tp is int and isinstance(elem, bool):
            return False
        return isinstance(elem, tp)

    def _validated(self, elems: Iterable[object]) -> list[T]:
        items = [deref(e) for e in elems]
        if not items:
            return []
        tp = self._target_type(items)
        for item in items:
            if not self._matches(tp, item):
                msg = f"can't insert type '{type(item).__name__}' into 'list[{tp.__name__}]'"
                raise TypeMismatchError(msg)
        self._adopt(tp)
        return items

    def _storage(self) -> list[T]:
        if self._inner is None:
            self._inner = []
        return self._inner

    # state
    # ------------------------------------------------------------

    def len(self) -> int:
        """Return the number of elements, `0` for a nil container.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([1, 2]).len()
        2
        >>> nb.RefSlice().len()
        0

        ```
        """
        return 0 if self._inner is None else len(self._inner)

    def nil(self) -> bool:
        """Test if no storage has been allocated yet.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.RefSlice().nil()
        True
        >>> nb.RefSlice().append("a").nil()
        False
        >>> nb.IntSlice().nil()
        False

        ```
        """
        return self._inner is None

    def empty(self) -> bool:
        """Test if there is nothing to iterate, true for both nil and empty containers.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice().empty(), nb.RefSlice().empty(), nb.IntSlice([1]).empty()
        (True, True, False)

        ```
        """
        return not self._inner

    def single(self) -> bool:
        """Test if there is exactly one element."""
        return self.len() == 1

    def clear(self) -> Self:
        """Remove every element, allocating storage if the container was nil.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([1, 2, 3]).clear()
        IntSlice()
        >>> nb.RefSlice().clear().nil()
        False

        ```
        """
        self._storage().clear()
        return self

    # insertion
    # ------------------------------------------------------------

    def append(self, elem: T) -> Self:
        """Append **elem** to the end and return `Self` for chaining.

        Raises:
            TypeMismatchError: If **elem** doesn't match the element type, the container is left unchanged.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([1]).append(2).append(3)
        IntSlice(1, 2, 3)
        >>> nb.StrSlice(["a"]).append(2)
        Traceback (most recent call last):
            ...
        pynub._core._errors.TypeMismatchError: can't insert type 'int' into 'list[str]'

        ```
        """
        items = self._validated((elem,))
        self._storage().extend(items)
        return self

    def append_all(self, *elems: T) -> Self:
        """Append every given element, checking all of them before any is added.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice().append_all(1, 2, 3)
        IntSlice(1, 2, 3)

        ```
        """
        items = self._validated(elems)
        self._storage().extend(items)
        return self

    def concat_in_place(self, other: Iterable[T]) -> Self:
        """Append the elements of **other** (a `Slice` or any iterable) to this container.

        Example:
        ```python
        >>> import pynub as nb
        >>> data = nb.IntSlice([1, 2])
        >>> data.concat_in_place(nb.IntSlice([3])).concat_in_place([4, 5])
        IntSlice(1, 2, 3, 4, 5)

        ```
        """
        return self.append_all(*as_items(other))

    def concat(self, other: Iterable[T]) -> Self:
        """Return a new container holding this container's elements followed by **other**'s.

        Example:
        ```python
        >>> import pynub as nb
        >>> data = nb.IntSlice([1, 2])
        >>> data.concat([3])
        IntSlice(1, 2, 3)
        >>> data
        IntSlice(1, 2)

        ```
        """
        return self.copy().concat_in_place(other)

    def insert(self, i: int, elem: T) -> Self:
        """Insert **elem** before the element at index **i**.

        With a negative **i** the element is inserted after the addressed element, so `-1` appends.

        Invalid indices leave the container unchanged, and an empty container always appends.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([1, 2, 3]).insert(0, 0)
        IntSlice(0, 1, 2, 3)
        >>> nb.IntSlice([1, 2, 3]).insert(1, 9)
        IntSlice(1, 9, 2, 3)
        >>> nb.IntSlice([1, 2, 3]).insert(-1, 9)
        IntSlice(1, 2, 3, 9)
        >>> nb.IntSlice([1, 2, 3]).insert(-2, 9)
        IntSlice(1, 2, 9, 3)
        >>> nb.IntSlice([1, 2, 3]).insert(5, 9)
        IntSlice(1, 2, 3)

        ```
        """
        items = self._validated((elem,))
        if self.empty():
            self._storage().extend(items)
            return self
        j = abs_index(self.len(), i)
        if j == -1:
            return self
        if i < 0:
            j += 1
        self._storage()[j:j] = items
        return self

    def prepend(self, elem: T) -> Self:
        """Insert **elem** at the beginning.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.StrSlice(["b"]).prepend("a")
        StrSlice('a', 'b')

        ```
        """
        return self.insert(0, elem)

    def set(self, i: int, elem: T) -> Self:
        """Replace the element at index **i** with **elem**.

        This is the fail fast tier, see `set_checked()` for the one returning a `Result`.

        Raises:
            IndexOutOfBoundsError: If **i** is out of bounds.
            TypeMismatchError: If **elem** doesn't match the element type.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([1, 2, 3]).set(-1, 9)
        IntSlice(1, 2, 9)
        >>> nb.IntSlice([1, 2, 3]).set(3, 9)
        Traceback (most recent call last):
            ...
        pynub._core._errors.IndexOutOfBoundsError: slice assignment is out of bounds

        ```
        """
        match self.set_checked(i, elem):
            case Err(error):
                raise error
            case _:
                return self

    def set_checked(self, i: int, elem: T) -> Result[Self, NubError]:
        """Replace the element at index **i** with **elem**, reporting failures as an `Err`.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([1, 2, 3]).set_checked(0, 0)
        Ok(IntSlice(0, 2, 3))
        >>> nb.IntSlice([1, 2, 3]).set_checked(0, "a")
        Err(TypeMismatchError("can't insert type 'str' into 'list[int]'"))

        ```
        """
        j = abs_index(self.len(), i)
        if j == -1:
            return Err(IndexOutOfBoundsError("slice assignment is out of bounds"))
        try:
            items = self._validated((elem,))
        except TypeMismatchError as e:
            return Err(e)
        self._storage()[j] = items[0]
        return Ok(self)

    # access
    # ------------------------------------------------------------

    def at(self, i: int) -> Option[T]:
        """Return the element at index **i**, `NONE` if out of bounds.

        Example:
        ```python
        >>> import pynub as nb
        >>> data = nb.IntSlice([1, 2, 3])
        >>> data.at(0), data.at(-1), data.at(3)
        (Some(1), Some(3), NONE)

        ```
        """
        j = abs_index(self.len(), i)
        if j == -1:
            return NONE
        return Some(self._storage()[j])

    def first(self) -> Option[T]:
        """Return the first element, `NONE` if empty."""
        return self.at(0)

    def last(self) -> Option[T]:
        """Return the last element, `NONE` if empty."""
        return self.at(-1)

    def pair(self) -> tuple[Option[T], Option[T]]:
        """Return the first two elements.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.StrSlice(["k", "v", "x"]).pair()
        (Some('k'), Some('v'))
        >>> nb.StrSlice(["k"]).pair()
        (Some('k'), NONE)

        ```
        """
        return self.at(0), self.at(1)

    def first_n(self, n: int) -> Self:
        """Return a new container with the first **n** elements, or as many as exist.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([1, 2, 3]).first_n(2)
        IntSlice(1, 2)
        >>> nb.IntSlice([1, 2, 3]).first_n(10)
        IntSlice(1, 2, 3)

        ```
        """
        if n == 0:
            return self._new([])
        return self.slice(0, abs(n) - 1)

    def last_n(self, n: int) -> Self:
        """Return a new container with the last **n** elements, or as many as exist.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([1, 2, 3]).last_n(2)
        IntSlice(2, 3)

        ```
        """
        if n == 0:
            return self._new([])
        return self.slice(abs_neg(n), -1)

    def copy(self, *indices: int) -> Self:
        """Return a new independent container with the elements of the given inclusive range.

        Without indices everything is copied.

        Out of bounds indices are moved within bounds, mutually exclusive ones give an empty container.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([1, 2, 3]).copy()
        IntSlice(1, 2, 3)
        >>> nb.IntSlice([1, 2, 3]).copy(1, 2)
        IntSlice(2, 3)
        >>> nb.IntSlice([1, 2, 3]).copy(2, 1)
        IntSlice()

        ```
        """
        if self._inner is None:
            return self._new(None)
        return (
            abs_indices(self.len(), *indices)
            .map(lambda r: self._new(self._storage()[r[0] : r[1]]))
            .unwrap_or_else(lambda _: self._new([]))
        )

    def slice(self, *indices: int) -> Self:
        """Return a new container with the elements of the inclusive range `[i, j]`.

        `slice(0, -1)` always returns every element.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([1, 2, 3]).slice(0, -1)
        IntSlice(1, 2, 3)
        >>> nb.IntSlice([1, 2, 3]).slice(-2, -1)
        IntSlice(2, 3)
        >>> nb.IntSlice([1, 2, 3]).slice(-10, 0)
        IntSlice(1)

        ```
        """
        return self.copy(*indices)

    # removal
    # ------------------------------------------------------------

    def drop(self, *indices: int) -> Self:
        """Delete the elements of the inclusive range `[i, j]`, everything without indices.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([1, 2, 3, 4]).drop(1, 2)
        IntSlice(1, 4)
        >>> nb.IntSlice([1, 2, 3, 4]).drop()
        IntSlice()

        ```
        """
        match abs_indices(self.len(), *indices):
            case Ok((i, j)):
                del self._storage()[i:j]
            case _:
                pass
        return self

    def drop_at(self, i: int) -> Self:
        """Delete the element at index **i**, nothing happens if out of bounds.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([1, 2, 3]).drop_at(-2)
        IntSlice(1, 3)

        ```
        """
        if abs_index(self.len(), i) == -1:
            return self
        return self.drop(i, i)

    def drop_first(self) -> Self:
        """Delete the first element."""
        return self.drop_at(0)

    def drop_first_n(self, n: int) -> Self:
        """Delete the first **n** elements.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([1, 2, 3]).drop_first_n(2)
        IntSlice(3)

        ```
        """
        if n == 0:
            return self
        return self.drop(0, abs(n) - 1)

    def drop_last(self) -> Self:
        """Delete the last element."""
        return self.drop_at(-1)

    def drop_last_n(self, n: int) -> Self:
        """Delete the last **n** elements.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([1, 2, 3]).drop_last_n(2)
        IntSlice(1)

        ```
        """
        if n == 0:
            return self
        return self.drop(abs_neg(n), -1)

    def drop_where(self, predicate: Callable[[T], bool]) -> Self:
        """Delete the elements for which **predicate** returns `True`.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([1, 2, 3, 4]).drop_where(lambda x: x % 2 == 0)
        IntSlice(1, 3)

        ```
        """
        self.take_where(predicate)
        return self

    def take(self, *indices: int) -> Self:
        """Remove the elements of the inclusive range `[i, j]` and return them as a new container.

        Example:
        ```python
        >>> import pynub as nb
        >>> data = nb.IntSlice([1, 2, 3, 4])
        >>> data.take(1, 2)
        IntSlice(2, 3)
        >>> data
        IntSlice(1, 4)

        ```
        """
        taken = self.copy(*indices)
        self.drop(*indices)
        return taken

    def take_at(self, i: int) -> Option[T]:
        """Remove the element at index **i** and return it, `NONE` if out of bounds."""
        elem = self.at(i)
        self.drop_at(i)
        return elem

    def take_where(self, predicate: Callable[[T], bool]) -> Self:
        """Remove the elements for which **predicate** returns `True` and return them as a new container.

        Example:
        ```python
        >>> import pynub as nb
        >>> data = nb.IntSlice([1, 2, 3, 4])
        >>> data.take_where(lambda x: x > 2)
        IntSlice(3, 4)
        >>> data
        IntSlice(1, 2)

        ```
        """
        if self.empty():
            return self._new([])
        kept, taken = (list(part) for part in mit.partition(predicate, self._storage()))
        self._storage()[:] = kept
        return self._new(taken)

    def pop(self) -> Option[T]:
        """Remove the last element and return it.

        Example:
        ```python
        >>> import pynub as nb
        >>> data = nb.IntSlice([1, 2, 3])
        >>> data.pop(), data
        (Some(3), IntSlice(1, 2))

        ```
        """
        elem = self.last()
        self.drop_last()
        return elem

    def pop_n(self, n: int) -> Self:
        """Remove the last **n** elements and return them as a new container.

        Example:
        ```python
        >>> import pynub as nb
        >>> data = nb.IntSlice([1, 2, 3])
        >>> data.pop_n(2), data
        (IntSlice(2, 3), IntSlice(1))

        ```
        """
        if n == 0:
            return self._new([])
        taken = self.copy(abs_neg(n), -1)
        self.drop_last_n(n)
        return taken

    def shift(self) -> Option[T]:
        """Remove the first element and return it.

        Example:
        ```python
        >>> import pynub as nb
        >>> data = nb.IntSlice([1, 2, 3])
        >>> data.shift(), data
        (Some(1), IntSlice(2, 3))

        ```
        """
        elem = self.first()
        self.drop_first()
        return elem

    def shift_n(self, n: int) -> Self:
        """Remove the first **n** elements and return them as a new container."""
        if n == 0:
            return self._new([])
        taken = self.copy(0, abs(n) - 1)
        self.drop_first_n(n)
        return taken

    # iteration
    # ------------------------------------------------------------

    def each(self, func: Callable[[T], object]) -> Self:
        """Call **func** once for each element.

        Exceptions raised by **func** stop the iteration and propagate as is.

        Example:
        ```python
        >>> import pynub as nb
        >>> _ = nb.IntSlice([1, 2]).each(print)
        1
        2

        ```
        """
        for elem in self:
            func(elem)
        return self

    def each_with_index(self, func: Callable[[int, T], object]) -> Self:
        """Call **func** once for each element with its index."""
        for i, elem in enumerate(self):
            func(i, elem)
        return self

    def each_reverse(self, func: Callable[[T], object]) -> Self:
        """Call **func** once for each element, starting from the last one.

        Example:
        ```python
        >>> import pynub as nb
        >>> _ = nb.IntSlice([1, 2]).each_reverse(print)
        2
        1

        ```
        """
        for elem in reversed(self._inner or ()):
            func(elem)
        return self

    def each_reverse_with_index(self, func: Callable[[int, T], object]) -> Self:
        """Call **func** once for each element with its index, starting from the last one."""
        data = self._inner or []
        for i in range(len(data) - 1, -1, -1):
            func(i, data[i])
        return self

    def try_each[E](self, func: Callable[[T], Result[Any, E]]) -> Result[Self, E]:
        """Call **func** once for each element until it returns an `Err`.

        The first `Err` aborts the iteration and is returned unchanged, otherwise `Ok(self)` is returned.

        Example:
        ```python
        >>> import pynub as nb
        >>> def check(x: int) -> nb.Result[int, str]:
        ...     return nb.Ok(x) if x < 2 else nb.Err(f"{x} is too big")
        >>> nb.IntSlice([0, 1]).try_each(check)
        Ok(IntSlice(0, 1))
        >>> nb.IntSlice([1, 2, 3]).try_each(check)
        Err('2 is too big')

        ```
        """
        for elem in self:
            match func(elem):
                case Err() as err:
                    return err
                case _:
                    pass
        return Ok(self)

    def try_each_with_index[E](
        self, func: Callable[[int, T], Result[Any, E]]
    ) -> Result[Self, E]:
        """Like `try_each()`, with the index passed before each element."""
        for i, elem in enumerate(self):
            match func(i, elem):
                case Err() as err:
                    return err
                case _:
                    pass
        return Ok(self)

    def try_each_reverse[E](self, func: Callable[[T], Result[Any, E]]) -> Result[Self, E]:
        """Like `try_each()`, starting from the last element."""
        for elem in reversed(self._inner or ()):
            match func(elem):
                case Err() as err:
                    return err
                case _:
                    pass
        return Ok(self)

    def try_each_reverse_with_index[E](
        self, func: Callable[[int, T], Result[Any, E]]
    ) -> Result[Self, E]:
        """Like `try_each_with_index()`, starting from the last element."""
        data = self._inner or []
        for i in range(len(data) - 1, -1, -1):
            match func(i, data[i]):
                case Err() as err:
                    return err
                case _:
                    pass
        return Ok(self)

    # queries
    # ------------------------------------------------------------

    def index(self, elem: object) -> int:
        """Return the index of the first element equal to **elem**, or `-1`.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.StrSlice(["a", "b"]).index("b"), nb.StrSlice(["a"]).index("z")
        (1, -1)

        ```
        """
        elem = deref(elem)
        for i, x in enumerate(self):
            if x == elem:
                return i
        return -1

    def contains(self, elem: object) -> bool:
        """Test if an element equal to **elem** exists."""
        return self.index(elem) != -1

    def contains_any(self, *elems: object) -> bool:
        """Test if any of **elems** exists.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([1, 2, 3]).contains_any(5, 3)
        True
        >>> nb.IntSlice([1, 2, 3]).contains_any()
        False

        ```
        """
        return any(self.contains(e) for e in elems)

    def any(self, *elems: object) -> bool:
        """Test if the container has elements, or if it contains any of **elems** when given.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([1]).any(), nb.IntSlice().any(), nb.IntSlice([1]).any(2)
        (True, False, False)

        ```
        """
        if self.empty():
            return False
        if not elems:
            return True
        return self.contains_any(*elems)

    def any_s(self, other: Iterable[object]) -> bool:
        """Test if this container contains any of the elements of **other**."""
        return self.contains_any(*as_items(other))

    def any_where(self, predicate: Callable[[T], bool]) -> bool:
        """Test if any element matches **predicate**."""
        return self.count_where(predicate) != 0

    def count(self, elem: object) -> int:
        """Count the elements equal to **elem**."""
        elem = deref(elem)
        return self.count_where(lambda x: x == elem)

    def count_where(self, predicate: Callable[[T], bool]) -> int:
        """Count the elements matching **predicate**.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([1, 2, 3, 4]).count_where(lambda x: x > 1)
        3

        ```
        """
        return mit.quantify(self, predicate)

    def less(self, i: int, j: int) -> bool:
        """Test if the element at **i** is less than the element at **j**, `False` for invalid indices."""
        n = self.len()
        if n < 2 or not (0 <= i < n and 0 <= j < n):  # noqa: PLR2004
            return False
        data = self._storage()
        return data[i] < data[j]  # type: ignore[operator]

    def swap(self, i: int, j: int) -> Self:
        """Swap the elements at **i** and **j**, nothing happens for invalid indices."""
        n = self.len()
        if n < 2 or not (0 <= i < n and 0 <= j < n):  # noqa: PLR2004
            return self
        data = self._storage()
        data[i], data[j] = data[j], data[i]
        return self

    def join(self, separator: str | None = None) -> Str:
        """Join the string form of every element with **separator**, a comma by default.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([1, 2, 3]).join()
        Str('1,2,3')
        >>> nb.StrSlice(["a", "b"]).join("-").inner()
        'a-b'

        ```
        """
        from .._str import Str

        sep = get_config().join_separator if separator is None else separator
        return Str(sep.join(str(x) for x in self))

    # projections
    # ------------------------------------------------------------

    def map[U](self, func: Callable[[T], U]) -> RefSlice[U]:
        """Project each element through **func** into a new `RefSlice`.

        The element type of the result is established by the first returned value.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([1, 2]).map(str)
        RefSlice('1', '2')
        >>> nb.IntSlice([]).map(str).nil()
        True

        ```
        """
        from ._ref import RefSlice

        result: RefSlice[U] = RefSlice()
        for elem in self:
            result.append(func(elem))
        return result

    def select(self, predicate: Callable[[T], bool]) -> Self:
        """Return a new container with the elements matching **predicate**.

        Example:
        ```python
        >>> import pynub as nb
        >>> data = nb.IntSlice([1, 2, 3, 4])
        >>> data.select(lambda x: x % 2 == 0), data
        (IntSlice(2, 4), IntSlice(1, 2, 3, 4))

        ```
        """
        return self._new([x for x in self if predicate(x)])

    def reverse_in_place(self) -> Self:
        """Reverse the order of the elements in place."""
        if self._inner is not None:
            self._inner.reverse()
        return self

    def reverse(self) -> Self:
        """Return a new container with the elements in reverse order.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([1, 2, 3]).reverse()
        IntSlice(3, 2, 1)

        ```
        """
        return self.copy().reverse_in_place()

    def sort_in_place(self, key: Callable[[T], SupportsRichComparison] | None = None) -> Self:
        """Sort the elements in place in ascending order."""
        if self._inner is not None:
            self._inner.sort(key=key)
        return self

    def sort(self, key: Callable[[T], SupportsRichComparison] | None = None) -> Self:
        """Return a new container with the elements sorted in ascending order.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.StrSlice(["b", "c", "a"]).sort()
        StrSlice('a', 'b', 'c')
        >>> nb.StrSlice(["bb", "c", "aaa"]).sort(key=len)
        StrSlice('c', 'bb', 'aaa')

        ```
        """
        return self.copy().sort_in_place(key)

    def sort_descending_in_place(
        self, key: Callable[[T], SupportsRichComparison] | None = None
    ) -> Self:
        """Sort the elements in place in descending order."""
        if self._inner is not None:
            self._inner.sort(key=key, reverse=True)
        return self

    def sort_descending(
        self, key: Callable[[T], SupportsRichComparison] | None = None
    ) -> Self:
        """Return a new container with the elements sorted in descending order.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([2, 3, 1]).sort_descending()
        IntSlice(3, 2, 1)

        ```
        """
        return self.copy().sort_descending_in_place(key)

    def uniq_in_place(self) -> Self:
        """Remove duplicates in place, keeping the first occurrence of each element."""
        if self.len() > 1:
            self._storage()[:] = _unique(self._storage())
        return self

    def uniq(self) -> Self:
        """Return a new container without duplicates, keeping first-seen order.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([1, 2, 2, 3, 1]).uniq()
        IntSlice(1, 2, 3)

        ```
        """
        return self.copy().uniq_in_place()

    def union_in_place(self, other: Iterable[T]) -> Self:
        """Append the elements of **other** then remove duplicates, keeping first-seen order."""
        return self.concat_in_place(other).uniq_in_place()

    def union(self, other: Iterable[T]) -> Self:
        """Return a new container with the unique elements of this container followed by those of **other**.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([1, 2, 2]).union([2, 3, 1, 4])
        IntSlice(1, 2, 3, 4)

        ```
        """
        return self.copy().union_in_place(other)
