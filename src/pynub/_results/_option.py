from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """The result of a lookup that may find nothing.

    Point lookups like `Slice.at()`, `Slice.pop()` or `Slice.shift()` return `Some(value)` on a hit and `NONE` on a miss, never raising.
    """

    __slots__ = ()

    @staticmethod
    def from_[V](value: V | None) -> Option[V]:
        """Wrap **value** in `Some`, or return `NONE` if it is `None`.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.Option.from_(2)
        Some(2)
        >>> nb.Option.from_(None)
        NONE

        ```
        """
        return NONE if value is None else Some(value)

    @abstractmethod
    def is_some(self) -> bool:
        """
        Returns `True` if the option is a `Some` value.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([1, 2]).at(1).is_some()
        True
        >>> nb.IntSlice([1, 2]).at(5).is_some()
        False

        ```
        """
        ...

    @abstractmethod
    def is_none(self) -> bool:
        """
        Returns `True` if the option is the `NONE` value.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([]).first().is_none()
        True

        ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.StrSlice(["a", "b"]).last().unwrap()
        'b'
        >>> nb.StrSlice([]).last().unwrap()
        Traceback (most recent call last):
            ...
        pynub._results._option.OptionUnwrapError: called `unwrap` on a `None`

        ```
        """
        ...

    def expect(self, msg: str) -> T:
        """
        Returns the contained `Some` value, or raises `OptionUnwrapError` with **msg**.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.NONE.expect("no element")
        Traceback (most recent call last):
            ...
        pynub._results._option.OptionUnwrapError: no element (called `expect` on a `None`)

        ```
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained `Some` value or **default**.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([1, 2, 3]).at(-1).unwrap_or(0)
        3
        >>> nb.IntSlice([1, 2, 3]).at(-4).unwrap_or(0)
        0

        ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """
        Returns the contained `Some` value or computes it from **f**.
        """
        return self.unwrap() if self.is_some() else f()

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """
        Maps an `Option[T]` to `Option[U]` by applying **f** to a contained value.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.StrSlice(["abc"]).first().map(len)
        Some(3)
        >>> nb.NONE.map(len)
        NONE

        ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """
        Calls **f** with the contained value if `Some`, otherwise returns `NONE`.
        """
        if self.is_some():
            return f(self.unwrap())
        return NONE

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """
        Returns the option if it contains a value, otherwise the result of **f**.
        """
        return self if self.is_some() else f()


@dataclass(slots=True)
class Some[T](Option[T]):
    """Option variant representing the presence of a value.

    Args:
        value (T): The contained value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Some({self.value!r})"

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value."""

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on a `None`")


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""
