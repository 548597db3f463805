from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Never, cast

from ._option import NONE, Option, Some


class ResultUnwrapError(RuntimeError): ...


class Result[T, E](ABC):
    """The outcome of a checked operation.

    The checked API tier (`Slice.set_checked()`, `Slice.try_each()`, `abs_indices()`, ...) returns `Ok(value)` on success and `Err(error)` instead of raising.
    """

    __slots__ = ()

    @abstractmethod
    def is_ok(self) -> bool:
        """
        Returns True if the result is Ok.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([1]).set_checked(0, 5).is_ok()
        True
        >>> nb.IntSlice([1]).set_checked(3, 5).is_ok()
        False

        ```
        """
        ...

    @abstractmethod
    def is_err(self) -> bool:
        """
        Returns True if the result is Err.
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained Ok value, or raises ResultUnwrapError if the result is Err.
        """
        ...

    @abstractmethod
    def unwrap_err(self) -> E:
        """
        Returns the contained Err value, or raises ResultUnwrapError if the result is Ok.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([1]).set_checked(3, 5).unwrap_err()
        IndexOutOfBoundsError('slice assignment is out of bounds')

        ```
        """
        ...

    def expect(self, msg: str) -> T:
        """
        Returns the contained Ok value, or raises ResultUnwrapError with **msg** if the result is Err.

        Raises:
            ResultUnwrapError: If the result is Err, with the provided message and error.
        """
        if self.is_ok():
            return self.unwrap()
        raise ResultUnwrapError(f"{msg}: {self.unwrap_err()}")

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained Ok value or **default**.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.abs_indices(0).unwrap_or((0, 0))
        (0, 0)

        ```
        """
        return self.unwrap() if self.is_ok() else default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """
        Returns the contained Ok value or computes it from the error with **f**.
        """
        return self.unwrap() if self.is_ok() else f(self.unwrap_err())

    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        """
        Maps a Result[T, E] to Result[U, E] by applying **f** to a contained Ok value, leaving Err untouched.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.abs_indices(4, 1, 2).map(lambda r: r[1] - r[0])
        Ok(2)

        ```
        """
        if self.is_ok():
            return Ok(f(self.unwrap()))
        return cast(Result[U, E], self)

    def map_err[F](self, f: Callable[[E], F]) -> Result[T, F]:
        """
        Maps a Result[T, E] to Result[T, F] by applying **f** to a contained Err value, leaving Ok untouched.
        """
        if self.is_err():
            return Err(f(self.unwrap_err()))
        return cast(Result[T, F], self)

    def and_then[U](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """
        Calls **f** if the result is Ok, otherwise returns Err.
        """
        if self.is_ok():
            return f(self.unwrap())
        return cast(Result[U, E], self)

    def ok(self) -> Option[T]:
        """
        Converts the Result into an Option, mapping Ok(v) to Some(v) and Err(e) to NONE.
        """
        if self.is_ok():
            return Some(self.unwrap())
        return NONE

    def err(self) -> Option[E]:
        """
        Converts the Result into an Option, mapping Err(e) to Some(e) and Ok(v) to NONE.
        """
        if self.is_err():
            return Some(self.unwrap_err())
        return NONE


@dataclass(slots=True)
class Ok[T, E](Result[T, E]):
    """Represents a successful value."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Never:
        raise ResultUnwrapError("called `unwrap_err` on Ok")


@dataclass(slots=True)
class Err[T, E](Result[T, E]):
    """Represents an error value."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Never:
        raise ResultUnwrapError(f"called `unwrap` on Err: {self.error!r}")

    def unwrap_err(self) -> E:
        return self.error
