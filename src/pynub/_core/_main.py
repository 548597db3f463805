from __future__ import annotations

from abc import ABC
from collections.abc import Callable
from typing import Any, Concatenate, Self


class Pipeable:
    """Mixin class providing pipeable methods for fluent chaining."""

    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Convert `Self` to `R`.

        This method allows to pipe the instance into an object or function that can convert `Self` into another type.

        Conceptually, this allow to do `x.into(f)` instead of `f(x)`, hence keeping a fluent chaining style.

        Args:
            func (Callable[Concatenate[Self, P], R]): Function for conversion.
            *args (P.args): Positional arguments to pass to **func**.
            **kwargs (P.kwargs): Keyword arguments to pass to **func**.

        Returns:
            R: The converted value.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([1, 2, 3]).into(lambda s: sum(s))
        6

        ```
        """
        return func(self, *args, **kwargs)

    def inspect[**P](
        self,
        func: Callable[Concatenate[Self, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        """Pass `Self` to **func** to perform side effects without altering the data.

        Args:
            func (Callable[Concatenate[Self, P], object]): Function to apply to the instance for side effects.
            *args (P.args): Positional arguments to pass to **func**.
            **kwargs (P.kwargs): Keyword arguments to pass to **func**.

        Returns:
            Self: The instance itself, unchanged.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.IntSlice([1, 2, 3]).inspect(print).append(4).len()
        IntSlice(1, 2, 3)
        4

        ```
        """
        func(self, *args, **kwargs)
        return self


class CommonBase[T](ABC, Pipeable):
    """Base class for all wrappers.

    Every pynub wrapper holds exactly one underlying value in `_inner`.

    Args:
        data (T): The underlying data to wrap.
    """

    _inner: T

    __slots__ = ("_inner",)

    def __init__(self, data: T) -> None:
        self._inner = data

    def inner(self) -> T:
        """Get the underlying data.

        This is a terminal operation that ends the chain.

        Returns:
            T: The underlying data.
        """
        return self._inner


def deref(obj: Any) -> Any:  # noqa: ANN401
    """Unwrap a single level of indirection.

    pynub wrappers give back their underlying data, `Some` gives back its value, anything else is returned as is.

    Args:
        obj (Any): The possibly wrapped value.

    Returns:
        Any: The unwrapped value.

    Example:
    ```python
    >>> import pynub as nb
    >>> nb.deref(nb.Some(3))
    3
    >>> nb.deref(nb.Str("abc"))
    'abc'
    >>> nb.deref(5)
    5

    ```
    """
    from .._results import Some

    match obj:
        case CommonBase():
            return obj.inner()
        case Some(value):
            return value
        case _:
            return obj
