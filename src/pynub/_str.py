from __future__ import annotations

from typing import TYPE_CHECKING, Self

from ._core import CommonBase
from ._yaml import yaml_type

if TYPE_CHECKING:
    from ._query import Queryable
    from ._slice import StrSlice


class Str(CommonBase[str]):
    """A chainable wrapper around a `str`.

    Every transforming method returns a new `Str`, the wrapped string is never mutated.

    Example:
    ```python
    >>> import pynub as nb
    >>> nb.Str("  [key]  ").trim_space().trim_prefix("[").trim_suffix("]")
    Str('key')

    ```
    """

    __slots__ = ()

    def __init__(self, data: str = "") -> None:
        self._inner = data

    @classmethod
    def from_(cls, obj: object) -> Self:
        """Create a `Str` from a `str`, from `bytes` decoded as UTF-8, or from the `str()` of anything else.

        `None` gives an empty `Str`.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.Str.from_(b"abc"), nb.Str.from_(12), nb.Str.from_(None)
        (Str('abc'), Str('12'), Str(''))

        ```
        """
        match obj:
            case str():
                return cls(obj)
            case bytes() | bytearray():
                return cls(obj.decode("utf-8", errors="replace"))
            case None:
                return cls()
            case CommonBase():
                return cls.from_(obj.inner())
            case _:
                return cls(str(obj))

    def __repr__(self) -> str:
        return f"Str({self._inner!r})"

    def __str__(self) -> str:
        return self._inner

    def __len__(self) -> int:
        return len(self._inner)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Str):
            return self._inner == other._inner
        return self._inner == other

    def __hash__(self) -> int:
        return hash(self._inner)

    def b(self) -> bytes:
        """Return the string encoded as UTF-8 bytes."""
        return self._inner.encode()

    def q(self) -> Queryable:
        """Wrap the string in a `Queryable`."""
        from ._query import Queryable

        return Queryable(self._inner)

    def len(self) -> int:
        """Return the number of characters."""
        return len(self._inner)

    def empty(self) -> bool:
        """Test if the string is empty or only made of whitespace.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.Str(" \\t").empty(), nb.Str(" a ").empty()
        (True, False)

        ```
        """
        return not self._inner.strip()

    def contains(self, target: str) -> bool:
        """Test if **target** is a substring."""
        return target in self._inner

    def contains_any(self, *targets: str) -> bool:
        """Test if any of **targets** is a substring.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.Str("foobar").contains_any("bob", "bar")
        True

        ```
        """
        return any(t in self._inner for t in targets)

    def has_prefix(self, prefix: str) -> bool:
        return self._inner.startswith(prefix)

    def has_suffix(self, suffix: str) -> bool:
        return self._inner.endswith(suffix)

    def has_any_prefix(self, *prefixes: str) -> bool:
        return self._inner.startswith(prefixes)

    def has_any_suffix(self, *suffixes: str) -> bool:
        return self._inner.endswith(suffixes)

    def replace(self, old: str, new: str, n: int = -1) -> Self:
        """Replace the first **n** occurrences of **old** by **new**, all of them by default.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.Str("a.b.c").replace(".", "/")
        Str('a/b/c')
        >>> nb.Str("a.b.c").replace(".", "/", 1)
        Str('a/b.c')

        ```
        """
        return self.__class__(self._inner.replace(old, new, n))

    def space_left(self) -> str:
        """Return the leading whitespace.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.Str("  bob").space_left()
        '  '

        ```
        """
        return self._inner[: len(self._inner) - len(self._inner.lstrip())]

    def split(self, delim: str) -> StrSlice:
        """Split on every occurrence of **delim**.

        An empty **delim** splits between every character.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.Str("a,b,,c").split(",")
        StrSlice('a', 'b', '', 'c')
        >>> nb.Str("abc").split("")
        StrSlice('a', 'b', 'c')

        ```
        """
        from ._slice import StrSlice

        if not delim:
            return StrSlice(list(self._inner))
        return StrSlice(self._inner.split(delim))

    def split_on(self, delim: str) -> tuple[str, str]:
        """Split on the first occurrence of **delim**, keeping the delimiter on the first part.

        Example:
        ```python
        >>> import pynub as nb
        >>> nb.Str("foo: bar:frodo").split_on(":")
        ('foo:', ' bar:frodo')
        >>> nb.Str("foo").split_on(":")
        ('foo', '')
        >>> nb.Str("abc").split_on("")
        ('a', 'bc')

        ```
        """
        if not self._inner:
            return "", ""
        if not delim:
            return self._inner[:1], self._inner[1:]
        first, found, second = self._inner.partition(delim)
        return first + found, second

    def trim_prefix(self, prefix: str) -> Self:
        return self.__class__(self._inner.removeprefix(prefix))

    def trim_suffix(self, suffix: str) -> Self:
        return self.__class__(self._inner.removesuffix(suffix))

    def trim_space(self) -> Self:
        """Strip leading and trailing whitespace."""
        return self.__class__(self._inner.strip())

    def trim_space_left(self) -> Self:
        """Strip leading whitespace."""
        return self.__class__(self._inner.lstrip())

    def trim_space_right(self) -> Self:
        """Strip trailing whitespace."""
        return self.__class__(self._inner.rstrip())

    def yaml_type(self) -> str | bool | float:
        """Convert the string into the value YAML would give it, see `yaml_type()`."""
        return yaml_type(self._inner)
