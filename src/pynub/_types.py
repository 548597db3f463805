from __future__ import annotations

from typing import Any, NamedTuple, Protocol


class KeyVal[K, V](NamedTuple):
    """Represents a key-value pair of a mapping.

    Iterating a mapping through a `Queryable` yields `KeyVal` items, so maps and sequences can be consumed uniformly.
    """

    key: K
    """The key of the item."""
    val: V
    """The value associated with the key."""

    def __repr__(self) -> str:
        return f"({self.key!r}, {self.val!r})"


# typeshed protocols


class SupportsDunderLT[T](Protocol):
    def __lt__(self, other: T, /) -> bool: ...


class SupportsDunderGT[T](Protocol):
    def __gt__(self, other: T, /) -> bool: ...


type SupportsRichComparison = SupportsDunderLT[Any] | SupportsDunderGT[Any]
