from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


@dataclass(slots=True, frozen=True)
class NubConfig:
    """Library wide settings.

    Attributes:
        max_repr_items (int): Number of elements shown by container `__repr__` before truncating.
        join_separator (str): Default separator used by `Slice.join()`.
        path_separator (str): Separator used by dotted path lookups.
    """

    max_repr_items: int = 20
    join_separator: str = ","
    path_separator: str = "."


_CONFIG = NubConfig()


def get_config() -> NubConfig:
    """Return the active configuration.

    Example:
    ```python
    >>> import pynub as nb
    >>> nb.get_config().join_separator
    ','

    ```
    """
    return _CONFIG


def set_config(**changes: Any) -> NubConfig:  # noqa: ANN401
    """Replace fields of the active configuration and return the new one.

    Unknown fields raise a `TypeError`.

    Example:
    ```python
    >>> import pynub as nb
    >>> nb.set_config(max_repr_items=3).max_repr_items
    3
    >>> nb.IntSlice(range(5))
    IntSlice(0, 1, 2, ...)
    >>> nb.set_config(max_repr_items=20).max_repr_items
    20

    ```
    """
    global _CONFIG  # noqa: PLW0603
    _CONFIG = replace(_CONFIG, **changes)
    return _CONFIG
