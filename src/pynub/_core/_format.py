from collections.abc import Mapping, Sequence
from pprint import pformat
from typing import Any

from ._config import get_config


def seq_repr(name: str, v: Sequence[Any] | None) -> str:
    if v is None:
        return f"{name}(<nil>)"
    max_items = get_config().max_repr_items
    parts = [repr(x) for x in v[:max_items]]
    if len(v) > max_items:
        parts.append("...")
    return f"{name}({', '.join(parts)})"


def dict_repr(
    v: Mapping[Any, Any],
    depth: int = 3,
    width: int = 80,
    *,
    compact: bool = True,
) -> str:
    max_items = get_config().max_repr_items
    truncated = dict(list(v.items())[:max_items])
    suffix = "..." if len(v) > max_items else ""
    return pformat(truncated, depth=depth, width=width, compact=compact) + suffix
