"""YAML helpers: scalar inference for path predicates and a loader returning a `Queryable`."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import cytoolz as cz
import yaml

from ._core import deref

if TYPE_CHECKING:
    from ._query import Queryable

logger = logging.getLogger(__name__)

_QUOTES = ('"', "'")
_BOOLS = {"true": True, "false": False}


def yaml_type(text: str) -> str | bool | float:
    """Convert **text** into the value YAML would give it.

    - Quoted text gives the string without its quotes.
    - `true` and `false` give a `bool`.
    - A numeric literal gives a `float`.
    - Anything else is returned unchanged.

    Example:
    ```python
    >>> import pynub as nb
    >>> nb.yaml_type('"1"'), nb.yaml_type("'test'")
    ('1', 'test')
    >>> nb.yaml_type("25"), nb.yaml_type("true")
    (25.0, True)
    >>> nb.yaml_type("True")
    'True'

    ```
    """
    if len(text) >= 2 and text[0] in _QUOTES and text[-1] == text[0]:  # noqa: PLR2004
        return text[1:-1]
    if text in _BOOLS:
        return _BOOLS[text]
    if text != text.strip() or "_" in text:
        return text
    try:
        return float(text)
    except ValueError:
        return text


def same_value(a: object, b: object) -> bool:
    """Compare two inferred scalars, never treating a `bool` as equal to a number.

    Example:
    ```python
    >>> from pynub._yaml import same_value
    >>> same_value(1, 1.0), same_value(True, 1.0), same_value(True, True)
    (True, False, True)

    ```
    """
    return a == b and isinstance(a, bool) is isinstance(b, bool)


def stringify_keys(data: Any) -> Any:  # noqa: ANN401
    """Recursively convert every mapping key of **data** to `str`."""
    match data:
        case Mapping():
            return {str(k): stringify_keys(v) for k, v in data.items()}
        case list() | tuple():
            return [stringify_keys(x) for x in data]
        case _:
            return data


def load_yaml(text: str | bytes) -> Queryable:
    """Parse a YAML document into a `Queryable`.

    Mapping keys are converted to strings so that `1:` is addressable as `"1"`.

    Raises:
        yaml.YAMLError: If **text** is not valid YAML.

    Example:
    ```python
    >>> import pynub as nb
    >>> q = nb.load_yaml("1:\\n  2: two\\n")
    >>> q.yaml("1.2").to_str()
    'two'
    >>> q.yaml("1.3").any()
    False

    ```
    """
    from ._query import Queryable

    data = yaml.safe_load(text)
    logger.debug("loaded YAML document of type %s", type(data).__name__)
    return Queryable(stringify_keys(data))


def dump_yaml(data: Any) -> str:  # noqa: ANN401
    """Serialize **data** to a YAML document, unwrapping pynub wrappers first."""
    return yaml.safe_dump(
        cz.functoolz.pipe(data, deref, stringify_keys), default_flow_style=False
    )
