"""Index normalization shared by every container.

Positive indices count from the start, negative ones from the end (-1 is the last element).

Ranges are inclusive on both ends, so `(0, -1)` always means "everything".
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .._results import Result


def abs_index(length: int, i: int) -> int:
    """Convert **i** into a zero based index for a collection of **length** elements.

    Args:
        length (int): Number of elements in the collection.
        i (int): Positive or negative index.

    Returns:
        int: The absolute index, or `-1` if **i** is out of bounds.

    Example:
    ```python
    >>> from pynub import abs_index
    >>> abs_index(3, -1)
    2
    >>> abs_index(3, 1)
    1
    >>> abs_index(3, 3)
    -1
    >>> abs_index(3, -4)
    -1

    ```
    """
    if i < 0:
        i = length + i
    if i < 0 or i >= length:
        return -1
    return i


def abs_indices(length: int, *indices: int) -> Result[tuple[int, int], IndexError]:
    """Convert an inclusive index range into a half-open `(start, end)` pair.

    - No index selects everything.
    - A single index **i** selects from **i** to the last element.
    - Two indices **i** and **j** select from **i** to **j**, both included.

    Out of bounds indices are moved within bounds.

    Mutually exclusive indices, an empty collection, or more than two indices give an `Err`.

    Args:
        length (int): Number of elements in the collection.
        *indices (int): Zero, one or two positive or negative indices.

    Returns:
        Result[tuple[int, int], IndexError]: The `(start, end)` pair usable with python slicing.

    Example:
    ```python
    >>> from pynub import abs_indices
    >>> abs_indices(3)
    Ok((0, 3))
    >>> abs_indices(3, 0, -1)
    Ok((0, 3))
    >>> abs_indices(3, 1, 10)
    Ok((1, 3))
    >>> abs_indices(3, -2)
    Ok((1, 3))
    >>> abs_indices(3, 2, 1).is_err()
    True

    ```
    """
    from .._results import Err, Ok

    if length <= 0:
        return Err(IndexError("no elements to index"))

    match indices:
        case ():
            return Ok((0, length))
        case (i,):
            j = -1
        case (i, j):
            pass
        case _:
            return Err(IndexError(f"expected at most two indices, got {len(indices)}"))

    if i < 0:
        i = length + i
    if j < 0:
        j = length + j
    if i > j:
        return Err(IndexError(f"indices {indices} are mutually exclusive"))

    i = max(i, 0)
    j = min(j, length - 1)
    if i >= length or j < 0:
        return Err(IndexError(f"indices {indices} are out of bounds"))
    return Ok((i, j + 1))


def abs_neg(n: int) -> int:
    """Return the negative notation of **n**, used to address the last **n** elements.

    Example:
    ```python
    >>> from pynub import abs_neg
    >>> abs_neg(2), abs_neg(-2)
    (-2, -2)

    ```
    """
    return -abs(n)
