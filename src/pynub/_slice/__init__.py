from ._base import Slice
from ._factory import slice_of, slice_v
from ._ref import RefSlice
from ._typed import BoolSlice, IntSlice, StrSlice

__all__ = [
    "BoolSlice",
    "IntSlice",
    "RefSlice",
    "Slice",
    "StrSlice",
    "slice_of",
    "slice_v",
]
