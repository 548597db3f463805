import logging

from . import arch, nos
from ._core import (
    CommonBase,
    IndexOutOfBoundsError,
    NubConfig,
    NubError,
    NubIOError,
    Pipeable,
    TypeMismatchError,
    abs_index,
    abs_indices,
    abs_neg,
    deref,
    get_config,
    set_config,
    setup_logger,
)
from ._map import StrMap, merge_map
from ._query import Queryable
from ._results import (
    NONE,
    Err,
    NoneOption,
    Ok,
    Option,
    OptionUnwrapError,
    Result,
    ResultUnwrapError,
    Some,
)
from ._slice import BoolSlice, IntSlice, RefSlice, Slice, StrSlice, slice_of, slice_v
from ._str import Str
from ._types import KeyVal
from ._yaml import dump_yaml, load_yaml, yaml_type

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NONE",
    "BoolSlice",
    "CommonBase",
    "Err",
    "IndexOutOfBoundsError",
    "IntSlice",
    "KeyVal",
    "NoneOption",
    "NubConfig",
    "NubError",
    "NubIOError",
    "Ok",
    "Option",
    "OptionUnwrapError",
    "Pipeable",
    "Queryable",
    "RefSlice",
    "Result",
    "ResultUnwrapError",
    "Slice",
    "Some",
    "Str",
    "StrMap",
    "StrSlice",
    "TypeMismatchError",
    "abs_index",
    "abs_indices",
    "abs_neg",
    "arch",
    "deref",
    "dump_yaml",
    "get_config",
    "load_yaml",
    "merge_map",
    "nos",
    "set_config",
    "setup_logger",
    "slice_of",
    "slice_v",
    "yaml_type",
]
