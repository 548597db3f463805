from ._config import NubConfig, get_config, set_config
from ._errors import IndexOutOfBoundsError, NubError, NubIOError, TypeMismatchError
from ._index import abs_index, abs_indices, abs_neg
from ._logging import setup_logger
from ._main import CommonBase, Pipeable, deref

__all__ = [
    "CommonBase",
    "IndexOutOfBoundsError",
    "NubConfig",
    "NubError",
    "NubIOError",
    "Pipeable",
    "TypeMismatchError",
    "abs_index",
    "abs_indices",
    "abs_neg",
    "deref",
    "get_config",
    "set_config",
    "setup_logger",
]
