class NubError(Exception):
    """Base class for every error raised by pynub."""


class TypeMismatchError(NubError, TypeError):
    """An element of the wrong type was given to a typed container."""


class IndexOutOfBoundsError(NubError, IndexError):
    """An assignment targeted an index outside of the container."""


class NubIOError(NubError, OSError):
    """A filesystem or archive helper failed, the cause is chained."""
