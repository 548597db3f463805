"""Archive helpers."""

from . import tar

__all__ = ["tar"]
