"""Filesystem helpers: copying, hashing, directory creation and path utilities."""

from ._fs import (
    abs_path,
    copy,
    copy_file,
    exists,
    is_dir,
    is_file,
    md5,
    mkdir_p,
    read_lines,
    shared_dir,
    touch,
    write_lines,
)

__all__ = [
    "abs_path",
    "copy",
    "copy_file",
    "exists",
    "is_dir",
    "is_file",
    "md5",
    "mkdir_p",
    "read_lines",
    "shared_dir",
    "touch",
    "write_lines",
]
