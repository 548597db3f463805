"""Filesystem helpers.

Every failure is raised as a `NubIOError` naming the path involved, with the original `OSError` chained.
"""

from __future__ import annotations

import hashlib
import logging
import os
import shutil
from collections.abc import Iterable
from pathlib import Path

from .._core import NubIOError

logger = logging.getLogger(__name__)

type StrPath = str | os.PathLike[str]

_CHUNK_SIZE = 64 * 1024


def abs_path(target: StrPath) -> Path:
    """Return **target** as an absolute path, with `~` expanded.

    Example:
    ```python
    >>> from pynub import nos
    >>> nos.abs_path("/tmp/../tmp/x").as_posix()
    '/tmp/x'

    ```
    """
    return Path(os.path.abspath(Path(target).expanduser()))


def exists(target: StrPath) -> bool:
    return Path(target).exists()


def is_dir(target: StrPath) -> bool:
    return Path(target).is_dir()


def is_file(target: StrPath) -> bool:
    return Path(target).is_file()


def mkdir_p(target: StrPath) -> Path:
    """Create the directory **target** and any missing parent, returning its absolute path."""
    path = abs_path(target)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as err:
        raise NubIOError(f"failed to create directory {path}") from err
    return path


def touch(target: StrPath) -> Path:
    """Create the file **target** if missing, along with its parent directories, or update its times."""
    path = abs_path(target)
    mkdir_p(path.parent)
    try:
        path.touch()
    except OSError as err:
        raise NubIOError(f"failed to touch file {path}") from err
    return path


def copy_file(src: StrPath, dst: StrPath) -> Path:
    """Copy the file **src** to **dst**, keeping its mode and times.

    When **dst** is an existing directory the file is copied into it.

    Returns:
        Path: The path of the new file.
    """
    src_path, dst_path = abs_path(src), abs_path(dst)
    if dst_path.is_dir():
        dst_path = dst_path / src_path.name
    else:
        mkdir_p(dst_path.parent)
    logger.debug("copying file %s to %s", src_path, dst_path)
    try:
        return Path(shutil.copy2(src_path, dst_path))
    except OSError as err:
        raise NubIOError(f"failed to copy file {src_path} to {dst_path}") from err


def copy(src: StrPath, dst: StrPath) -> Path:
    """Copy a file or a whole directory tree from **src** to **dst**.

    Directories are merged into an existing **dst**.
    """
    src_path, dst_path = abs_path(src), abs_path(dst)
    if not src_path.is_dir():
        return copy_file(src_path, dst_path)
    logger.debug("copying directory %s to %s", src_path, dst_path)
    try:
        return Path(shutil.copytree(src_path, dst_path, dirs_exist_ok=True))
    except (OSError, shutil.Error) as err:
        raise NubIOError(f"failed to copy directory {src_path} to {dst_path}") from err


def md5(target: StrPath) -> str:
    """Return the hex encoded MD5 digest of the file **target**."""
    path = abs_path(target)
    digest = hashlib.md5(usedforsecurity=False)
    try:
        with path.open("rb") as f:
            for chunk in iter(lambda: f.read(_CHUNK_SIZE), b""):
                digest.update(chunk)
    except OSError as err:
        raise NubIOError(f"failed to compute md5 of {path}") from err
    return digest.hexdigest()


def read_lines(target: StrPath) -> list[str]:
    """Read the text file **target** into a list of lines, without line endings."""
    path = abs_path(target)
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except OSError as err:
        raise NubIOError(f"failed to read file {path}") from err


def write_lines(target: StrPath, lines: Iterable[str]) -> Path:
    """Write **lines** to the text file **target**, each followed by a newline."""
    path = abs_path(target)
    mkdir_p(path.parent)
    try:
        path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    except OSError as err:
        raise NubIOError(f"failed to write file {path}") from err
    return path


def shared_dir(first: str, second: str) -> str:
    """Return the leading directory both paths have in common, `""` if there is none.

    Example:
    ```python
    >>> from pynub import nos
    >>> nos.shared_dir("/foo/bar/1", "/foo/bar/2")
    '/foo/bar'
    >>> nos.shared_dir("foo/bar1", "foo/bar2")
    'foo'
    >>> nos.shared_dir("/bob", "/foo")
    ''

    ```
    """
    shared: list[str] = []
    for a, b in zip(first.split("/"), second.split("/"), strict=False):
        if a != b:
            break
        shared.append(a)
    return "/".join(shared)
