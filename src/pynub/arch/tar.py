"""Helpers for gzip compressed tar archives."""

from __future__ import annotations

import logging
import os
import tarfile as tf
from pathlib import Path

from .._core import NubIOError
from ..nos import abs_path, mkdir_p
from ..nos._fs import StrPath

logger = logging.getLogger(__name__)


def _tar_info(tar: tf.TarFile, path: Path, arcname: str) -> tf.TarInfo:
    info = tar.gettarinfo(path, arcname=arcname)
    info.pax_headers = {"atime": str(path.stat().st_atime)}
    return info


def create(tarfile: StrPath, src_path: StrPath) -> Path:
    """Create the gzip compressed archive **tarfile** from the content of the directory **src_path**.

    Entry names are relative to **src_path**, and modes, access and modification times are recorded.

    Returns:
        Path: The absolute path of the archive.

    Raises:
        NubIOError: If the directory can't be read or the archive can't be written.
    """
    archive, src = abs_path(tarfile), abs_path(src_path)
    if not src.is_dir():
        raise NubIOError(f"failed to read directory {src} to add files from")
    logger.debug("creating archive %s from %s", archive, src)
    try:
        with tf.open(archive, "w:gz", format=tf.PAX_FORMAT) as tar:
            for path in sorted(src.rglob("*")):
                if path == archive:
                    continue
                info = _tar_info(tar, path, path.relative_to(src).as_posix())
                if info.isreg():
                    with path.open("rb") as f:
                        tar.addfile(info, f)
                else:
                    tar.addfile(info)
    except OSError as err:
        raise NubIOError(f"failed to create tarfile {archive} from {src}") from err
    return archive


def extract_all(tarfile: StrPath, dest: StrPath) -> Path:
    """Extract every entry of the gzip compressed archive **tarfile** into **dest**.

    **dest** is created when missing, and file modes, access and modification times are restored.

    Returns:
        Path: The absolute path of **dest**.

    Raises:
        NubIOError: If the archive can't be read or an entry can't be written.
    """
    archive, target = abs_path(tarfile), mkdir_p(dest)
    logger.debug("extracting archive %s into %s", archive, target)
    try:
        with tf.open(archive, "r:gz") as tar:
            members = tar.getmembers()
            tar.extractall(target, members=members, filter="data")
    except (OSError, tf.TarError) as err:
        raise NubIOError(f"failed to extract tarfile {archive} into {target}") from err

    for member in members:
        path = target / member.name
        if member.issym() or not path.exists():
            continue
        atime = float(member.pax_headers.get("atime", member.mtime))
        try:
            os.utime(path, (atime, member.mtime))
        except OSError as err:
            raise NubIOError(f"failed to set file access times for {path}") from err
    return target
