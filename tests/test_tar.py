"""Tests for the tar archive helpers."""

import os
import tarfile
from pathlib import Path

import pytest

import pynub as nb
from pynub import nos
from pynub.arch import tar

MTIME = 1_500_000_000
ATIME = 1_400_000_000


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """A source directory with nested files, modes and fixed times."""
    src = tmp_path / "src"
    nos.write_lines(src / "top.txt", ["top"])
    nos.write_lines(src / "sub" / "nested.txt", ["nested"])
    script = nos.write_lines(src / "sub" / "run.sh", ["#!/bin/sh"])
    script.chmod(0o755)
    for path in (src / "top.txt", src / "sub" / "nested.txt", script):
        os.utime(path, (ATIME, MTIME))
    return src


def test_create_uses_relative_names(tree: Path, tmp_path: Path) -> None:  # noqa: D103
    archive = tar.create(tmp_path / "out.tar.gz", tree)
    with tarfile.open(archive, "r:gz") as f:
        names = set(f.getnames())
    assert {"top.txt", "sub", "sub/nested.txt", "sub/run.sh"} <= names
    assert all(not n.startswith("/") for n in names)


def test_round_trip_restores_content_mode_and_times(tree: Path, tmp_path: Path) -> None:
    """Extraction restores files, their modes and their access/modification times."""
    archive = tar.create(tmp_path / "out.tar.gz", tree)
    dest = tar.extract_all(archive, tmp_path / "dest")

    assert nos.read_lines(dest / "top.txt") == ["top"]
    assert nos.md5(dest / "sub" / "nested.txt") == nos.md5(tree / "sub" / "nested.txt")

    script = dest / "sub" / "run.sh"
    assert script.stat().st_mode & 0o777 == 0o755  # noqa: PLR2004

    stat = script.stat()
    assert int(stat.st_mtime) == MTIME
    assert int(stat.st_atime) == ATIME


def test_create_missing_source_raises(tmp_path: Path) -> None:  # noqa: D103
    with pytest.raises(nb.NubIOError):
        tar.create(tmp_path / "out.tar.gz", tmp_path / "missing" / "deeper")


def test_extract_missing_archive_raises(tmp_path: Path) -> None:  # noqa: D103
    with pytest.raises(nb.NubIOError, match="failed to extract"):
        tar.extract_all(tmp_path / "missing.tar.gz", tmp_path / "dest")
