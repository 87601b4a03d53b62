"""Tests for the filesystem guard primitives."""

import os
import tempfile
from pathlib import Path

import pytest

from private_folder.errors import ConflictingEntryError
from private_folder.utils.fs_guard import (
    EntryKind,
    EntryState,
    ensure_directory,
    ensure_file,
    ensure_symlink_directory,
    probe,
)


def _fail(path: Path) -> None:
    raise AssertionError(f"create action should not run for {path}")


# --- probe ---


def test_probe_absent():
    with tempfile.TemporaryDirectory() as tmpdir:
        missing = Path(tmpdir) / "missing"
        for kind in EntryKind:
            assert probe(missing, kind) is EntryState.ABSENT


def test_probe_directory_and_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        (root / "dir").mkdir()
        (root / "file").write_text("x")

        assert probe(root / "dir", EntryKind.DIRECTORY) is EntryState.RIGHT_TYPE
        assert probe(root / "dir", EntryKind.FILE) is EntryState.WRONG_TYPE
        assert probe(root / "file", EntryKind.FILE) is EntryState.RIGHT_TYPE
        assert probe(root / "file", EntryKind.DIRECTORY) is EntryState.WRONG_TYPE


def test_probe_symlinks():
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        (root / "dir").mkdir()
        (root / "file").write_text("x")
        os.symlink(root / "dir", root / "to_dir")
        os.symlink(root / "file", root / "to_file")
        os.symlink(root / "gone", root / "dangling")

        assert probe(root / "to_dir", EntryKind.SYMLINK_DIRECTORY) is EntryState.RIGHT_TYPE
        assert probe(root / "to_file", EntryKind.SYMLINK_DIRECTORY) is EntryState.WRONG_TYPE
        assert probe(root / "dangling", EntryKind.SYMLINK_DIRECTORY) is EntryState.WRONG_TYPE
        assert probe(root / "dir", EntryKind.SYMLINK_DIRECTORY) is EntryState.WRONG_TYPE
        # lstat: a symlink to a directory is not itself a directory
        assert probe(root / "to_dir", EntryKind.DIRECTORY) is EntryState.WRONG_TYPE


# --- ensure_directory ---


def test_ensure_directory_creates_with_ancestors():
    with tempfile.TemporaryDirectory() as tmpdir:
        target = Path(tmpdir) / "a" / "b" / "c"
        assert ensure_directory(target, 0o755) is True
        assert target.is_dir()


def test_ensure_directory_existing_is_noop():
    with tempfile.TemporaryDirectory() as tmpdir:
        target = Path(tmpdir) / "dir"
        target.mkdir()
        (target / "keep.txt").write_text("keep")
        assert ensure_directory(target) is False
        assert (target / "keep.txt").read_text() == "keep"


def test_ensure_directory_conflict_with_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        target = Path(tmpdir) / "dir"
        target.write_text("not a dir")
        with pytest.raises(ConflictingEntryError) as exc:
            ensure_directory(target)
        assert exc.value.path == target
        assert target.read_text() == "not a dir"


# --- ensure_file ---


def test_ensure_file_runs_create_when_absent():
    with tempfile.TemporaryDirectory() as tmpdir:
        target = Path(tmpdir) / "file"
        assert ensure_file(target, lambda p: p.write_text("new")) is True
        assert target.read_text() == "new"


def test_ensure_file_existing_is_noop():
    with tempfile.TemporaryDirectory() as tmpdir:
        target = Path(tmpdir) / "file"
        target.write_text("old")
        assert ensure_file(target, _fail) is False
        assert target.read_text() == "old"


def test_ensure_file_accepts_symlink_to_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        (root / "real").write_text("x")
        os.symlink(root / "real", root / "link")
        assert ensure_file(root / "link", _fail) is False


def test_ensure_file_conflict_with_directory():
    with tempfile.TemporaryDirectory() as tmpdir:
        target = Path(tmpdir) / "file"
        target.mkdir()
        with pytest.raises(ConflictingEntryError):
            ensure_file(target, _fail)


# --- ensure_symlink_directory ---


def test_ensure_symlink_directory_creates_when_absent():
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        (root / "target").mkdir()
        link = root / "link"
        assert ensure_symlink_directory(link, lambda p: os.symlink(root / "target", p)) is True
        assert link.is_symlink()


def test_ensure_symlink_directory_existing_is_noop():
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        (root / "target").mkdir()
        os.symlink(root / "target", root / "link")
        assert ensure_symlink_directory(root / "link", _fail) is False


def test_ensure_symlink_directory_rejects_real_directory():
    with tempfile.TemporaryDirectory() as tmpdir:
        link = Path(tmpdir) / "link"
        link.mkdir()
        with pytest.raises(ConflictingEntryError) as exc:
            ensure_symlink_directory(link, _fail)
        assert exc.value.expected == "symlink"


def test_ensure_symlink_directory_rejects_link_to_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        (root / "file").write_text("x")
        os.symlink(root / "file", root / "link")
        with pytest.raises(ConflictingEntryError):
            ensure_symlink_directory(root / "link", _fail)


def test_ensure_symlink_directory_rejects_dangling_link():
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        os.symlink(root / "gone", root / "link")
        with pytest.raises(ConflictingEntryError) as exc:
            ensure_symlink_directory(root / "link", _fail)
        assert "gone" in str(exc.value)


def test_ensure_symlink_directory_rejects_self_referencing_link():
    with tempfile.TemporaryDirectory() as tmpdir:
        link = Path(tmpdir) / "link"
        os.symlink(link, link)
        assert probe(link, EntryKind.SYMLINK_DIRECTORY) is EntryState.WRONG_TYPE
        with pytest.raises(ConflictingEntryError):
            ensure_symlink_directory(link, _fail)


def test_ensure_symlink_directory_rejects_link_through_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        (root / "file").write_text("x")
        os.symlink(root / "file" / "below", root / "link")
        with pytest.raises(ConflictingEntryError):
            ensure_symlink_directory(root / "link", _fail)
