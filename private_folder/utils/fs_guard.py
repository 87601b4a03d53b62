"""Filesystem guard — idempotent, type-checked "ensure exists" primitives.

Every provisioning step goes through one of these so that re-running after a
crash, a Ctrl-C or a partial previous run is safe:

- nothing at the path  -> run the creation action
- the right kind there -> no-op
- anything else there  -> ``ConflictingEntryError``

None of them ever deletes, truncates or rewrites an existing entry.
"""

from __future__ import annotations

import os
import stat
from enum import Enum
from pathlib import Path
from typing import Callable

from private_folder.errors import ConflictingEntryError

CreateAction = Callable[[Path], None]


class EntryKind(Enum):
    """What a managed path is supposed to be."""

    DIRECTORY = "directory"
    FILE = "file"  # Anything that is not a directory, symlinks included
    SYMLINK_DIRECTORY = "symlink to a directory"


class EntryState(Enum):
    ABSENT = "absent"
    WRONG_TYPE = "wrong_type"
    RIGHT_TYPE = "right_type"


def probe(path: Path, kind: EntryKind) -> EntryState:
    """Classify ``path`` against the expected ``kind``.

    Only "not found" is turned into ``ABSENT``; any other OS error
    (permission denied, a parent that is a file, ...) propagates.
    """
    try:
        st = os.lstat(path)
    except FileNotFoundError:
        return EntryState.ABSENT

    if kind is EntryKind.DIRECTORY:
        ok = stat.S_ISDIR(st.st_mode)
    elif kind is EntryKind.FILE:
        ok = not stat.S_ISDIR(st.st_mode)
    else:
        ok = stat.S_ISLNK(st.st_mode) and _resolves_to_directory(path)
    return EntryState.RIGHT_TYPE if ok else EntryState.WRONG_TYPE


def _resolves_to_directory(path: Path) -> bool:
    try:
        return stat.S_ISDIR(os.stat(path).st_mode)
    except PermissionError:
        raise
    except OSError:
        # dangling, looping (ELOOP) or routed through a file (ENOTDIR)
        return False


def ensure_directory(path: Path, mode: int = 0o755) -> bool:
    """Create ``path`` (and missing ancestors) unless it is already a directory.

    Returns True when the directory was created.
    """
    state = probe(path, EntryKind.DIRECTORY)
    if state is EntryState.RIGHT_TYPE:
        return False
    if state is EntryState.WRONG_TYPE:
        raise ConflictingEntryError(path, EntryKind.DIRECTORY.value)
    path.mkdir(mode=mode, parents=True)
    return True


def ensure_file(path: Path, create: CreateAction) -> bool:
    """Run ``create(path)`` unless something other than a directory is there.

    A symlink to a file counts as present; only directory-ness is checked.
    """
    state = probe(path, EntryKind.FILE)
    if state is EntryState.RIGHT_TYPE:
        return False
    if state is EntryState.WRONG_TYPE:
        raise ConflictingEntryError(path, EntryKind.FILE.value)
    create(path)
    return True


def ensure_symlink_directory(path: Path, create: CreateAction) -> bool:
    """Run ``create(path)`` unless ``path`` is a symlink resolving to a directory."""
    state = probe(path, EntryKind.SYMLINK_DIRECTORY)
    if state is EntryState.RIGHT_TYPE:
        return False
    if state is EntryState.WRONG_TYPE:
        if not path.is_symlink():
            raise ConflictingEntryError(path, "symlink")
        raise ConflictingEntryError(
            path,
            EntryKind.SYMLINK_DIRECTORY.value,
            reason=f"points to {os.readlink(path)}",
        )
    create(path)
    return True
