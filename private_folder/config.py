"""Configuration store for ``.private/config.toml``."""

from __future__ import annotations

import os
import tempfile
import tomllib
from pathlib import Path

import tomli_w

from private_folder.errors import ConfigCorruptError, ConfigMissingError
from private_folder.models import FolderConfig

FOLDER_NAME_KEY = "folderName"


def load_config(path: Path) -> FolderConfig:
    """Parse the folder config at ``path``.

    Raises:
        ConfigMissingError: If ``path`` does not exist.
        ConfigCorruptError: If the file is not TOML or lacks a usable
            ``folderName`` string.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        raise ConfigMissingError(path) from None
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ConfigCorruptError(path, f"invalid TOML: {e}") from e

    folder_name = data.get(FOLDER_NAME_KEY)
    if not isinstance(folder_name, str) or not folder_name.strip():
        raise ConfigCorruptError(path, f"missing or invalid '{FOLDER_NAME_KEY}'")
    if "/" in folder_name or os.sep in folder_name or folder_name in (".", ".."):
        raise ConfigCorruptError(path, f"'{FOLDER_NAME_KEY}' is not a plain folder name")
    if any(ch.isspace() or not ch.isprintable() for ch in folder_name):
        raise ConfigCorruptError(path, f"'{FOLDER_NAME_KEY}' contains whitespace or control characters")
    return FolderConfig(folder_name=folder_name)


def save_config(path: Path, config: FolderConfig) -> None:
    """Write ``config`` to ``path`` via a temp file and an atomic rename."""
    payload = tomli_w.dumps({FOLDER_NAME_KEY: config.folder_name}).encode("utf-8")
    fd, tmp_name = tempfile.mkstemp(prefix=".config-", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(payload)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_name, 0o666 & ~_current_umask())
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def _current_umask() -> int:
    # The umask can only be read by setting it.
    mask = os.umask(0o022)
    os.umask(mask)
    return mask
