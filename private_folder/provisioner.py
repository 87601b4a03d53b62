"""Provisioner — one-shot, re-runnable setup of a repository's private area.

Steps, each aborting ``init`` on the first failure:

1. ``.private/`` directory
2. ``.private/.gitignore`` copied from the bundled template
3. ``.private/config.toml``, reserving a fresh external folder if absent
4. reload of ``config.toml``
5. ``.private/files`` symlink to the external folder

A second run against a provisioned repository changes nothing.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

from platformdirs import user_config_dir

from private_folder.config import load_config, save_config
from private_folder.errors import ReservationError
from private_folder.models import (
    FolderConfig,
    InitReport,
    PrivateAreaLayout,
    RepositoryContext,
    external_target,
)
from private_folder.naming import generate_candidate_name
from private_folder.resources import GITIGNORE_TEMPLATE, PackageResources, ResourceProvider
from private_folder.utils.fs_guard import (
    EntryKind,
    EntryState,
    ensure_directory,
    ensure_file,
    ensure_symlink_directory,
    probe,
)
from private_folder.utils.git_ops import find_repository

BASE_DIR_MODE = 0o755

NameSource = Callable[[], str]


def user_config_root() -> Path:
    """The platform's per-user configuration directory (``$XDG_CONFIG_HOME`` on Linux)."""
    return Path(user_config_dir())


class PrivateFolderProvisioner:
    """Provisions the private area of one working tree."""

    def __init__(
        self,
        context: RepositoryContext,
        config_root: Path | None = None,
        resources: ResourceProvider | None = None,
        name_source: NameSource = generate_candidate_name,
    ):
        self.context = context
        self.layout = PrivateAreaLayout.for_repository(context)
        self.config_root = Path(config_root) if config_root is not None else user_config_root()
        self.resources = resources or PackageResources()
        self.name_source = name_source

    @classmethod
    def discover(cls, start: str | Path = ".", **kwargs) -> "PrivateFolderProvisioner":
        """Build a provisioner for the working tree enclosing ``start``.

        Raises ``RepositoryNotFoundError`` before any path is touched.
        """
        return cls(find_repository(start), **kwargs)

    def init(self) -> InitReport:
        report = InitReport()
        layout = self.layout

        report.record(layout.base_dir, ensure_directory(layout.base_dir, BASE_DIR_MODE))
        report.record(
            layout.gitignore_path,
            ensure_file(layout.gitignore_path, self._write_gitignore),
        )

        report.record(layout.config_path, ensure_file(layout.config_path, self._create_config))

        # Always reload, so a pre-existing but unreadable config fails here.
        config = load_config(layout.config_path)
        target = external_target(self.config_root, config.folder_name)
        report.folder_name = config.folder_name
        report.target = target

        report.record(
            layout.local_link_path,
            ensure_symlink_directory(layout.local_link_path, lambda path: _link(path, target)),
        )
        return report

    def reserve_folder(self) -> str:
        """Claim an unused ``<config-root>/private-folder/<name>`` and return the name.

        Candidates that are already taken are skipped; there is no retry
        cap. Any other filesystem error raises ``ReservationError``.
        """
        while True:
            candidate = self.name_source()
            target = external_target(self.config_root, candidate)
            try:
                if probe(target, EntryKind.DIRECTORY) is not EntryState.ABSENT:
                    continue
                target.parent.mkdir(parents=True, exist_ok=True)
                target.mkdir()
            except FileExistsError:
                continue
            except OSError as e:
                raise ReservationError(target, e) from e
            return candidate

    def _write_gitignore(self, path: Path) -> None:
        path.write_bytes(self.resources.read(GITIGNORE_TEMPLATE))

    def _create_config(self, path: Path) -> None:
        save_config(path, FolderConfig(folder_name=self.reserve_folder()))


def _link(path: Path, target: Path) -> None:
    # The name in config.toml is fixed; if its folder vanished, bring back the same one.
    target.mkdir(parents=True, exist_ok=True)
    os.symlink(target, path, target_is_directory=True)
