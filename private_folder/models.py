"""Data model for the private area: where things live and what happened."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

PRIVATE_DIR_NAME = ".private"
GITIGNORE_NAME = ".gitignore"
CONFIG_NAME = "config.toml"
LINK_NAME = "files"
APP_DIR_NAME = "private-folder"


@dataclass(frozen=True)
class RepositoryContext:
    """The working tree a single ``init`` operates on."""

    root: Path
    """Absolute path to the working-tree root."""


@dataclass(frozen=True)
class PrivateAreaLayout:
    """Every path inside the repository that ``init`` manages."""

    base_dir: Path

    @classmethod
    def for_repository(cls, context: RepositoryContext) -> "PrivateAreaLayout":
        return cls(base_dir=context.root / PRIVATE_DIR_NAME)

    @property
    def gitignore_path(self) -> Path:
        return self.base_dir / GITIGNORE_NAME

    @property
    def config_path(self) -> Path:
        return self.base_dir / CONFIG_NAME

    @property
    def local_link_path(self) -> Path:
        return self.base_dir / LINK_NAME


@dataclass(frozen=True)
class FolderConfig:
    """The persisted record binding a repository to its external folder.

    ``folder_name`` is stored under the TOML key ``folderName`` and must
    never change once written.
    """

    folder_name: str


def external_target(config_root: Path, folder_name: str) -> Path:
    """Return ``<config-root>/private-folder/<folder_name>``."""
    return config_root / APP_DIR_NAME / folder_name


class StepStatus(Enum):
    CREATED = "created"
    EXISTING = "exists"


@dataclass
class StepOutcome:
    path: Path
    status: StepStatus


@dataclass
class InitReport:
    """What one ``init`` run did to each managed path."""

    folder_name: str = ""
    target: Path | None = None
    steps: list[StepOutcome] = field(default_factory=list)

    def record(self, path: Path, created: bool) -> None:
        self.steps.append(
            StepOutcome(path=path, status=StepStatus.CREATED if created else StepStatus.EXISTING)
        )

    @property
    def changed(self) -> bool:
        return any(s.status is StepStatus.CREATED for s in self.steps)

    def summary(self) -> str:
        if not self.changed:
            return f"private folder already set up ({self.folder_name})"
        created = sum(1 for s in self.steps if s.status is StepStatus.CREATED)
        return f"private folder {self.folder_name}: {created} path(s) created"
