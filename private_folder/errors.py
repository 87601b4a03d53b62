"""Errors raised while provisioning the private area."""

from __future__ import annotations

from pathlib import Path


class PrivateFolderError(Exception):
    """Base class for every error this package raises on purpose."""


class RepositoryNotFoundError(PrivateFolderError):
    def __init__(self, start: str | Path):
        self.start = Path(start)
        super().__init__(f"no git repository found at or above {self.start}")


class ConflictingEntryError(PrivateFolderError):
    """An existing entry has the wrong type for a path we need to manage.

    Never repaired automatically: the user has to remove or rename the
    entry before running ``init`` again.
    """

    def __init__(self, path: str | Path, expected: str, reason: str = ""):
        self.path = Path(path)
        self.expected = expected
        message = f"{self.path} exists but is not a {expected}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class ResourceMissingError(PrivateFolderError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"bundled resource not found: {name}")


class ConfigError(PrivateFolderError):
    def __init__(self, path: str | Path, message: str):
        self.path = Path(path)
        super().__init__(f"{self.path}: {message}")


class ConfigMissingError(ConfigError):
    def __init__(self, path: str | Path):
        super().__init__(path, "config file does not exist")


class ConfigCorruptError(ConfigError):
    pass


class ReservationError(PrivateFolderError):
    """Claiming an external folder failed for a reason other than a name collision."""

    def __init__(self, path: str | Path, cause: OSError):
        self.path = Path(path)
        super().__init__(f"cannot reserve private folder {self.path}: {cause.strerror or cause}")
