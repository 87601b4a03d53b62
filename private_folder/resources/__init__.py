"""Bundled template files and the providers that read them.

The data files sit next to this module and are installed as package data.
"""

from __future__ import annotations

from importlib import resources
from typing import Mapping, Protocol

from private_folder.errors import ResourceMissingError

GITIGNORE_TEMPLATE = "gitignore"


class ResourceProvider(Protocol):
    def read(self, name: str) -> bytes: ...


class PackageResources:
    """Reads templates installed alongside this package."""

    def __init__(self, package: str = __name__):
        self.package = package

    def read(self, name: str) -> bytes:
        resource = resources.files(self.package).joinpath(name)
        if name.startswith("_") or name.endswith(".py") or not resource.is_file():
            raise ResourceMissingError(name)
        return resource.read_bytes()


class StaticResources:
    """In-memory templates, keyed by logical name."""

    def __init__(self, contents: Mapping[str, bytes]):
        self.contents = dict(contents)

    def read(self, name: str) -> bytes:
        try:
            return self.contents[name]
        except KeyError:
            raise ResourceMissingError(name) from None
