"""Git operations — locate the working tree that encloses a path."""

from __future__ import annotations

from pathlib import Path

from git import InvalidGitRepositoryError, NoSuchPathError, Repo

from private_folder.errors import RepositoryNotFoundError
from private_folder.models import RepositoryContext


def find_repository(start: str | Path = ".") -> RepositoryContext:
    """Resolve the working-tree root of the repository enclosing ``start``.

    Parent directories are searched the same way ``git`` itself does.

    Raises:
        RepositoryNotFoundError: If ``start`` is not inside a git working tree
            (bare repositories have no working tree and count as not found).
    """
    path = Path(start)
    try:
        repo = Repo(path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        raise RepositoryNotFoundError(path) from None

    try:
        if repo.bare or repo.working_tree_dir is None:
            raise RepositoryNotFoundError(path)
        return RepositoryContext(root=Path(repo.working_tree_dir).resolve())
    finally:
        repo.close()
