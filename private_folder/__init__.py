"""private-folder: a per-machine private area inside a git working tree."""

__version__ = "0.1.0"
