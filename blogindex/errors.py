"""Exception types raised by the index build."""

from pathlib import Path
from typing import Optional


class BlogIndexError(Exception):
    """Base class for all build errors."""


class ConfigError(BlogIndexError):
    """Configuration could not be loaded or is invalid."""


class ArticlesRootNotFoundError(BlogIndexError, FileNotFoundError):
    """The articles root directory does not exist. Aborts the build."""

    def __init__(self, root: Path) -> None:
        self.root = root
        super().__init__(f"Articles root not found: {root}")


class SourceError(BlogIndexError):
    """A single source file could not be turned into a record."""

    def __init__(self, path: Path, message: str, cause: Optional[Exception] = None) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"{path}: {message}")


class SourceReadError(SourceError):
    """Source file could not be read or decoded."""


class MetadataParseError(SourceError):
    """Leading metadata block is present but unparseable."""


class MissingTitleError(SourceError):
    """Extracted metadata has no title."""
