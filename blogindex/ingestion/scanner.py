"""Recursive discovery of article source files."""

import os
from pathlib import Path
from typing import List

from ..errors import ArticlesRootNotFoundError


class SourceScanner:
    """Find every article source file under a root directory."""

    def __init__(self, root: Path, extension: str = ".md", skip_hidden: bool = False) -> None:
        self.root = Path(root)
        self.extension = extension
        self.skip_hidden = skip_hidden

    def scan(self) -> List[Path]:
        """
        Walk the root depth-first and collect matching files.

        Every subdirectory is visited unless skip_hidden is set, in which case
        dot-prefixed directories and files are left out.

        Returns:
            Paths of every file whose suffix equals the configured extension.
            Order follows the directory walk and carries no meaning.

        Raises:
            ArticlesRootNotFoundError: If the root is missing or not a directory.
        """
        if not self.root.is_dir():
            raise ArticlesRootNotFoundError(self.root)

        found = []
        for dirpath, dirnames, filenames in os.walk(self.root):
            if self.skip_hidden:
                dirnames[:] = [d for d in dirnames if not d.startswith(".")]
                filenames = [f for f in filenames if not f.startswith(".")]
            for name in filenames:
                if os.path.splitext(name)[1] == self.extension:
                    found.append(Path(dirpath) / name)
        return found

    def relative(self, path: Path) -> str:
        """Path relative to the root, always '/' separated."""
        return Path(path).relative_to(self.root).as_posix()
