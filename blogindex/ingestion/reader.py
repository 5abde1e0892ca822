"""Concurrent source file reader."""

import asyncio
from pathlib import Path
from typing import Callable, List

from .models import SourceFile


class SourceReader:
    """Read source files with bounded concurrency."""

    def __init__(self, relative: Callable[[Path], str], max_concurrent: int = 8, encoding: str = "utf-8") -> None:
        """
        Initialize source reader.

        Args:
            relative: Maps an absolute path to its articles-root relative form
            max_concurrent: Maximum number of files read at once
            encoding: Text encoding of the sources
        """
        self.relative = relative
        self.max_concurrent = max_concurrent
        self.encoding = encoding

    def read_file(self, path: Path) -> SourceFile:
        """Read a single file. Failures are reported on the result, not raised."""
        relative_path = self.relative(path)
        try:
            text = path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            return SourceFile(
                path=path,
                relative_path=relative_path,
                read_success=False,
                error=f"Unreadable file: {e}",
            )
        return SourceFile(path=path, relative_path=relative_path, text=text)

    async def read_all(self, paths: List[Path]) -> List[SourceFile]:
        """Read all files concurrently."""
        if not paths:
            return []

        semaphore = asyncio.Semaphore(self.max_concurrent)

        async def read_with_semaphore(path: Path) -> SourceFile:
            async with semaphore:
                return await asyncio.to_thread(self.read_file, path)

        tasks = [read_with_semaphore(path) for path in paths]
        return list(await asyncio.gather(*tasks))

    def read_all_sync(self, paths: List[Path]) -> List[SourceFile]:
        """Synchronous wrapper for read_all."""
        return asyncio.run(self.read_all(paths))
