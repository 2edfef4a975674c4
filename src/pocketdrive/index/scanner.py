# Recursive tree scanner used by search.
# Created: 2026-10-19
#
# Every subdirectory is scanned as its own task; each task returns a local
# list and the parent concatenates after gather(), so no result list is
# shared between tasks. The visited set is only touched on the event loop.

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path

from pocketdrive.index.errors import ScanTimeout
from pocketdrive.index.models import FileRef

logger = logging.getLogger(__name__)


def _is_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def _read_dir(directory: str) -> list[tuple[str, str, str | None]]:
    """Return ``(name, path, realpath_or_None)`` per child; realpath only for directories."""
    children = []
    with os.scandir(directory) as it:
        for entry in it:
            real = os.path.realpath(entry.path) if _is_dir(entry) else None
            children.append((entry.name, entry.path, real))
    return children


class TreeScanner:
    """Flatten every file under *root* into :class:`FileRef` values."""

    def __init__(self, root: str | os.PathLike[str]):
        self.root = os.path.normpath(os.path.abspath(os.fspath(root)))

    async def scan(self, timeout: float | None = None) -> list[FileRef]:
        """Scan the whole tree. Raises :class:`ScanTimeout` if *timeout* elapses."""
        visited = {os.path.realpath(self.root)}
        try:
            files = await asyncio.wait_for(self._walk(self.root, visited), timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning("Scan of %s exceeded %ss", self.root, timeout)
            raise ScanTimeout(f"Search timed out after {timeout}s") from None
        logger.debug("Scanned %d files under %s", len(files), self.root)
        return files

    async def _walk(self, directory: str, visited: set[str]) -> list[FileRef]:
        try:
            children = await asyncio.to_thread(_read_dir, directory)
        except OSError as e:
            logger.debug("Skipping unreadable directory %s: %s", directory, e)
            return []

        files: list[FileRef] = []
        subdirs: list[str] = []
        for name, path, real in children:
            if real is None:
                files.append(FileRef(name=name, path=self._relative(path)))
            elif real in visited:
                logger.debug("Skipping already visited directory %s", path)
            else:
                visited.add(real)
                subdirs.append(path)

        if subdirs:
            branches = await asyncio.gather(*(self._walk(d, visited) for d in subdirs))
            for branch in branches:
                files.extend(branch)
        return files

    def _relative(self, path: str) -> str:
        return Path(os.path.relpath(path, self.root)).as_posix()
