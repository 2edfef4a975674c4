# File index service: one request from validated path to result.
# Created: 2026-10-19

from __future__ import annotations

import asyncio
import logging
import os
import stat
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pocketdrive.index.errors import InvalidAction, NotFound, ScanTimeout
from pocketdrive.index.fuzzy import matches
from pocketdrive.index.lister import list_directory, stat_entry
from pocketdrive.index.models import Entry, FileRef
from pocketdrive.index.paths import PathResolver
from pocketdrive.index.scanner import TreeScanner

logger = logging.getLogger(__name__)


class Action(str, Enum):
    LIST = "list"
    PREVIEW = "preview"
    DOWNLOAD = "download"

    @classmethod
    def parse(cls, value: str | None) -> Action:
        if not value:
            return cls.LIST
        try:
            return cls(value)
        except ValueError:
            raise InvalidAction() from None


@dataclass
class ListResult:
    """Entries for list or search mode, plus the path the client asked for."""

    files: list[Entry] = field(default_factory=list)
    current_path: str = ""

    @property
    def empty(self) -> bool:
        return not self.files


@dataclass
class FileContent:
    """Raw bytes of one file for preview or download."""

    data: bytes
    filename: str
    attachment: bool = False


class FileIndexService:
    """Dispatch list/search/preview/download against a fixed root.

    The root is injected once; no directory state is kept between calls.
    """

    def __init__(
        self,
        root: str | os.PathLike[str],
        scan_timeout: float | None = None,
        io_timeout: float | None = None,
    ):
        self.resolver = PathResolver(root)
        self.scanner = TreeScanner(self.resolver.root)
        self.scan_timeout = scan_timeout
        self.io_timeout = io_timeout

    @property
    def root(self) -> str:
        return self.resolver.root

    async def handle(
        self, path: str = "", search: str = "", action: str | None = "list"
    ) -> ListResult | FileContent:
        act = Action.parse(action)
        target = self.resolver.resolve(path)

        is_dir = await self._bounded(_stat_target, target)
        if is_dir is None and not search:
            raise NotFound()

        if act is Action.LIST:
            return await self.browse(target, path, search, is_dir=bool(is_dir))
        return await self.read(target, attachment=act is Action.DOWNLOAD)

    async def browse(
        self, target: str, current_path: str = "", search: str = "", is_dir: bool = False
    ) -> ListResult:
        if search:
            files = await self.search(search)
        elif is_dir:
            files = await self._bounded(
                list_directory, target, self.resolver.relative(target)
            )
        else:
            files = []
        return ListResult(files=files, current_path=current_path)

    async def search(self, query: str) -> list[Entry]:
        """Scan the whole root and return matching files as full entries."""
        refs = await self.scanner.scan(timeout=self.scan_timeout)
        hits = [ref for ref in refs if matches(ref.name, query)]
        logger.debug("Search %r: %d of %d files matched", query, len(hits), len(refs))
        return await self._bounded(self._stat_hits, hits)

    async def read(self, target: str, attachment: bool = False) -> FileContent:
        data = await self._bounded(_read_bytes, target)
        return FileContent(data=data, filename=os.path.basename(target), attachment=attachment)

    def _stat_hits(self, hits: list[FileRef]) -> list[Entry]:
        entries = []
        for ref in hits:
            try:
                entries.append(stat_entry(os.path.join(self.root, ref.path), ref.path))
            except OSError as e:
                # Removed between scan and stat.
                logger.debug("Dropping search hit %s: %s", ref.path, e)
        return entries

    async def _bounded(self, fn: Any, *args: Any) -> Any:
        try:
            return await asyncio.wait_for(asyncio.to_thread(fn, *args), timeout=self.io_timeout)
        except asyncio.TimeoutError:
            raise ScanTimeout(f"Operation timed out after {self.io_timeout}s") from None


def _stat_target(path: str) -> bool | None:
    """``None`` if *path* does not exist, else whether it is a directory."""
    try:
        st = os.stat(path)
    except OSError:
        return None
    return stat.S_ISDIR(st.st_mode)


def _read_bytes(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()
