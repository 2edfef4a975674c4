# File browser schemas.
# Created: 2026-10-19

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from pocketdrive.index.models import Entry


class FileEntry(BaseModel):
    """A single file or directory entry."""

    name: str
    isDirectory: bool = False
    path: str
    created: datetime | None = None
    size: int | None = None

    @classmethod
    def from_entry(cls, entry: Entry) -> FileEntry:
        return cls(
            name=entry.name,
            isDirectory=entry.is_directory,
            path=entry.path,
            created=entry.created,
            size=entry.size,
        )


class FilesResponse(BaseModel):
    """Directory listing or search results."""

    files: list[FileEntry] = []
    currentPath: str = ""


class EmptyFilesResponse(FilesResponse):
    """Listing or search with nothing to show."""

    message: str = "No results found"
