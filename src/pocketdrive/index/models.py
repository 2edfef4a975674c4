# File index data model.
# Created: 2026-10-19

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Entry:
    """One filesystem node as exposed to a caller.

    ``path`` is root-relative and ``/``-separated. ``size`` is ``None``
    exactly when the entry is a directory.
    """

    name: str
    is_directory: bool
    path: str
    created: datetime | None = None
    size: int | None = None


@dataclass(frozen=True)
class FileRef:
    """A file found by a tree scan."""

    name: str
    path: str
