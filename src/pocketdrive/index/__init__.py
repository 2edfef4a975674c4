# File index core: path resolution, listing, scanning, fuzzy search.
# Created: 2026-10-19

from pocketdrive.index.errors import (
    AccessDenied,
    FileIndexError,
    InvalidAction,
    NotFound,
    ScanTimeout,
)
from pocketdrive.index.fuzzy import MAX_EDIT_DISTANCE, edit_distance, matches
from pocketdrive.index.lister import list_directory, stat_entry
from pocketdrive.index.models import Entry, FileRef
from pocketdrive.index.paths import PathResolver
from pocketdrive.index.scanner import TreeScanner
from pocketdrive.index.service import Action, FileContent, FileIndexService, ListResult

__all__ = [
    "AccessDenied",
    "Action",
    "Entry",
    "FileContent",
    "FileIndexError",
    "FileIndexService",
    "FileRef",
    "InvalidAction",
    "ListResult",
    "MAX_EDIT_DISTANCE",
    "NotFound",
    "PathResolver",
    "ScanTimeout",
    "TreeScanner",
    "edit_distance",
    "list_directory",
    "matches",
    "stat_entry",
]
