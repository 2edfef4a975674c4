# Directory listing with per-entry metadata.
# Created: 2026-10-19

from __future__ import annotations

import logging
import os
import posixpath
import stat
from datetime import datetime, timezone

from pocketdrive.index.errors import NotFound
from pocketdrive.index.models import Entry

logger = logging.getLogger(__name__)


def _created_at(st: os.stat_result) -> datetime:
    # st_birthtime is missing on Linux; fall back to the inode change time.
    ts = getattr(st, "st_birthtime", None)
    if ts is None:
        ts = st.st_ctime
    return datetime.fromtimestamp(ts, tz=timezone.utc)


def _stat(absolute_path: str) -> os.stat_result:
    try:
        return os.stat(absolute_path)
    except OSError:
        # Dangling or looping symlink: describe the link itself.
        return os.lstat(absolute_path)


def stat_entry(absolute_path: str, relative_path: str) -> Entry:
    """Build an :class:`Entry` for one node. Raises ``OSError`` if it cannot be stat'ed."""
    st = _stat(absolute_path)
    is_dir = stat.S_ISDIR(st.st_mode)
    return Entry(
        name=os.path.basename(absolute_path),
        is_directory=is_dir,
        path=relative_path,
        created=_created_at(st),
        size=None if is_dir else st.st_size,
    )


def list_directory(absolute_dir: str, relative_dir: str) -> list[Entry]:
    """List the immediate children of *absolute_dir*.

    *relative_dir* is the root-relative form of *absolute_dir* and prefixes
    every returned ``Entry.path``. Entries come back in enumeration order.
    """
    if not os.path.isdir(absolute_dir):
        raise NotFound()

    entries: list[Entry] = []
    with os.scandir(absolute_dir) as it:
        for child in it:
            rel = posixpath.join(relative_dir, child.name) if relative_dir else child.name
            entries.append(stat_entry(child.path, rel))

    logger.debug("Listed %d entries in %s", len(entries), relative_dir or "/")
    return entries
