# Root-confined path resolution.
# Created: 2026-10-19

from __future__ import annotations

import os
from pathlib import Path

from pocketdrive.index.errors import AccessDenied


class PathResolver:
    """Join client-relative paths onto a fixed root, refusing escapes.

    Resolution is lexical only (``os.path.normpath``); it never touches the
    filesystem, so symlinks inside the root are not followed here.
    """

    def __init__(self, root: str | os.PathLike[str]):
        self.root = os.path.normpath(os.path.abspath(os.fspath(root)))

    def resolve(self, user_path: str = "") -> str:
        """Return the absolute path for *user_path* or raise :class:`AccessDenied`."""
        if not user_path:
            return self.root

        candidate = os.path.normpath(os.path.join(self.root, user_path))
        if not self.contains(candidate):
            raise AccessDenied()
        return candidate

    def contains(self, absolute_path: str) -> bool:
        if absolute_path == self.root:
            return True
        prefix = self.root if self.root.endswith(os.sep) else self.root + os.sep
        return absolute_path.startswith(prefix)

    def relative(self, absolute_path: str) -> str:
        """Root-relative, ``/``-separated form of *absolute_path* (``""`` for the root)."""
        rel = os.path.relpath(absolute_path, self.root)
        if rel == os.curdir:
            return ""
        return Path(rel).as_posix()
