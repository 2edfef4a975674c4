# Shared fixtures: a small directory tree used as the served root.
# Created: 2026-10-19

import pytest

from pocketdrive.config import get_settings

REPORT_SIZE = 10240


@pytest.fixture
def drive_root(tmp_path):
    """root/
    docs/report.pdf   (10240 bytes)
    docs/img/photo.png
    notes.txt
    """
    root = tmp_path / "root"
    (root / "docs" / "img").mkdir(parents=True)
    (root / "docs" / "report.pdf").write_bytes(b"%PDF" + b"\0" * (REPORT_SIZE - 4))
    (root / "docs" / "img" / "photo.png").write_bytes(b"\x89PNG")
    (root / "notes.txt").write_text("remember the milk")
    return root


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
