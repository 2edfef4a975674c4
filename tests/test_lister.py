# Tests for directory listing.
# Created: 2026-10-19

import os
from datetime import datetime

import pytest

from pocketdrive.index.errors import NotFound
from pocketdrive.index.lister import list_directory, stat_entry

REPORT_SIZE = 10240


class TestListDirectory:
    def test_docs_scenario(self, drive_root):
        entries = {e.name: e for e in list_directory(str(drive_root / "docs"), "docs")}

        assert set(entries) == {"report.pdf", "img"}
        report, img = entries["report.pdf"], entries["img"]
        assert report.is_directory is False
        assert report.size == REPORT_SIZE
        assert report.path == "docs/report.pdf"
        assert img.is_directory is True
        assert img.size is None
        assert img.path == "docs/img"

    def test_root_listing_paths_have_no_prefix(self, drive_root):
        paths = {e.path for e in list_directory(str(drive_root), "")}
        assert paths == {"docs", "notes.txt"}

    def test_completeness(self, tmp_path):
        for i in range(7):
            (tmp_path / f"f{i}.txt").write_text("x" * i)
        for i in range(3):
            (tmp_path / f"d{i}").mkdir()

        entries = list_directory(str(tmp_path), "")

        assert len(entries) == 10
        assert len({e.path for e in entries}) == 10
        for e in entries:
            assert (e.size is None) == e.is_directory

    def test_not_recursive(self, drive_root):
        names = {e.name for e in list_directory(str(drive_root / "docs"), "docs")}
        assert "photo.png" not in names

    def test_created_is_aware_datetime(self, drive_root):
        entry = list_directory(str(drive_root), "")[0]
        assert isinstance(entry.created, datetime)
        assert entry.created.tzinfo is not None

    def test_empty_directory(self, tmp_path):
        assert list_directory(str(tmp_path), "") == []

    def test_missing_directory(self, tmp_path):
        with pytest.raises(NotFound):
            list_directory(str(tmp_path / "nope"), "nope")

    def test_file_is_not_a_directory(self, drive_root):
        with pytest.raises(NotFound):
            list_directory(str(drive_root / "notes.txt"), "notes.txt")

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
    def test_dangling_symlink_listed(self, tmp_path):
        os.symlink(tmp_path / "gone.txt", tmp_path / "link.txt")

        entries = list_directory(str(tmp_path), "")

        assert [e.name for e in entries] == ["link.txt"]
        assert entries[0].is_directory is False

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
    def test_self_looping_symlink_listed(self, drive_root):
        os.symlink("selfloop", drive_root / "selfloop")

        entries = {e.name: e for e in list_directory(str(drive_root), "")}

        assert set(entries) == {"docs", "notes.txt", "selfloop"}
        assert entries["selfloop"].is_directory is False
        assert entries["selfloop"].size is not None


class TestStatEntry:
    def test_file(self, drive_root):
        entry = stat_entry(str(drive_root / "docs" / "report.pdf"), "docs/report.pdf")
        assert entry.name == "report.pdf"
        assert entry.size == REPORT_SIZE

    def test_missing_raises_oserror(self, tmp_path):
        with pytest.raises(OSError):
            stat_entry(str(tmp_path / "missing"), "missing")
