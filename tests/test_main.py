# Tests for the command-line entry point.
# Created: 2026-10-19

from unittest.mock import patch

import pytest

from pocketdrive.__main__ import build_parser, main


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.root is None
        assert args.host is None
        assert args.port is None
        assert args.dev is False

    def test_options(self):
        args = build_parser().parse_args(["--root", "/srv", "--port", "9000", "--dev"])
        assert args.root == "/srv"
        assert args.port == 9000
        assert args.dev is True


class TestMain:
    @patch("pocketdrive.api.serve.run_api_server")
    @patch("pocketdrive.__main__.setup_logging")
    def test_runs_server_for_root(self, _mock_logging, mock_run, drive_root, monkeypatch):
        # main() exports the root; setenv first so teardown restores it.
        monkeypatch.setenv("POCKETDRIVE_ROOT_DIR", "")
        main(["--root", str(drive_root), "--port", "9001"])

        mock_run.assert_called_once()
        kwargs = mock_run.call_args.kwargs
        assert kwargs["port"] == 9001
        assert kwargs["dev"] is False

    @patch("pocketdrive.api.serve.run_api_server")
    @patch("pocketdrive.__main__.setup_logging")
    def test_missing_root_exits(self, _mock_logging, mock_run, tmp_path, monkeypatch):
        # main() exports the root; setenv first so teardown restores it.
        monkeypatch.setenv("POCKETDRIVE_ROOT_DIR", "")
        with pytest.raises(SystemExit):
            main(["--root", str(tmp_path / "gone")])
        mock_run.assert_not_called()
