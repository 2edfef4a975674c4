"""PocketDrive entry point.

Changes:
  - 2026-10-19: Initial CLI: serve one root directory over HTTP.
"""

import argparse
import logging
import os
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

from pocketdrive.config import get_settings
from pocketdrive.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _version() -> str:
    try:
        return get_version("pocketdrive")
    except PackageNotFoundError:
        from pocketdrive import __version__

        return __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pocketdrive",
        description="PocketDrive - browse and search a directory tree over HTTP",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pocketdrive --root ~/Documents          Serve ~/Documents on 127.0.0.1:8000
  pocketdrive --root /srv/share --host 0.0.0.0 --port 9000
  pocketdrive --dev                       Auto-reload on code changes
""",
    )
    parser.add_argument(
        "--root",
        type=str,
        default=None,
        help="Directory to serve (default: $POCKETDRIVE_ROOT_DIR, $DIRECTORY_PATH or cwd)",
    )
    parser.add_argument("--host", type=str, default=None, help="Host to bind (default: 127.0.0.1)")
    parser.add_argument("--port", "-p", type=int, default=None, help="Port (default: 8000)")
    parser.add_argument("--dev", action="store_true", help="Enable auto-reload")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level (default: INFO)")
    parser.add_argument("--version", "-v", action="version", version=f"%(prog)s {_version()}")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    # Exported so uvicorn's reload worker builds the same settings.
    if args.root:
        os.environ["POCKETDRIVE_ROOT_DIR"] = args.root
        get_settings.cache_clear()

    settings = get_settings()
    setup_logging(level=args.log_level or settings.log_level)

    if not settings.root_dir.is_dir():
        logger.error("Root directory does not exist: %s", settings.root_dir)
        raise SystemExit(1)

    from pocketdrive.api.serve import run_api_server

    run_api_server(
        host=args.host or settings.host,
        port=args.port or settings.port,
        dev=args.dev,
        log_level=args.log_level or settings.log_level,
    )


if __name__ == "__main__":
    main()
