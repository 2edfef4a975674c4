# Shared FastAPI dependencies for the API layer.
# Created: 2026-10-19

from __future__ import annotations

from fastapi import Depends, Request

from pocketdrive.config import Settings, get_settings
from pocketdrive.index.service import FileIndexService


def get_app_settings(request: Request) -> Settings:
    """Settings attached by ``create_api_app``, else the process-wide ones."""
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        settings = get_settings()
    return settings


def get_file_service(settings: Settings = Depends(get_app_settings)) -> FileIndexService:
    """A request-scoped file index service bound to the configured root.

    Override in tests with ``app.dependency_overrides[get_file_service]``.
    """
    return FileIndexService(
        settings.root_dir,
        scan_timeout=settings.scan_timeout,
        io_timeout=settings.io_timeout,
    )
