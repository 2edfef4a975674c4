# File browser router: listing, fuzzy search, preview and download.
# Created: 2026-10-19

from __future__ import annotations

import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, Response

from pocketdrive.api.deps import get_app_settings, get_file_service
from pocketdrive.api.v1.schemas.common import ErrorResponse
from pocketdrive.api.v1.schemas.files import EmptyFilesResponse, FileEntry, FilesResponse
from pocketdrive.config import Settings
from pocketdrive.index.errors import FileIndexError
from pocketdrive.index.service import FileContent, FileIndexService, ListResult

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Files"])

DOWNLOAD_MEDIA_TYPE = "application/octet-stream"


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(ErrorResponse(error=message).model_dump(), status_code=status_code)


def attachment_header(filename: str) -> str:
    """Content-Disposition value for a download of *filename*."""
    if filename.isascii() and filename.isprintable() and '"' not in filename:
        return f'attachment; filename="{filename}"'
    return f"attachment; filename*=utf-8''{quote(filename)}"


def _list_response(result: ListResult) -> JSONResponse:
    files = [FileEntry.from_entry(e) for e in result.files]
    if result.empty:
        body = EmptyFilesResponse(currentPath=result.current_path)
    else:
        body = FilesResponse(files=files, currentPath=result.current_path)
    return JSONResponse(body.model_dump(mode="json"))


def _content_response(content: FileContent, settings: Settings) -> Response:
    if content.attachment:
        return Response(
            content=content.data,
            media_type=DOWNLOAD_MEDIA_TYPE,
            headers={"Content-Disposition": attachment_header(content.filename)},
        )
    return Response(content=content.data, media_type=settings.preview_media_type)


@router.get(
    "/files",
    response_model=None,
    responses={
        200: {"model": FilesResponse, "description": "Entries, or raw bytes for preview/download"},
        400: {"model": ErrorResponse, "description": "Unknown action"},
        403: {"model": ErrorResponse, "description": "Path escapes the root"},
        404: {"model": ErrorResponse, "description": "Path does not exist"},
        500: {"model": ErrorResponse, "description": "I/O failure or timeout"},
    },
)
async def get_files(
    path: str = "",
    search: str = "",
    action: str = "list",
    service: FileIndexService = Depends(get_file_service),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    """List a directory, search the whole tree, or fetch one file's bytes.

    ``action`` is ``list`` (default), ``preview`` or ``download``. A non-empty
    ``search`` scans the entire root regardless of ``path``.
    """
    try:
        result = await service.handle(path=path, search=search, action=action)
    except FileIndexError as e:
        logger.debug("Files request rejected (path=%r, action=%r): %s", path, action, e)
        return _error(str(e), e.status_code)
    except Exception as e:
        logger.exception("Files request failed (path=%r, action=%r)", path, action)
        return _error(str(e), 500)

    if isinstance(result, ListResult):
        return _list_response(result)
    return _content_response(result, settings)
