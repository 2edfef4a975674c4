"""HTTP server for PocketDrive.

Builds a FastAPI application with the versioned ``/api/v1/`` routers and CORS.
Any UI is an external client of the JSON contract; no frontend assets are
served from here.
"""

from __future__ import annotations

import logging

from pocketdrive.config import Settings

logger = logging.getLogger(__name__)

_BUILTIN_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


def create_api_app(settings: Settings | None = None):
    """Build the FastAPI application bound to *settings* (defaults to the environment)."""
    from fastapi import FastAPI
    from fastapi.middleware.cors import CORSMiddleware

    from pocketdrive import __version__
    from pocketdrive.api.v1 import mount_v1_routers
    from pocketdrive.config import get_settings

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title="PocketDrive API",
        description="Browse, search, preview and download files under one root directory.",
        version=__version__,
        docs_url="/api/v1/docs",
        redoc_url="/api/v1/redoc",
        openapi_url="/api/v1/openapi.json",
    )
    app.state.settings = settings

    # --- CORS -----------------------------------------------------------
    origins = sorted(set(_BUILTIN_ORIGINS + settings.cors_allowed_origins))
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
        allow_credentials=False,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type"],
        expose_headers=["Content-Disposition"],
    )

    # --- Routers ---------------------------------------------------------
    mount_v1_routers(app)

    logger.info("Serving files from %s", settings.root_dir)
    return app


def run_api_server(
    host: str = "127.0.0.1",
    port: int = 8000,
    dev: bool = False,
    log_level: str = "info",
) -> None:
    """Start the API server with uvicorn."""
    import uvicorn

    if dev:
        import pathlib

        src_dir = str(pathlib.Path(__file__).resolve().parent.parent)
        uvicorn.run(
            "pocketdrive.api.serve:create_api_app",
            factory=True,
            host=host,
            port=port,
            reload=True,
            reload_dirs=[src_dir],
            reload_includes=["*.py"],
            log_level="debug",
        )
    else:
        app = create_api_app()
        uvicorn.run(app, host=host, port=port, log_level=log_level.lower())
