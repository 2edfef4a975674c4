# API v1 router aggregation.
# Created: 2026-10-19
#
# mount_v1_routers(app) registers all domain routers at /api/v1/ (canonical).
# Routers listed in _COMPAT_ROUTERS are also mounted at /api/.

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastapi import FastAPI

logger = logging.getLogger(__name__)

# Domain routers, imported lazily inside mount_v1_routers().
_V1_ROUTERS: list[tuple[str, str, str]] = [
    # (module_path, attr_name, tag)
    ("pocketdrive.api.v1.health", "router", "Health"),
    ("pocketdrive.api.v1.files", "router", "Files"),
]

_COMPAT_ROUTERS = {"pocketdrive.api.v1.files"}


def mount_v1_routers(app: FastAPI) -> None:
    """Mount all v1 domain routers on *app*.

    Each router is mounted at ``/api/v1/<prefix>``; the files router is also
    mounted at ``/api`` so ``GET /api/files`` keeps working.
    """
    import importlib

    from fastapi import APIRouter

    for module_path, attr_name, tag in _V1_ROUTERS:
        try:
            mod = importlib.import_module(module_path)
            router: APIRouter = getattr(mod, attr_name)

            app.include_router(router, prefix="/api/v1")
            if module_path in _COMPAT_ROUTERS:
                app.include_router(router, prefix="/api", include_in_schema=False)

            logger.debug("Mounted v1 router: %s (%s)", module_path, tag)
        except Exception:
            logger.warning("Failed to mount v1 router %s", module_path, exc_info=True)
