# Health router.
# Created: 2026-10-19

from __future__ import annotations

from fastapi import APIRouter, Depends

from pocketdrive.api.deps import get_app_settings
from pocketdrive.api.v1.schemas.health import HealthSummary
from pocketdrive.config import Settings

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthSummary)
async def get_health_status(settings: Settings = Depends(get_app_settings)):
    """Report whether the configured root is reachable."""
    root = settings.root_dir
    return HealthSummary(root=str(root), rootExists=root.is_dir())
