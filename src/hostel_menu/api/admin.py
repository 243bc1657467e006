"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from hostel_menu.api.dependencies import require_admin
from hostel_menu.api.schemas import SettingUpdate

if TYPE_CHECKING:
    from hostel_menu.containers import AppContainer

router = APIRouter(
    prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)]
)


@router.get("/health")
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/settings")
async def registration_settings(request: Request) -> dict[str, object]:
    """Return which self-registration roles are enabled."""
    container: AppContainer = request.app.state.container
    return {"registration": container.system_settings_service.registration_flags()}


@router.put("/settings/{key}")
async def update_setting(
    key: str, payload: SettingUpdate, request: Request
) -> dict[str, object]:
    """Enable or disable a self-registration role."""
    container: AppContainer = request.app.state.container
    flags = container.system_settings_service.set_flag(key, payload.enabled)
    return {"registration": flags}
