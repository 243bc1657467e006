"""Profile endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request

from hostel_menu.api.dependencies import require_student
from hostel_menu.api.schemas import MessTypeUpdate
from hostel_menu.api.serializers import serialize_profile
from hostel_menu.domain.menu import MessType
from hostel_menu.domain.profiles import Profile

if TYPE_CHECKING:
    from hostel_menu.containers import AppContainer

router = APIRouter(prefix="/api/profiles", tags=["profiles"])


@router.get("/caterers")
async def list_caterers(
    request: Request, mess_type: MessType | None = None
) -> dict[str, object]:
    """Return caterers, optionally those serving one mess type."""
    container: AppContainer = request.app.state.container
    caterers = container.profile_service.list_caterers(mess_type)
    return {"caterers": [serialize_profile(profile) for profile in caterers]}


@router.patch("/me/mess-type")
async def change_mess_type(
    payload: MessTypeUpdate,
    request: Request,
    student: Profile = Depends(require_student),
) -> dict[str, object]:
    """Switch the student's mess, clearing their votes when it changes."""
    container: AppContainer = request.app.state.container
    cleared = container.profile_service.change_mess_type(student.id, payload.mess_type)
    return {"mess_type": payload.mess_type.value, "votes_cleared": cleared}


@router.get("/{profile_id}")
async def get_profile(profile_id: UUID, request: Request) -> dict[str, object]:
    """Return one profile."""
    container: AppContainer = request.app.state.container
    return serialize_profile(container.profile_service.get_profile(profile_id))
