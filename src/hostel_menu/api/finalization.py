"""Menu finalization endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request

from hostel_menu.api.dependencies import require_admin, require_student
from hostel_menu.api.schemas import FinalizeRequest
from hostel_menu.api.serializers import (
    serialize_grouped,
    serialize_item,
    serialize_session,
)
from hostel_menu.domain.profiles import Profile

if TYPE_CHECKING:
    from hostel_menu.containers import AppContainer

router = APIRouter(prefix="/api", tags=["finalization"])


@router.get("/finalize/{session_id}", dependencies=[Depends(require_admin)])
async def review(session_id: UUID, request: Request) -> dict[str, object]:
    """Return every item with its proposed selection."""
    container: AppContainer = request.app.state.container
    result = container.finalization_service.review(session_id)
    return {
        "session": serialize_session(result.session),
        "decided": result.decided,
        "items": [serialize_item(item) for item in result.items],
    }


@router.post("/finalize/{session_id}", dependencies=[Depends(require_admin)])
async def confirm(
    session_id: UUID, payload: FinalizeRequest, request: Request
) -> dict[str, object]:
    """Store the admin's selection and finalize the session."""
    container: AppContainer = request.app.state.container
    session = container.finalization_service.confirm(session_id, payload.selections)
    return {"success": True, "session": serialize_session(session)}


@router.get("/final-menu/{session_id}")
async def final_menu(
    session_id: UUID,
    request: Request,
    student: Profile = Depends(require_student),
) -> dict[str, object]:
    """Return the finalized menu for the student's mess."""
    container: AppContainer = request.app.state.container
    if student.mess_type is None:
        return {"mess_type": None, "menu": {}}
    items = container.finalization_service.final_menu(session_id, student.mess_type)
    return {"mess_type": student.mess_type.value, "menu": serialize_grouped(items)}
