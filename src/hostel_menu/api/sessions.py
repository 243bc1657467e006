"""Voting session endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Query, Request

from hostel_menu.api.dependencies import require_admin
from hostel_menu.api.schemas import SessionCreate, SessionStatusUpdate
from hostel_menu.api.serializers import serialize_session
from hostel_menu.domain.sessions import SessionStatus
from hostel_menu.services.sessions import default_session_for_students

if TYPE_CHECKING:
    from hostel_menu.containers import AppContainer

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


@router.get("")
async def list_sessions(
    request: Request, status: list[SessionStatus] | None = Query(default=None)
) -> dict[str, object]:
    """Return sessions, newest first, with the default student view."""
    container: AppContainer = request.app.state.container
    sessions = container.session_service.list_sessions(status)
    default = default_session_for_students(sessions)
    return {
        "sessions": [serialize_session(session) for session in sessions],
        "default_session_id": str(default.id) if default else None,
    }


@router.get("/{session_id}")
async def get_session(session_id: UUID, request: Request) -> dict[str, object]:
    """Return one session."""
    container: AppContainer = request.app.state.container
    return serialize_session(container.session_service.get_session(session_id))


@router.post("", dependencies=[Depends(require_admin)])
async def create_session(payload: SessionCreate, request: Request) -> dict[str, object]:
    """Create a draft session."""
    container: AppContainer = request.app.state.container
    session = container.session_service.create_session(
        payload.title, payload.start_date, payload.end_date
    )
    return serialize_session(session)


@router.patch("/{session_id}/status", dependencies=[Depends(require_admin)])
async def update_status(
    session_id: UUID, payload: SessionStatusUpdate, request: Request
) -> dict[str, object]:
    """Advance a session to its next status."""
    container: AppContainer = request.app.state.container
    session = container.session_service.advance_status(session_id, payload.status)
    return serialize_session(session)


@router.delete("/{session_id}", dependencies=[Depends(require_admin)])
async def delete_session(session_id: UUID, request: Request) -> dict[str, object]:
    """Delete a session with its items and votes."""
    container: AppContainer = request.app.state.container
    container.session_service.delete_session(session_id)
    return {"success": True}
