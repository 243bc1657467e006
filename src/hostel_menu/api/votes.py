"""Voting endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request

from hostel_menu.api.dependencies import require_student
from hostel_menu.api.schemas import VoteToggleRequest
from hostel_menu.api.serializers import serialize_item
from hostel_menu.domain.profiles import Profile

if TYPE_CHECKING:
    from hostel_menu.containers import AppContainer

router = APIRouter(prefix="/api/votes", tags=["votes"])


@router.get("/user/{user_id}")
async def list_user_votes(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the item ids a user votes for."""
    container: AppContainer = request.app.state.container
    votes = container.voting_service.list_votes(user_id)
    return {"menu_item_ids": sorted(str(item_id) for item_id in votes)}


@router.get("/ballot/{session_id}")
async def ballot(
    session_id: UUID,
    request: Request,
    student: Profile = Depends(require_student),
) -> dict[str, object]:
    """Return the student's items for a session and their current votes."""
    container: AppContainer = request.app.state.container
    result = container.voting_service.load_ballot(student.id, session_id)
    return {
        "session_id": str(result.session_id),
        "items": [serialize_item(item) for item in result.items],
        "voted_item_ids": sorted(str(item_id) for item_id in result.voted_item_ids),
    }


@router.post("/toggle")
async def toggle_vote(
    payload: VoteToggleRequest,
    request: Request,
    student: Profile = Depends(require_student),
) -> dict[str, object]:
    """Toggle a vote, replacing any other vote in the same slot."""
    container: AppContainer = request.app.state.container
    toggle = container.voting_service.toggle_vote(student.id, payload.menu_item_id)
    return {
        "menu_item_ids": sorted(str(item_id) for item_id in toggle.votes),
        "operations": [
            {"action": op.action.value, "menu_item_id": str(op.menu_item_id)}
            for op in toggle.operations
        ],
    }


@router.get("/session/{session_id}/counts")
async def vote_counts(session_id: UUID, request: Request) -> dict[str, object]:
    """Return vote counts per item, computed now."""
    container: AppContainer = request.app.state.container
    counts = container.voting_service.vote_counts(session_id)
    return {"counts": {str(item_id): count for item_id, count in counts.items()}}


@router.get("/session/{session_id}/total")
async def vote_total(session_id: UUID, request: Request) -> dict[str, object]:
    """Return the number of votes cast in a session."""
    container: AppContainer = request.app.state.container
    return {"total": container.voting_service.session_vote_total(session_id)}
