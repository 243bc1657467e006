"""Student feedback and caterer responses."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request

from hostel_menu.api.dependencies import require_caterer, require_student
from hostel_menu.api.schemas import FeedbackCreate, FeedbackResponse
from hostel_menu.api.serializers import serialize_feedback
from hostel_menu.domain.profiles import Profile

if TYPE_CHECKING:
    from hostel_menu.containers import AppContainer

router = APIRouter(prefix="/api/feedback", tags=["feedback"])


@router.post("")
async def submit_feedback(
    payload: FeedbackCreate,
    request: Request,
    student: Profile = Depends(require_student),
) -> dict[str, object]:
    """Send feedback to a caterer."""
    container: AppContainer = request.app.state.container
    feedback = container.feedback_service.submit(
        student.id, payload.caterer_id, payload.message
    )
    return serialize_feedback(feedback)


@router.get("/mine")
async def my_feedback(
    request: Request, student: Profile = Depends(require_student)
) -> dict[str, object]:
    """Return feedback the student has sent."""
    container: AppContainer = request.app.state.container
    entries = container.feedback_service.list_for_student(student.id)
    return {"feedback": [serialize_feedback(entry) for entry in entries]}


@router.get("/received")
async def received_feedback(
    request: Request, caterer: Profile = Depends(require_caterer)
) -> dict[str, object]:
    """Return feedback addressed to the caterer."""
    container: AppContainer = request.app.state.container
    entries = container.feedback_service.list_for_caterer(caterer.id)
    return {"feedback": [serialize_feedback(entry) for entry in entries]}


@router.patch("/{feedback_id}/response")
async def respond(
    feedback_id: UUID,
    payload: FeedbackResponse,
    request: Request,
    caterer: Profile = Depends(require_caterer),
) -> dict[str, object]:
    """Answer a feedback entry."""
    container: AppContainer = request.app.state.container
    feedback = container.feedback_service.respond(
        feedback_id, caterer.id, payload.response
    )
    return serialize_feedback(feedback)
