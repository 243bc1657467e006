"""Student feedback to caterers."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from hostel_menu.domain.feedback import Feedback
from hostel_menu.domain.profiles import Role
from hostel_menu.errors import InvalidInputError, NotFoundError
from hostel_menu.services.profiles import ProfileRepository


class FeedbackRepository(Protocol):
    """Persistence interface for feedback."""

    def create_feedback(
        self, student_id: UUID, caterer_id: UUID, message: str
    ) -> Feedback:
        """Create a feedback row and return it."""

    def get_feedback(self, feedback_id: UUID) -> Feedback | None:
        """Return a feedback row by id, if present."""

    def list_for_student(self, student_id: UUID) -> list[Feedback]:
        """Return a student's feedback, newest first."""

    def list_for_caterer(self, caterer_id: UUID) -> list[Feedback]:
        """Return feedback addressed to a caterer, newest first."""

    def set_response(self, feedback_id: UUID, response: str) -> None:
        """Store a caterer's response."""


@dataclass
class FeedbackService:
    """Service for the feedback center."""

    repository: FeedbackRepository
    profile_repository: ProfileRepository

    def submit(self, student_id: UUID, caterer_id: UUID, message: str) -> Feedback:
        """Send feedback to a caterer."""
        cleaned = message.strip()
        if not cleaned:
            raise InvalidInputError("Feedback message is required")
        caterer = self.profile_repository.get_profile(caterer_id)
        if caterer is None or caterer.role is not Role.CATERER:
            raise InvalidInputError("Feedback must be addressed to a caterer")
        return self.repository.create_feedback(student_id, caterer_id, cleaned)

    def list_for_student(self, student_id: UUID) -> list[Feedback]:
        """Return feedback the student has sent."""
        return self.repository.list_for_student(student_id)

    def list_for_caterer(self, caterer_id: UUID) -> list[Feedback]:
        """Return feedback a caterer has received."""
        return self.repository.list_for_caterer(caterer_id)

    def respond(self, feedback_id: UUID, caterer_id: UUID, response: str) -> Feedback:
        """Answer feedback addressed to the caterer."""
        cleaned = response.strip()
        if not cleaned:
            raise InvalidInputError("Response is required")
        feedback = self.repository.get_feedback(feedback_id)
        if feedback is None or feedback.caterer_id != caterer_id:
            raise NotFoundError("Feedback not found")
        if feedback.response:
            raise InvalidInputError("Feedback already has a response")
        self.repository.set_response(feedback_id, cleaned)
        return Feedback(
            id=feedback.id,
            student_id=feedback.student_id,
            caterer_id=feedback.caterer_id,
            message=feedback.message,
            response=cleaned,
            created_at=feedback.created_at,
            caterer_name=feedback.caterer_name,
            student_name=feedback.student_name,
        )
