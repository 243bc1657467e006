"""Supabase repository for feedback."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from hostel_menu.adapters.supabase_errors import store_errors
from hostel_menu.domain.feedback import Feedback
from hostel_menu.errors import StoreError
from hostel_menu.services.feedback import FeedbackRepository

_SELECT_WITH_NAMES = (
    "*, caterer:profiles!caterer_id(full_name), "
    "student:profiles!student_id(full_name, reg_number)"
)


@dataclass
class SupabaseFeedbackRepository(FeedbackRepository):
    """Supabase implementation for feedback."""

    client: Client

    def create_feedback(
        self, student_id: UUID, caterer_id: UUID, message: str
    ) -> Feedback:
        """Create a feedback row and return it."""
        with store_errors("submit feedback"):
            response = (
                self.client.table("feedbacks")
                .insert(
                    {
                        "student_id": str(student_id),
                        "caterer_id": str(caterer_id),
                        "message": message,
                    }
                )
                .execute()
            )
        if not response.data:
            raise StoreError("Failed to submit feedback")
        return _parse_feedback(response.data[0])

    def get_feedback(self, feedback_id: UUID) -> Feedback | None:
        """Return a feedback row by id."""
        with store_errors("load feedback"):
            response = (
                self.client.table("feedbacks")
                .select("*")
                .eq("id", str(feedback_id))
                .limit(1)
                .execute()
            )
        if not response.data:
            return None
        return _parse_feedback(response.data[0])

    def list_for_student(self, student_id: UUID) -> list[Feedback]:
        """Return feedback sent by a student."""
        return self._list_by("student_id", student_id)

    def list_for_caterer(self, caterer_id: UUID) -> list[Feedback]:
        """Return feedback received by a caterer."""
        return self._list_by("caterer_id", caterer_id)

    def set_response(self, feedback_id: UUID, response: str) -> None:
        """Store a caterer's response."""
        with store_errors("respond to feedback"):
            self.client.table("feedbacks").update({"response": response}).eq(
                "id", str(feedback_id)
            ).execute()

    def _list_by(self, column: str, value: UUID) -> list[Feedback]:
        with store_errors("list feedback"):
            response = (
                self.client.table("feedbacks")
                .select(_SELECT_WITH_NAMES)
                .eq(column, str(value))
                .order("created_at", desc=True)
                .execute()
            )
        return [_parse_feedback(row) for row in response.data or []]


def _parse_feedback(row: dict[str, object]) -> Feedback:
    created_raw = row.get("created_at")
    caterer = row.get("caterer")
    student = row.get("student")
    return Feedback(
        id=UUID(row["id"]),
        student_id=UUID(row["student_id"]),
        caterer_id=UUID(row["caterer_id"]),
        message=str(row.get("message", "")),
        response=row.get("response"),
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else None
        ),
        caterer_name=caterer.get("full_name") if isinstance(caterer, dict) else None,
        student_name=student.get("full_name") if isinstance(student, dict) else None,
    )
