"""Domain models for student feedback."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class Feedback:
    """A student's message to a caterer and its optional response."""

    id: UUID
    student_id: UUID
    caterer_id: UUID
    message: str
    response: str | None
    created_at: datetime | None
    caterer_name: str | None = None
    student_name: str | None = None
