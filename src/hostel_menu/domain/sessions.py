"""Domain models for voting sessions."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from uuid import UUID


class SessionStatus(StrEnum):
    """Lifecycle of a voting session, in order."""

    DRAFT = "draft"
    OPEN_FOR_VOTING = "open_for_voting"
    CLOSED = "closed"
    FINALIZED = "finalized"

    def next_status(self) -> "SessionStatus | None":
        """Return the only status this one may move to, if any."""
        ordered = list(SessionStatus)
        index = ordered.index(self)
        if index + 1 < len(ordered):
            return ordered[index + 1]
        return None


@dataclass(frozen=True)
class VotingSession:
    """A bounded voting period with its own menu items."""

    id: UUID
    title: str
    start_date: date
    end_date: date
    status: SessionStatus
    created_at: datetime | None = None

    def covers(self, day: date) -> bool:
        """Return True when the day falls inside the session's date range."""
        return self.start_date <= day <= self.end_date
