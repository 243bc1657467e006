"""Voting session lifecycle."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from hostel_menu.domain.sessions import SessionStatus, VotingSession
from hostel_menu.errors import InvalidInputError, InvalidTransitionError, NotFoundError

logger = logging.getLogger(__name__)


class SessionRepository(Protocol):
    """Persistence interface for voting sessions."""

    def list_sessions(
        self, statuses: Iterable[SessionStatus] | None = None
    ) -> list[VotingSession]:
        """Return sessions, newest first."""

    def get_session(self, session_id: UUID) -> VotingSession | None:
        """Return a session by id, if present."""

    def create_session(
        self, title: str, start_date: date, end_date: date, status: SessionStatus
    ) -> VotingSession:
        """Create a session and return it."""

    def update_status(
        self, session_id: UUID, status: SessionStatus
    ) -> VotingSession:
        """Persist a new status and return the updated session."""

    def delete_session(self, session_id: UUID) -> None:
        """Delete a session with its items and votes."""


@dataclass
class SessionService:
    """Service for creating sessions and moving them through their lifecycle."""

    repository: SessionRepository

    def list_sessions(
        self, statuses: Iterable[SessionStatus] | None = None
    ) -> list[VotingSession]:
        """Return sessions, optionally limited to some statuses."""
        return self.repository.list_sessions(statuses)

    def get_session(self, session_id: UUID) -> VotingSession:
        """Return a session or raise when it does not exist."""
        session = self.repository.get_session(session_id)
        if session is None:
            raise NotFoundError("Session not found")
        return session

    def create_session(
        self, title: str, start_date: date, end_date: date
    ) -> VotingSession:
        """Create a new session in draft."""
        cleaned = title.strip()
        if not cleaned:
            raise InvalidInputError("Session title is required")
        if start_date > end_date:
            raise InvalidInputError("start_date must not be after end_date")
        session = self.repository.create_session(
            cleaned, start_date, end_date, SessionStatus.DRAFT
        )
        logger.info("Session created", extra={"session_id": str(session.id)})
        return session

    def advance_status(
        self, session_id: UUID, status: SessionStatus
    ) -> VotingSession:
        """Move a session one step forward in its lifecycle."""
        session = self.get_session(session_id)
        if session.status.next_status() is not status:
            raise InvalidTransitionError(
                f"Cannot move session from {session.status} to {status}",
                details={"from": session.status.value, "to": status.value},
            )
        updated = self.repository.update_status(session_id, status)
        logger.info(
            "Session status changed",
            extra={"session_id": str(session_id), "status": status.value},
        )
        return updated

    def delete_session(self, session_id: UUID) -> None:
        """Delete a session and everything attached to it."""
        self.get_session(session_id)
        self.repository.delete_session(session_id)


def default_session_for_students(
    sessions: list[VotingSession],
) -> VotingSession | None:
    """Pick the session a student sees first: open, then draft, then finalized.

    Within a status the session with the latest start_date wins.
    """
    for status in (
        SessionStatus.OPEN_FOR_VOTING,
        SessionStatus.DRAFT,
        SessionStatus.FINALIZED,
    ):
        candidates = [session for session in sessions if session.status is status]
        if candidates:
            return max(candidates, key=lambda session: session.start_date)
    return None
