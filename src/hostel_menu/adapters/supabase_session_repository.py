"""Supabase-backed voting session repository."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from hostel_menu.adapters.supabase_errors import store_errors
from hostel_menu.domain.sessions import SessionStatus, VotingSession
from hostel_menu.errors import StoreError
from hostel_menu.services.sessions import SessionRepository


@dataclass
class SupabaseSessionRepository(SessionRepository):
    """Supabase implementation for voting sessions."""

    client: Client

    def list_sessions(
        self, statuses: Iterable[SessionStatus] | None = None
    ) -> list[VotingSession]:
        """Return sessions, newest first."""
        query = self.client.table("voting_sessions").select("*")
        if statuses is not None:
            query = query.in_("status", [status.value for status in statuses])
        with store_errors("list sessions"):
            response = query.order("created_at", desc=True).execute()
        return [_parse_session(row) for row in response.data or []]

    def get_session(self, session_id: UUID) -> VotingSession | None:
        """Return a session by id, if present."""
        with store_errors("load session"):
            response = (
                self.client.table("voting_sessions")
                .select("*")
                .eq("id", str(session_id))
                .limit(1)
                .execute()
            )
        if not response.data:
            return None
        return _parse_session(response.data[0])

    def create_session(
        self, title: str, start_date: date, end_date: date, status: SessionStatus
    ) -> VotingSession:
        """Create a session row and return it."""
        with store_errors("create session"):
            response = (
                self.client.table("voting_sessions")
                .insert(
                    {
                        "title": title,
                        "start_date": start_date.isoformat(),
                        "end_date": end_date.isoformat(),
                        "status": status.value,
                    }
                )
                .execute()
            )
        if not response.data:
            raise StoreError("Failed to create session")
        return _parse_session(response.data[0])

    def update_status(
        self, session_id: UUID, status: SessionStatus
    ) -> VotingSession:
        """Update a session's status and return the row."""
        with store_errors("update session status"):
            response = (
                self.client.table("voting_sessions")
                .update({"status": status.value})
                .eq("id", str(session_id))
                .execute()
            )
        if not response.data:
            raise StoreError("Failed to update session status")
        return _parse_session(response.data[0])

    def delete_session(self, session_id: UUID) -> None:
        """Delete a session row; items and votes cascade."""
        with store_errors("delete session"):
            self.client.table("voting_sessions").delete().eq(
                "id", str(session_id)
            ).execute()


def _parse_session(row: dict[str, object]) -> VotingSession:
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else None
    )
    return VotingSession(
        id=UUID(row["id"]),
        title=str(row.get("title", "")),
        start_date=date.fromisoformat(row["start_date"]),
        end_date=date.fromisoformat(row["end_date"]),
        status=SessionStatus(row["status"]),
        created_at=created_at,
    )
