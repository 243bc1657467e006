"""Supabase repository for hostel events."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from hostel_menu.adapters.supabase_errors import store_errors
from hostel_menu.domain.events import HostelEvent
from hostel_menu.errors import StoreError
from hostel_menu.services.events import EventRepository


@dataclass
class SupabaseEventRepository(EventRepository):
    """Supabase implementation for events."""

    client: Client

    def list_events(self) -> list[HostelEvent]:
        """Return events ordered by date."""
        with store_errors("list events"):
            response = (
                self.client.table("events")
                .select("*")
                .order("date", desc=False)
                .execute()
            )
        return [_parse_event(row) for row in response.data or []]

    def get_event(self, event_id: UUID) -> HostelEvent | None:
        """Return an event by id."""
        with store_errors("load event"):
            response = (
                self.client.table("events")
                .select("*")
                .eq("id", str(event_id))
                .limit(1)
                .execute()
            )
        if not response.data:
            return None
        return _parse_event(response.data[0])

    def create_event(self, payload: dict[str, object]) -> HostelEvent:
        """Create an event row and return it."""
        with store_errors("create event"):
            response = self.client.table("events").insert(payload).execute()
        if not response.data:
            raise StoreError("Failed to create event")
        return _parse_event(response.data[0])

    def delete_event(self, event_id: UUID) -> None:
        """Delete an event row."""
        with store_errors("delete event"):
            self.client.table("events").delete().eq("id", str(event_id)).execute()


def _parse_event(row: dict[str, object]) -> HostelEvent:
    return HostelEvent(
        id=UUID(row["id"]),
        title=str(row.get("title", "")),
        description=row.get("description"),
        date=date.fromisoformat(str(row["date"])[:10]),
        location=row.get("location"),
        image_url=row.get("image_url"),
    )
