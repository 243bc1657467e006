"""Hostel event announcements."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from hostel_menu.domain.events import HostelEvent
from hostel_menu.errors import InvalidInputError, NotFoundError


class EventRepository(Protocol):
    """Persistence interface for events."""

    def list_events(self) -> list[HostelEvent]:
        """Return events ordered by date."""

    def get_event(self, event_id: UUID) -> HostelEvent | None:
        """Return an event by id, if present."""

    def create_event(self, payload: dict[str, object]) -> HostelEvent:
        """Create an event and return it."""

    def delete_event(self, event_id: UUID) -> None:
        """Delete an event."""


@dataclass
class EventService:
    """Service for event announcements."""

    repository: EventRepository

    def list_events(self) -> list[HostelEvent]:
        """Return every event, soonest first."""
        return self.repository.list_events()

    def create_event(  # noqa: PLR0913
        self,
        title: str,
        event_date: date,
        description: str | None = None,
        location: str | None = None,
        image_url: str | None = None,
    ) -> HostelEvent:
        """Announce a new event."""
        if not title.strip():
            raise InvalidInputError("Event title is required")
        return self.repository.create_event(
            {
                "title": title.strip(),
                "description": description,
                "date": event_date.isoformat(),
                "location": location,
                "image_url": image_url,
            }
        )

    def delete_event(self, event_id: UUID) -> None:
        """Remove an event."""
        if self.repository.get_event(event_id) is None:
            raise NotFoundError("Event not found")
        self.repository.delete_event(event_id)
