"""Domain models for hostel events."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass(frozen=True)
class HostelEvent:
    """An announced event shown to every role."""

    id: UUID
    title: str
    description: str | None
    date: date
    location: str | None
    image_url: str | None = None
