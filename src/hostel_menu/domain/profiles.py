"""Domain models for user profiles."""

from dataclasses import dataclass, field
from enum import StrEnum
from uuid import UUID

from hostel_menu.domain.menu import MessType


class Role(StrEnum):
    """Role a profile acts under."""

    STUDENT = "student"
    CATERER = "caterer"
    ADMIN = "admin"


@dataclass(frozen=True)
class Profile:
    """Represents a profile row linked to an auth user."""

    id: UUID
    full_name: str
    role: Role
    mess_type: MessType | None = None
    reg_number: str | None = None
    served_mess_types: list[MessType] = field(default_factory=list)
    assigned_caterer_id: UUID | None = None

    def serves(self, mess_type: MessType) -> bool:
        """Return True when a caterer may propose items for the mess type."""
        return not self.served_mess_types or mess_type in self.served_mess_types
