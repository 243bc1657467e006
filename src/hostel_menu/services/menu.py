"""Menu item proposals for voting sessions."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from hostel_menu.domain.menu import MealType, MenuItem, MessType, Slot, sort_for_display
from hostel_menu.domain.profiles import Profile
from hostel_menu.domain.sessions import SessionStatus
from hostel_menu.errors import InvalidInputError, NotFoundError
from hostel_menu.services.sessions import SessionRepository

logger = logging.getLogger(__name__)


class MenuRepository(Protocol):
    """Persistence interface for menu items."""

    def list_items(
        self,
        session_id: UUID,
        mess_type: MessType | None = None,
        with_votes: bool = False,
    ) -> list[MenuItem]:
        """Return a session's items, optionally with fresh vote counts."""

    def list_slot_items(self, session_id: UUID, slot: Slot) -> list[MenuItem]:
        """Return the items competing in one slot."""

    def get_item(self, item_id: UUID) -> MenuItem | None:
        """Return a menu item by id, if present."""

    def create_item(  # noqa: PLR0913
        self,
        session_id: UUID,
        date_served: date,
        meal_type: MealType,
        mess_type: MessType,
        name: str,
        description: str | None,
    ) -> MenuItem:
        """Create a menu item and return it."""

    def delete_item(self, item_id: UUID) -> None:
        """Delete a menu item."""

    def set_selections(
        self, selected: Iterable[UUID], unselected: Iterable[UUID]
    ) -> None:
        """Persist finalization flags: unselected items first, then selected."""


@dataclass
class MenuService:
    """Service for caterer menu proposals."""

    repository: MenuRepository
    session_repository: SessionRepository

    def list_items(
        self, session_id: UUID, mess_type: MessType | None = None
    ) -> list[MenuItem]:
        """Return items ordered by date then meal."""
        return sort_for_display(self.repository.list_items(session_id, mess_type))

    def list_items_with_votes(
        self, session_id: UUID, mess_type: MessType | None = None
    ) -> list[MenuItem]:
        """Return items with vote counts computed at read time."""
        return sort_for_display(
            self.repository.list_items(session_id, mess_type, with_votes=True)
        )

    def add_item(  # noqa: PLR0913
        self,
        caterer: Profile,
        session_id: UUID,
        date_served: date,
        meal_type: MealType,
        mess_type: MessType,
        name: str,
        description: str | None = None,
    ) -> MenuItem:
        """Propose an item for a draft session."""
        cleaned_name = name.strip()
        if not cleaned_name:
            raise InvalidInputError("Item name is required")
        session = self.session_repository.get_session(session_id)
        if session is None:
            raise NotFoundError("Session not found")
        if session.status is not SessionStatus.DRAFT:
            raise InvalidInputError("Items can only be added to draft sessions")
        if not session.covers(date_served):
            raise InvalidInputError(
                "date_served is outside the session's date range",
                details={
                    "start_date": session.start_date.isoformat(),
                    "end_date": session.end_date.isoformat(),
                },
            )
        if not caterer.serves(mess_type):
            raise InvalidInputError(
                "Caterer does not serve this mess type",
                details={"mess_type": mess_type.value},
            )
        item = self.repository.create_item(
            session_id=session_id,
            date_served=date_served,
            meal_type=meal_type,
            mess_type=mess_type,
            name=cleaned_name,
            description=(description or "").strip() or None,
        )
        logger.info(
            "Menu item added",
            extra={"session_id": str(session_id), "item_id": str(item.id)},
        )
        return item

    def delete_item(self, item_id: UUID) -> None:
        """Remove a proposed item."""
        if self.repository.get_item(item_id) is None:
            raise NotFoundError("Menu item not found")
        self.repository.delete_item(item_id)
