"""Supabase repository for menu items."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from hostel_menu.adapters.supabase_errors import store_errors
from hostel_menu.domain.menu import MealType, MenuItem, MessType, Slot
from hostel_menu.errors import StoreError
from hostel_menu.services.menu import MenuRepository

_WITH_VOTE_COUNT = "*, votes(count)"


@dataclass
class SupabaseMenuRepository(MenuRepository):
    """Supabase implementation for menu items."""

    client: Client

    def list_items(
        self,
        session_id: UUID,
        mess_type: MessType | None = None,
        with_votes: bool = False,
    ) -> list[MenuItem]:
        """Return a session's items; vote counts come from an embedded count."""
        query = (
            self.client.table("menu_items")
            .select(_WITH_VOTE_COUNT if with_votes else "*")
            .eq("session_id", str(session_id))
        )
        if mess_type is not None:
            query = query.eq("mess_type", mess_type.value)
        with store_errors("list menu items"):
            response = (
                query.order("date_served", desc=False)
                .order("meal_type", desc=False)
                .execute()
            )
        return [_parse_item(row) for row in response.data or []]

    def list_slot_items(self, session_id: UUID, slot: Slot) -> list[MenuItem]:
        """Return the items sharing a slot."""
        with store_errors("list slot items"):
            response = (
                self.client.table("menu_items")
                .select("*")
                .eq("session_id", str(session_id))
                .eq("date_served", slot.date_served.isoformat())
                .eq("meal_type", slot.meal_type.value)
                .eq("mess_type", slot.mess_type.value)
                .execute()
            )
        return [_parse_item(row) for row in response.data or []]

    def get_item(self, item_id: UUID) -> MenuItem | None:
        """Return a menu item by id."""
        with store_errors("load menu item"):
            response = (
                self.client.table("menu_items")
                .select("*")
                .eq("id", str(item_id))
                .limit(1)
                .execute()
            )
        if not response.data:
            return None
        return _parse_item(response.data[0])

    def create_item(  # noqa: PLR0913
        self,
        session_id: UUID,
        date_served: date,
        meal_type: MealType,
        mess_type: MessType,
        name: str,
        description: str | None,
    ) -> MenuItem:
        """Create a menu item row and return it."""
        with store_errors("create menu item"):
            response = (
                self.client.table("menu_items")
                .insert(
                    {
                        "session_id": str(session_id),
                        "date_served": date_served.isoformat(),
                        "meal_type": meal_type.value,
                        "mess_type": mess_type.value,
                        "name": name,
                        "description": description,
                    }
                )
                .execute()
            )
        if not response.data:
            raise StoreError("Failed to create menu item")
        return _parse_item(response.data[0])

    def delete_item(self, item_id: UUID) -> None:
        """Delete a menu item row."""
        with store_errors("delete menu item"):
            self.client.table("menu_items").delete().eq("id", str(item_id)).execute()

    def set_selections(
        self, selected: Iterable[UUID], unselected: Iterable[UUID]
    ) -> None:
        """Write is_selected with one update per value, False before True."""
        for value, item_ids in ((False, unselected), (True, selected)):
            ids = [str(item_id) for item_id in item_ids]
            if not ids:
                continue
            with store_errors("update menu selection"):
                self.client.table("menu_items").update({"is_selected": value}).in_(
                    "id", ids
                ).execute()


def _parse_item(row: dict[str, object]) -> MenuItem:
    selected = row.get("is_selected")
    return MenuItem(
        id=UUID(row["id"]),
        session_id=UUID(row["session_id"]),
        date_served=date.fromisoformat(row["date_served"]),
        meal_type=MealType(row["meal_type"]),
        mess_type=MessType(row["mess_type"]),
        name=str(row.get("name", "")),
        description=row.get("description"),
        is_selected=selected if isinstance(selected, bool) else None,
        vote_count=_parse_vote_count(row.get("votes")),
    )


def _parse_vote_count(raw: object) -> int:
    """Read the count from a `votes(count)` embed, e.g. [{"count": 3}]."""
    if isinstance(raw, list) and raw and isinstance(raw[0], dict):
        return int(raw[0].get("count", 0))
    return 0
