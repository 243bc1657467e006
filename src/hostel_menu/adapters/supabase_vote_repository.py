"""Supabase repository for votes."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from hostel_menu.adapters.supabase_errors import store_errors
from hostel_menu.domain.menu import VoteRecord
from hostel_menu.errors import StoreError
from hostel_menu.services.voting import VoteRepository


@dataclass
class SupabaseVoteRepository(VoteRepository):
    """Supabase implementation for votes."""

    client: Client

    def list_votes(self, user_id: UUID) -> list[VoteRecord]:
        """Return a user's votes."""
        with store_errors("list votes"):
            response = (
                self.client.table("votes")
                .select("id, user_id, menu_item_id")
                .eq("user_id", str(user_id))
                .execute()
            )
        return [
            VoteRecord(
                id=UUID(row["id"]),
                user_id=UUID(row["user_id"]),
                menu_item_id=UUID(row["menu_item_id"]),
            )
            for row in response.data or []
        ]

    def insert_vote(self, user_id: UUID, menu_item_id: UUID) -> VoteRecord:
        """Insert a vote row and return it."""
        with store_errors("record vote"):
            response = (
                self.client.table("votes")
                .insert({"user_id": str(user_id), "menu_item_id": str(menu_item_id)})
                .execute()
            )
        if not response.data:
            raise StoreError("Failed to record vote")
        row = response.data[0]
        return VoteRecord(
            id=UUID(row["id"]),
            user_id=UUID(row["user_id"]),
            menu_item_id=UUID(row["menu_item_id"]),
        )

    def delete_vote(self, user_id: UUID, menu_item_id: UUID) -> None:
        """Delete a user's vote for an item."""
        with store_errors("remove vote"):
            self.client.table("votes").delete().match(
                {"user_id": str(user_id), "menu_item_id": str(menu_item_id)}
            ).execute()

    def delete_votes_for_user(self, user_id: UUID) -> None:
        """Delete every vote a user holds."""
        with store_errors("clear votes"):
            self.client.table("votes").delete().eq("user_id", str(user_id)).execute()

    def count_session_votes(self, session_id: UUID) -> int:
        """Count votes on a session's items without fetching rows."""
        with store_errors("count session votes"):
            response = (
                self.client.table("votes")
                .select("id, menu_items!inner(session_id)", count="exact", head=True)
                .eq("menu_items.session_id", str(session_id))
                .execute()
            )
        return int(response.count or 0)
