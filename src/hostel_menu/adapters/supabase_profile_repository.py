"""Supabase-backed profile repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from hostel_menu.adapters.supabase_errors import store_errors
from hostel_menu.domain.menu import MessType
from hostel_menu.domain.profiles import Profile, Role
from hostel_menu.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profiles."""

    client: Client

    def get_profile(self, profile_id: UUID) -> Profile | None:
        """Return a profile by id, if present."""
        with store_errors("load profile"):
            response = (
                self.client.table("profiles")
                .select("*")
                .eq("id", str(profile_id))
                .limit(1)
                .execute()
            )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def update_mess_type(self, profile_id: UUID, mess_type: MessType) -> None:
        """Update a student's mess type."""
        with store_errors("update mess type"):
            self.client.table("profiles").update({"mess_type": mess_type.value}).eq(
                "id", str(profile_id)
            ).execute()

    def list_caterers(self, mess_type: MessType | None = None) -> list[Profile]:
        """Return caterers, filtered by served mess type when given."""
        query = self.client.table("profiles").select("*").eq("role", Role.CATERER.value)
        if mess_type is not None:
            query = query.contains("served_mess_types", [mess_type.value])
        with store_errors("list caterers"):
            response = query.order("full_name", desc=False).execute()
        return [_parse_profile(row) for row in response.data or []]


def _parse_profile(row: dict[str, object]) -> Profile:
    mess_type = row.get("mess_type")
    caterer_id = row.get("assigned_caterer_id")
    return Profile(
        id=UUID(row["id"]),
        full_name=str(row.get("full_name") or ""),
        role=Role(row["role"]),
        mess_type=MessType(mess_type) if mess_type else None,
        reg_number=row.get("reg_number"),
        served_mess_types=[
            MessType(value) for value in row.get("served_mess_types") or []
        ],
        assigned_caterer_id=UUID(caterer_id) if caterer_id else None,
    )
