"""Supabase repository for system settings."""

from dataclasses import dataclass

from supabase import Client

from hostel_menu.adapters.supabase_errors import store_errors
from hostel_menu.services.system_settings import SystemSettingsRepository


@dataclass
class SupabaseSystemSettingsRepository(SystemSettingsRepository):
    """Supabase implementation for key/value settings."""

    client: Client

    def list_settings(self) -> dict[str, str]:
        """Return settings keyed by setting_key."""
        with store_errors("load settings"):
            response = (
                self.client.table("system_settings")
                .select("setting_key, setting_value")
                .execute()
            )
        return {
            str(row["setting_key"]): str(row.get("setting_value", ""))
            for row in response.data or []
        }

    def upsert_setting(self, key: str, value: str) -> None:
        """Create or replace a setting row."""
        with store_errors("save setting"):
            self.client.table("system_settings").upsert(
                {"setting_key": key, "setting_value": value},
                on_conflict="setting_key",
            ).execute()
