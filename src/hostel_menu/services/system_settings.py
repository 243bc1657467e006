"""Registration switches stored as system settings."""

from dataclasses import dataclass
from typing import Protocol

from hostel_menu.errors import InvalidInputError

REGISTRATION_KEYS = {
    "caterer": "caterer_registration",
    "admin": "admin_registration",
}


class SystemSettingsRepository(Protocol):
    """Persistence interface for key/value system settings."""

    def list_settings(self) -> dict[str, str]:
        """Return every setting keyed by setting_key."""

    def upsert_setting(self, key: str, value: str) -> None:
        """Create or replace a setting."""


@dataclass
class SystemSettingsService:
    """Service for toggling who may register."""

    repository: SystemSettingsRepository

    def registration_flags(self) -> dict[str, bool]:
        """Return which privileged roles may self-register."""
        stored = self.repository.list_settings()
        return {
            role: stored.get(key) == "true"
            for role, key in REGISTRATION_KEYS.items()
        }

    def set_flag(self, key: str, enabled: bool) -> dict[str, bool]:
        """Enable or disable a registration switch."""
        if key not in REGISTRATION_KEYS.values():
            raise InvalidInputError(
                "Unknown setting",
                details={"allowed": sorted(REGISTRATION_KEYS.values())},
            )
        self.repository.upsert_setting(key, "true" if enabled else "false")
        return self.registration_flags()
