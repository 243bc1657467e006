"""Profile lookups and mess type preference changes."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from hostel_menu.domain.menu import MessType
from hostel_menu.domain.profiles import Profile, Role
from hostel_menu.errors import InvalidInputError, NotFoundError

logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for profiles."""

    def get_profile(self, profile_id: UUID) -> Profile | None:
        """Return a profile by id, if present."""

    def update_mess_type(self, profile_id: UUID, mess_type: MessType) -> None:
        """Persist a student's mess type."""

    def list_caterers(self, mess_type: MessType | None = None) -> list[Profile]:
        """Return caterers, optionally only those serving a mess type."""


class VoteCleaner(Protocol):
    """Deletes a user's votes when their mess type changes."""

    def delete_votes_for_user(self, user_id: UUID) -> None:
        """Remove every vote held by a user."""


@dataclass
class ProfileService:
    """Service for profile reads and preference updates."""

    repository: ProfileRepository
    votes: VoteCleaner

    def get_profile(self, profile_id: UUID) -> Profile:
        """Return a profile or raise when it does not exist."""
        profile = self.repository.get_profile(profile_id)
        if profile is None:
            raise NotFoundError("Profile not found")
        return profile

    def change_mess_type(self, profile_id: UUID, mess_type: MessType) -> bool:
        """Update a student's mess type, clearing votes when it changes.

        Returns True when previous votes were deleted.
        """
        profile = self.get_profile(profile_id)
        if profile.role is not Role.STUDENT:
            raise InvalidInputError("Only students have a mess type")
        cleared = profile.mess_type != mess_type
        if cleared:
            self.votes.delete_votes_for_user(profile_id)
            logger.info(
                "Votes cleared after mess type change",
                extra={"profile_id": str(profile_id), "mess_type": mess_type.value},
            )
        self.repository.update_mess_type(profile_id, mess_type)
        return cleared

    def list_caterers(self, mess_type: MessType | None = None) -> list[Profile]:
        """Return caterers a student can be assigned to."""
        return self.repository.list_caterers(mess_type)
