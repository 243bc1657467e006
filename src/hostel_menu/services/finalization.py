"""Menu finalization: picking winners per slot and freezing the menu.

Two winner rules live here on purpose. The admin review keeps every item
tied at the top of a slot, while the exported report keeps a single item per
slot. Both apply only while no item in the session has been selected yet;
after the first manual selection the stored flags are authoritative.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from uuid import UUID

from hostel_menu.domain.menu import MenuItem, MessType, Slot, sort_for_display
from hostel_menu.domain.sessions import SessionStatus, VotingSession
from hostel_menu.errors import InvalidInputError, StoreError
from hostel_menu.services.menu import MenuRepository
from hostel_menu.services.sessions import SessionService

logger = logging.getLogger(__name__)

_REVIEWABLE = {SessionStatus.CLOSED, SessionStatus.FINALIZED}


def has_manual_selection(items: Iterable[MenuItem]) -> bool:
    """Return True once any item carries is_selected=True."""
    return any(item.is_selected is True for item in items)


def compute_final_selection(items: list[MenuItem]) -> list[MenuItem]:
    """Resolve is_selected for every item, keeping all ties at the top.

    Once any item is selected the flags are returned untouched. Otherwise each
    slot selects every item with the slot's highest vote count, unless that
    count is zero.
    """
    if has_manual_selection(items):
        return list(items)
    resolved: dict[UUID, bool] = {}
    for slot_items in _group_by_slot(items).values():
        max_votes = max(item.vote_count for item in slot_items)
        for item in slot_items:
            resolved[item.id] = max_votes > 0 and item.vote_count == max_votes
    return [item.with_selection(resolved[item.id]) for item in items]


def select_report_winners(items: list[MenuItem]) -> list[MenuItem]:
    """Keep exactly one item per slot: the first after sorting by votes."""
    winners = []
    for slot_items in _group_by_slot(items).values():
        ranked = sorted(slot_items, key=lambda item: item.vote_count, reverse=True)
        winners.append(ranked[0])
    return sort_for_display(winners)


def _group_by_slot(items: Iterable[MenuItem]) -> dict[Slot, list[MenuItem]]:
    groups: dict[Slot, list[MenuItem]] = {}
    for item in items:
        groups.setdefault(item.slot, []).append(item)
    return groups


@dataclass(frozen=True)
class FinalizationReview:
    """Items of a session with their proposed final selection."""

    session: VotingSession
    items: list[MenuItem]
    decided: bool


@dataclass
class FinalizationService:
    """Service behind the admin review and finalize workflow."""

    menu_repository: MenuRepository
    session_service: SessionService

    def review(self, session_id: UUID) -> FinalizationReview:
        """Return items with is_selected resolved for admin review."""
        session = self._reviewable_session(session_id)
        items = self.menu_repository.list_items(session_id, with_votes=True)
        decided = has_manual_selection(items)
        resolved = [
            item.with_selection(item.is_selected is True)
            for item in compute_final_selection(items)
        ]
        return FinalizationReview(
            session=session, items=sort_for_display(resolved), decided=decided
        )

    def confirm(
        self, session_id: UUID, selections: Mapping[UUID, bool] | None = None
    ) -> VotingSession:
        """Persist every item's flag and mark the session finalized.

        Items missing from selections keep the flag proposed by review. The
        unselected flags are written before the selected ones, so a failed
        write never leaves a partial set of True flags that a later review
        would read as a manual decision.
        """
        review = self.review(session_id)
        overrides = dict(selections or {})
        known = {item.id for item in review.items}
        unknown = set(overrides) - known
        if unknown:
            raise InvalidInputError(
                "Selections reference items outside this session",
                details={"item_ids": sorted(str(item_id) for item_id in unknown)},
            )
        flags = {
            item.id: overrides.get(item.id, bool(item.is_selected))
            for item in review.items
        }
        try:
            self.menu_repository.set_selections(
                selected=[item_id for item_id, flag in flags.items() if flag],
                unselected=[item_id for item_id, flag in flags.items() if not flag],
            )
        except StoreError:
            logger.exception(
                "Failed to store final selection",
                extra={"session_id": str(session_id)},
            )
            raise

        session = review.session
        if session.status is SessionStatus.CLOSED:
            session = self.session_service.advance_status(
                session_id, SessionStatus.FINALIZED
            )
        logger.info(
            "Menu finalized",
            extra={
                "session_id": str(session_id),
                "selected": sum(flags.values()),
            },
        )
        return session

    def final_menu(self, session_id: UUID, mess_type: MessType) -> list[MenuItem]:
        """Return the selected items of a mess type in serving order."""
        self.session_service.get_session(session_id)
        items = self.menu_repository.list_items(session_id, mess_type)
        return sort_for_display([item for item in items if item.is_selected is True])

    def _reviewable_session(self, session_id: UUID) -> VotingSession:
        session = self.session_service.get_session(session_id)
        if session.status not in _REVIEWABLE:
            raise InvalidInputError(
                "Only closed or finalized sessions can be reviewed",
                details={"status": session.status.value},
            )
        return session
