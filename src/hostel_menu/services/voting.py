"""Vote casting with one active vote per student per slot."""

import logging
import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Protocol
from uuid import UUID

from hostel_menu.domain.menu import MenuItem, VoteRecord, sort_for_display
from hostel_menu.domain.profiles import Profile, Role
from hostel_menu.domain.sessions import SessionStatus
from hostel_menu.errors import InvalidInputError, NotFoundError, StoreError
from hostel_menu.services.menu import MenuRepository
from hostel_menu.services.profiles import ProfileRepository
from hostel_menu.services.sessions import SessionRepository

logger = logging.getLogger(__name__)


class VoteRepository(Protocol):
    """Persistence interface for votes."""

    def list_votes(self, user_id: UUID) -> list[VoteRecord]:
        """Return every vote held by a user."""

    def insert_vote(self, user_id: UUID, menu_item_id: UUID) -> VoteRecord:
        """Record a vote and return it."""

    def delete_vote(self, user_id: UUID, menu_item_id: UUID) -> None:
        """Remove a user's vote for a menu item."""

    def delete_votes_for_user(self, user_id: UUID) -> None:
        """Remove every vote held by a user."""

    def count_session_votes(self, session_id: UUID) -> int:
        """Return the number of votes cast on a session's items."""


class VoteAction(StrEnum):
    """Store operation emitted by a toggle."""

    INSERT = "insert"
    DELETE = "delete"


@dataclass(frozen=True)
class VoteOperation:
    """Single insert or delete against the votes store."""

    action: VoteAction
    menu_item_id: UUID

    def inverse(self) -> "VoteOperation":
        if self.action is VoteAction.INSERT:
            return VoteOperation(VoteAction.DELETE, self.menu_item_id)
        return VoteOperation(VoteAction.INSERT, self.menu_item_id)


@dataclass(frozen=True)
class VoteToggle:
    """Outcome of toggling one item: the new vote set and the store ops."""

    votes: frozenset[UUID]
    operations: tuple[VoteOperation, ...]


@dataclass(frozen=True)
class Ballot:
    """Items a student can vote on in a session, with their current votes."""

    session_id: UUID
    items: list[MenuItem]
    voted_item_ids: frozenset[UUID]


def cast_vote(
    current_votes: Iterable[UUID], target: MenuItem, slot_items: Iterable[MenuItem]
) -> VoteToggle:
    """Toggle a vote on target, dropping any other vote held in its slot."""
    votes = set(current_votes)
    if target.id in votes:
        votes.discard(target.id)
        return VoteToggle(
            votes=frozenset(votes),
            operations=(VoteOperation(VoteAction.DELETE, target.id),),
        )

    operations: list[VoteOperation] = []
    for item in slot_items:
        if item.id == target.id or item.slot != target.slot:
            continue
        if item.id in votes:
            votes.discard(item.id)
            operations.append(VoteOperation(VoteAction.DELETE, item.id))
    votes.add(target.id)
    operations.append(VoteOperation(VoteAction.INSERT, target.id))
    return VoteToggle(votes=frozenset(votes), operations=tuple(operations))


@dataclass
class _StudentLock:
    lock: threading.Lock = field(default_factory=threading.Lock)
    holders: int = 0


@dataclass
class VotingService:
    """Applies vote toggles against the store and reverts failed ones."""

    vote_repository: VoteRepository
    menu_repository: MenuRepository
    session_repository: SessionRepository
    profile_repository: ProfileRepository
    _locks: dict[UUID, _StudentLock] = field(
        default_factory=dict, init=False, repr=False
    )
    _locks_guard: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )

    def list_votes(self, user_id: UUID) -> frozenset[UUID]:
        """Return the ids of items the user currently votes for."""
        return frozenset(
            vote.menu_item_id for vote in self.vote_repository.list_votes(user_id)
        )

    def load_ballot(self, student_id: UUID, session_id: UUID) -> Ballot:
        """Return the student's mess-type items for a session and their votes."""
        student = self._require_student(student_id)
        items = self.menu_repository.list_items(
            session_id, mess_type=student.mess_type
        )
        return Ballot(
            session_id=session_id,
            items=sort_for_display(items),
            voted_item_ids=self.list_votes(student_id),
        )

    def toggle_vote(
        self, student_id: UUID | None, menu_item_id: UUID | None
    ) -> VoteToggle:
        """Toggle the student's vote on an item, keeping one vote per slot."""
        if student_id is None or menu_item_id is None:
            raise InvalidInputError("user_id and menu_item_id are required")
        with self._student_lock(student_id):
            student = self._require_student(student_id)
            item = self.menu_repository.get_item(menu_item_id)
            if item is None:
                raise NotFoundError("Menu item not found")
            if item.mess_type != student.mess_type:
                raise InvalidInputError(
                    "Menu item belongs to another mess type",
                    details={"mess_type": item.mess_type.value},
                )
            session = self.session_repository.get_session(item.session_id)
            if session is None or session.status is not SessionStatus.OPEN_FOR_VOTING:
                raise InvalidInputError("Voting is not open for this session")

            current = self.list_votes(student_id)
            slot_items = self.menu_repository.list_slot_items(
                item.session_id, item.slot
            )
            toggle = cast_vote(current, item, slot_items)
            self._apply(student_id, toggle.operations)
            logger.info(
                "Vote toggled",
                extra={
                    "user_id": str(student_id),
                    "menu_item_id": str(menu_item_id),
                    "operations": [op.action.value for op in toggle.operations],
                },
            )
            return toggle

    def session_vote_total(self, session_id: UUID) -> int:
        """Return the number of votes cast across a session."""
        return self.vote_repository.count_session_votes(session_id)

    def vote_counts(self, session_id: UUID) -> dict[UUID, int]:
        """Return fresh vote counts keyed by menu item id."""
        items = self.menu_repository.list_items(session_id, with_votes=True)
        return {item.id: item.vote_count for item in items}

    def _require_student(self, student_id: UUID) -> Profile:
        profile = self.profile_repository.get_profile(student_id)
        if profile is None:
            raise NotFoundError("Profile not found")
        if profile.role is not Role.STUDENT:
            raise InvalidInputError("Only students can vote")
        if profile.mess_type is None:
            raise InvalidInputError("Set a mess type before voting")
        return profile

    @contextmanager
    def _student_lock(self, student_id: UUID) -> Iterator[None]:
        """Serialize toggles per student; the lock is dropped once unused."""
        with self._locks_guard:
            entry = self._locks.setdefault(student_id, _StudentLock())
            entry.holders += 1
        try:
            with entry.lock:
                yield
        finally:
            with self._locks_guard:
                entry.holders -= 1
                if entry.holders == 0:
                    del self._locks[student_id]

    def _apply(self, student_id: UUID, operations: tuple[VoteOperation, ...]) -> None:
        applied: list[VoteOperation] = []
        try:
            for operation in operations:
                self._run(student_id, operation)
                applied.append(operation)
        except StoreError:
            logger.exception(
                "Vote toggle failed, reverting",
                extra={"user_id": str(student_id), "applied": len(applied)},
            )
            self._revert(student_id, applied)
            raise

    def _revert(self, student_id: UUID, applied: list[VoteOperation]) -> None:
        for operation in reversed(applied):
            try:
                self._run(student_id, operation.inverse())
            except StoreError:
                logger.exception(
                    "Failed to revert vote operation",
                    extra={
                        "user_id": str(student_id),
                        "menu_item_id": str(operation.menu_item_id),
                    },
                )

    def _run(self, student_id: UUID, operation: VoteOperation) -> None:
        if operation.action is VoteAction.INSERT:
            self.vote_repository.insert_vote(student_id, operation.menu_item_id)
        else:
            self.vote_repository.delete_vote(student_id, operation.menu_item_id)
