"""Tests for menu finalization."""

from uuid import uuid4

import pytest

from hostel_menu.domain.menu import MealType, MessType
from hostel_menu.domain.sessions import SessionStatus
from hostel_menu.errors import InvalidInputError, NotFoundError, StoreError
from hostel_menu.services.finalization import (
    compute_final_selection,
    select_report_winners,
)
from tests.conftest import make_item, make_session


def _slot(votes: list[int], **kwargs):
    session_id = kwargs.pop("session_id", uuid4())
    return [
        make_item(session_id, f"Item {index}", vote_count=count, **kwargs)
        for index, count in enumerate(votes)
    ]


def test_tied_winners_are_all_selected() -> None:
    items = _slot([3, 3, 1])

    resolved = compute_final_selection(items)

    assert [item.is_selected for item in resolved] == [True, True, False]


def test_all_zero_slot_selects_nothing() -> None:
    resolved = compute_final_selection(_slot([0, 0, 0]))

    assert [item.is_selected for item in resolved] == [False, False, False]


def test_existing_selection_is_left_untouched() -> None:
    items = _slot([5, 1])
    items = [items[0], items[1].with_selection(True)]

    resolved = compute_final_selection(items)

    assert resolved == items
    assert resolved[0].is_selected is None


def test_slots_are_resolved_independently() -> None:
    session_id = uuid4()
    lunch = _slot([2, 4], session_id=session_id)
    dinner = _slot([0, 0], session_id=session_id, meal_type=MealType.DINNER)
    non_veg = _slot([1], session_id=session_id, mess_type=MessType.NON_VEG)

    resolved = compute_final_selection(lunch + dinner + non_veg)

    assert [item.is_selected for item in resolved] == [
        False,
        True,
        False,
        False,
        True,
    ]


def test_compute_final_selection_is_idempotent() -> None:
    once = compute_final_selection(_slot([3, 3, 1]))

    assert compute_final_selection(once) == once


def test_compute_final_selection_on_no_items() -> None:
    assert compute_final_selection([]) == []


def test_report_winners_keep_one_item_per_slot() -> None:
    items = _slot([3, 3, 1])

    winners = select_report_winners(items)

    assert [item.id for item in winners] == [items[0].id]


def test_report_winners_include_zero_vote_slots() -> None:
    items = _slot([0, 0])

    winners = select_report_winners(items)

    assert len(winners) == 1


@pytest.fixture
def closed_session(session_repository):
    return session_repository.add(make_session(SessionStatus.CLOSED))


@pytest.fixture
def closed_items(menu_repository, closed_session):
    return [
        menu_repository.add(item)
        for item in _slot([3, 3, 1], session_id=closed_session.id)
    ]


def test_review_proposes_tied_winners(container, closed_session, closed_items) -> None:
    review = container.finalization_service.review(closed_session.id)

    assert review.decided is False
    selected = {item.id for item in review.items if item.is_selected}
    assert selected == {closed_items[0].id, closed_items[1].id}
    assert all(item.is_selected is not None for item in review.items)


def test_review_rejects_open_session(container, session_repository) -> None:
    session = session_repository.add(make_session(SessionStatus.OPEN_FOR_VOTING))

    with pytest.raises(InvalidInputError):
        container.finalization_service.review(session.id)


def test_review_unknown_session(container) -> None:
    with pytest.raises(NotFoundError):
        container.finalization_service.review(uuid4())


def test_confirm_persists_flags_and_finalizes(
    container, menu_repository, closed_session, closed_items
) -> None:
    session = container.finalization_service.confirm(
        closed_session.id, {closed_items[1].id: False}
    )

    assert session.status is SessionStatus.FINALIZED
    assert menu_repository.selections == {
        closed_items[0].id: True,
        closed_items[1].id: False,
        closed_items[2].id: False,
    }


def test_confirm_rejects_foreign_items(container, closed_session, closed_items) -> None:
    with pytest.raises(InvalidInputError):
        container.finalization_service.confirm(closed_session.id, {uuid4(): True})


def test_edit_final_menu_keeps_session_finalized(
    container, menu_repository, closed_session, closed_items
) -> None:
    service = container.finalization_service
    service.confirm(closed_session.id)

    review = service.review(closed_session.id)
    session = service.confirm(closed_session.id, {closed_items[2].id: True})

    assert review.decided is True
    assert session.status is SessionStatus.FINALIZED
    assert menu_repository.selections[closed_items[2].id] is True
    assert menu_repository.selections[closed_items[0].id] is True


def test_confirm_empty_session(container, session_repository) -> None:
    session = session_repository.add(make_session(SessionStatus.CLOSED))

    finalized = container.finalization_service.confirm(session.id)

    assert finalized.status is SessionStatus.FINALIZED


def test_final_menu_lists_selected_items_for_mess(
    container, menu_repository, closed_session, closed_items
) -> None:
    container.finalization_service.confirm(closed_session.id)
    menu_repository.add(
        make_item(
            closed_session.id, "Fish", mess_type=MessType.NON_VEG, is_selected=True
        )
    )

    menu = container.finalization_service.final_menu(closed_session.id, MessType.VEG)

    assert [item.id for item in menu] == [closed_items[0].id, closed_items[1].id]


def test_failed_confirm_is_not_read_as_a_decision(
    container, menu_repository, closed_session, closed_items
) -> None:
    menu_repository.fail_selected_write = True

    with pytest.raises(StoreError):
        container.finalization_service.confirm(closed_session.id)

    review = container.finalization_service.review(closed_session.id)
    assert review.decided is False
    assert review.session.status is SessionStatus.CLOSED
    assert menu_repository.selections == {closed_items[2].id: False}
