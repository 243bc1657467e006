"""Tests for profile reads and mess type changes."""

from uuid import uuid4

import pytest

from hostel_menu.domain.menu import MessType
from hostel_menu.domain.sessions import SessionStatus
from hostel_menu.errors import InvalidInputError, NotFoundError
from tests.conftest import make_caterer, make_item, make_session, make_student


def test_changing_mess_type_clears_all_votes(
    container, profile_repository, session_repository, menu_repository
) -> None:
    student = profile_repository.add(make_student(MessType.VEG))
    session = session_repository.add(make_session(SessionStatus.OPEN_FOR_VOTING))
    item = menu_repository.add(make_item(session.id, "Dal"))
    container.voting_service.toggle_vote(student.id, item.id)

    cleared = container.profile_service.change_mess_type(student.id, MessType.SPECIAL)

    assert cleared is True
    assert container.voting_service.list_votes(student.id) == frozenset()
    assert profile_repository.profiles[student.id].mess_type is MessType.SPECIAL


def test_same_mess_type_keeps_votes(
    container, profile_repository, vote_repository
) -> None:
    student = profile_repository.add(make_student(MessType.VEG))
    vote_repository.insert_vote(student.id, uuid4())

    cleared = container.profile_service.change_mess_type(student.id, MessType.VEG)

    assert cleared is False
    assert len(vote_repository.list_votes(student.id)) == 1


def test_first_mess_type_choice(container, profile_repository) -> None:
    student = profile_repository.add(make_student(mess_type=None))

    assert container.profile_service.change_mess_type(student.id, MessType.VEG)
    assert profile_repository.profiles[student.id].mess_type is MessType.VEG


def test_only_students_change_mess_type(container, profile_repository) -> None:
    caterer = profile_repository.add(make_caterer())

    with pytest.raises(InvalidInputError):
        container.profile_service.change_mess_type(caterer.id, MessType.VEG)


def test_get_missing_profile(container) -> None:
    with pytest.raises(NotFoundError):
        container.profile_service.get_profile(uuid4())


def test_list_caterers_by_mess_type(container, profile_repository) -> None:
    veg = profile_repository.add(make_caterer([MessType.VEG, MessType.SPECIAL]))
    profile_repository.add(make_caterer([MessType.NON_VEG]))
    profile_repository.add(make_student())

    caterers = container.profile_service.list_caterers(MessType.SPECIAL)

    assert [caterer.id for caterer in caterers] == [veg.id]
    assert len(container.profile_service.list_caterers()) == 2
