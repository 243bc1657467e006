"""Tests for JSON shapes."""

from datetime import date

from hostel_menu.api.serializers import serialize_grouped
from hostel_menu.domain.menu import MealType
from tests.conftest import make_item, make_session


def test_serialize_grouped_nests_by_day_and_meal() -> None:
    session = make_session()
    dinner = make_item(session.id, "Paneer", meal_type=MealType.DINNER)
    breakfast = make_item(session.id, "Idli", meal_type=MealType.BREAKFAST)
    tomorrow = make_item(session.id, "Poha", date_served=date(2024, 7, 2))

    grouped = serialize_grouped([tomorrow, dinner, breakfast])

    assert list(grouped) == ["2024-07-01", "2024-07-02"]
    assert list(grouped["2024-07-01"]) == ["breakfast", "dinner"]
    assert grouped["2024-07-02"]["lunch"][0]["name"] == "Poha"
