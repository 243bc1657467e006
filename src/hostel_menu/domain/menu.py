"""Domain models for menu items and votes."""

from dataclasses import dataclass, replace
from datetime import date
from enum import StrEnum
from typing import NamedTuple
from uuid import UUID


class MealType(StrEnum):
    """Meal of the day, in serving order."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    SNACKS = "snacks"
    DINNER = "dinner"


class MessType(StrEnum):
    """Dietary category partitioning students, caterers and items."""

    VEG = "veg"
    NON_VEG = "non_veg"
    SPECIAL = "special"
    FOOD_PARK = "food_park"


MEAL_ORDER = {meal: index for index, meal in enumerate(MealType)}


class Slot(NamedTuple):
    """Items sharing a slot are mutually exclusive candidates."""

    date_served: date
    meal_type: MealType
    mess_type: MessType


@dataclass(frozen=True)
class MenuItem:
    """A proposed dish for one slot of a session."""

    id: UUID
    session_id: UUID
    date_served: date
    meal_type: MealType
    mess_type: MessType
    name: str
    description: str | None = None
    is_selected: bool | None = None
    vote_count: int = 0

    @property
    def slot(self) -> Slot:
        return Slot(self.date_served, self.meal_type, self.mess_type)

    def with_selection(self, selected: bool | None) -> "MenuItem":
        """Return a copy with the selection flag replaced."""
        return replace(self, is_selected=selected)


@dataclass(frozen=True)
class VoteRecord:
    """A persisted vote row."""

    id: UUID
    user_id: UUID
    menu_item_id: UUID


def sort_for_display(items: list[MenuItem]) -> list[MenuItem]:
    """Order items by date, then meal of the day."""
    return sorted(
        items, key=lambda item: (item.date_served, MEAL_ORDER[item.meal_type])
    )


def group_by_day(items: list[MenuItem]) -> dict[date, dict[MealType, list[MenuItem]]]:
    """Group items by date, then meal, both in serving order."""
    grouped: dict[date, dict[MealType, list[MenuItem]]] = {}
    for item in sort_for_display(items):
        grouped.setdefault(item.date_served, {}).setdefault(item.meal_type, []).append(
            item
        )
    return grouped
