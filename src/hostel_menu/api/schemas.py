"""Pydantic models for request payloads."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field

from hostel_menu.domain.menu import MealType, MessType
from hostel_menu.domain.sessions import SessionStatus


class SessionCreate(BaseModel):
    """New voting session."""

    title: str = Field(min_length=1)
    start_date: date
    end_date: date


class SessionStatusUpdate(BaseModel):
    """Requested next status of a session."""

    status: SessionStatus


class MenuItemCreate(BaseModel):
    """Caterer menu proposal."""

    session_id: UUID
    date_served: date
    meal_type: MealType
    mess_type: MessType
    name: str = Field(min_length=1)
    description: str | None = None


class VoteToggleRequest(BaseModel):
    """Item whose vote should be toggled."""

    menu_item_id: UUID


class FinalizeRequest(BaseModel):
    """Admin's per-item selection overrides."""

    selections: dict[UUID, bool] = Field(default_factory=dict)


class MessTypeUpdate(BaseModel):
    """Student mess type change."""

    mess_type: MessType


class FeedbackCreate(BaseModel):
    """Student feedback for a caterer."""

    caterer_id: UUID
    message: str = Field(min_length=1)


class FeedbackResponse(BaseModel):
    """Caterer response to feedback."""

    response: str = Field(min_length=1)


class EventCreate(BaseModel):
    """New event announcement."""

    title: str = Field(min_length=1)
    date: date
    description: str | None = None
    location: str | None = None
    image_url: str | None = None


class SettingUpdate(BaseModel):
    """Registration switch value."""

    enabled: bool
