"""Hostel event announcements."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request

from hostel_menu.api.dependencies import require_admin
from hostel_menu.api.schemas import EventCreate
from hostel_menu.api.serializers import serialize_event

if TYPE_CHECKING:
    from hostel_menu.containers import AppContainer

router = APIRouter(prefix="/api/events", tags=["events"])


@router.get("")
async def list_events(request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    return {
        "events": [serialize_event(e) for e in container.event_service.list_events()]
    }


@router.post("", dependencies=[Depends(require_admin)])
async def create_event(payload: EventCreate, request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    event = container.event_service.create_event(
        title=payload.title,
        event_date=payload.date,
        description=payload.description,
        location=payload.location,
        image_url=payload.image_url,
    )
    return serialize_event(event)


@router.delete("/{event_id}", dependencies=[Depends(require_admin)])
async def delete_event(event_id: UUID, request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    container.event_service.delete_event(event_id)
    return {"success": True}
