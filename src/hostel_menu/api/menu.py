"""Menu item endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request

from hostel_menu.api.dependencies import require_caterer
from hostel_menu.api.schemas import MenuItemCreate
from hostel_menu.api.serializers import serialize_item
from hostel_menu.domain.menu import MessType
from hostel_menu.domain.profiles import Profile

if TYPE_CHECKING:
    from hostel_menu.containers import AppContainer

router = APIRouter(prefix="/api/menu", tags=["menu"])


@router.get("/session/{session_id}")
async def list_items(
    session_id: UUID, request: Request, mess_type: MessType | None = None
) -> dict[str, object]:
    """Return a session's items, optionally for one mess type."""
    container: AppContainer = request.app.state.container
    items = container.menu_service.list_items(session_id, mess_type)
    return {"items": [serialize_item(item) for item in items]}


@router.post("")
async def add_item(
    payload: MenuItemCreate,
    request: Request,
    caterer: Profile = Depends(require_caterer),
) -> dict[str, object]:
    """Propose an item for a draft session."""
    container: AppContainer = request.app.state.container
    item = container.menu_service.add_item(
        caterer=caterer,
        session_id=payload.session_id,
        date_served=payload.date_served,
        meal_type=payload.meal_type,
        mess_type=payload.mess_type,
        name=payload.name,
        description=payload.description,
    )
    return serialize_item(item)


@router.delete("/{item_id}", dependencies=[Depends(require_caterer)])
async def delete_item(item_id: UUID, request: Request) -> dict[str, object]:
    """Remove a proposed item."""
    container: AppContainer = request.app.state.container
    container.menu_service.delete_item(item_id)
    return {"success": True}
