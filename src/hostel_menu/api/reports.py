"""PDF report download."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request, Response

from hostel_menu.domain.menu import MessType  # noqa: TC001

if TYPE_CHECKING:
    from hostel_menu.containers import AppContainer

router = APIRouter(prefix="/api", tags=["reports"])


@router.get("/generate-pdf/{session_id}/{mess_type}")
async def generate_pdf(
    session_id: UUID, mess_type: MessType, request: Request
) -> Response:
    """Return the menu report as a PDF attachment."""
    container: AppContainer = request.app.state.container
    report = container.report_service.render(session_id, mess_type)
    return Response(
        content=report.content,
        media_type=report.media_type,
        headers={"Content-Disposition": f'attachment; filename="{report.filename}"'},
    )
