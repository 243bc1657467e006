"""Menu report generation for a session and mess type."""

import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID

from hostel_menu.domain.menu import MenuItem, MessType, sort_for_display
from hostel_menu.domain.sessions import SessionStatus, VotingSession
from hostel_menu.services.finalization import (
    has_manual_selection,
    select_report_winners,
)
from hostel_menu.services.menu import MenuRepository
from hostel_menu.services.sessions import SessionService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MenuReport:
    """Items that make up an exported menu."""

    title: str
    session: VotingSession
    mess_type: MessType
    items: list[MenuItem]
    generated_on: date


@dataclass(frozen=True)
class RenderedReport:
    """A rendered report ready for download."""

    filename: str
    content: bytes
    media_type: str = "application/pdf"


class ReportRenderer(Protocol):
    """Turns a menu report into a document."""

    def render(self, report: MenuReport) -> bytes:
        """Return the rendered document bytes."""


@dataclass
class ReportService:
    """Service that selects report items and renders them."""

    session_service: SessionService
    menu_repository: MenuRepository
    renderer: ReportRenderer
    title: str = "Hostel Mess Menu"

    def build(
        self, session_id: UUID, mess_type: MessType, today: date | None = None
    ) -> MenuReport:
        """Select the items to report.

        Finalized sessions report manual selections when any exist, otherwise
        a single top-voted item per slot. Other sessions report every item.
        """
        session = self.session_service.get_session(session_id)
        items = sort_for_display(
            self.menu_repository.list_items(session_id, mess_type, with_votes=True)
        )
        if session.status is SessionStatus.FINALIZED:
            if has_manual_selection(items):
                items = [item for item in items if item.is_selected is True]
            else:
                items = select_report_winners(items)
        return MenuReport(
            title=self.title,
            session=session,
            mess_type=mess_type,
            items=items,
            generated_on=today or datetime.now(tz=UTC).date(),
        )

    def render(self, session_id: UUID, mess_type: MessType) -> RenderedReport:
        """Build and render the report for download."""
        report = self.build(session_id, mess_type)
        content = self.renderer.render(report)
        logger.info(
            "Report generated",
            extra={
                "session_id": str(session_id),
                "mess_type": mess_type.value,
                "items": len(report.items),
            },
        )
        return RenderedReport(
            filename=report_filename(mess_type, report.generated_on),
            content=content,
        )


def report_filename(mess_type: MessType, generated_on: date) -> str:
    """Return the download name for a report."""
    return f"menu-report-{mess_type.value}-{generated_on.isoformat()}.pdf"
