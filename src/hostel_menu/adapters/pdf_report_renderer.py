"""PDF rendering of menu reports with reportlab."""

from dataclasses import dataclass
from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from hostel_menu.domain.menu import MenuItem, MessType, group_by_day
from hostel_menu.services.reports import MenuReport, ReportRenderer

_TABLE_STYLE = TableStyle(
    [
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#4f46e5")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#d1d5db")),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
        ("ALIGN", (-1, 0), (-1, -1), "RIGHT"),
    ]
)


@dataclass
class ReportlabMenuRenderer(ReportRenderer):
    """Renders a menu report as a one-table-per-day PDF."""

    page_size: tuple[float, float] = A4

    def render(self, report: MenuReport) -> bytes:
        """Return the PDF bytes for a report."""
        buffer = BytesIO()
        document = SimpleDocTemplate(
            buffer,
            pagesize=self.page_size,
            title=f"{report.title} - {report.session.title}",
            leftMargin=18 * mm,
            rightMargin=18 * mm,
        )
        styles = getSampleStyleSheet()
        story: list[object] = [
            Paragraph(escape(report.title), styles["Title"]),
            Paragraph(f"Session: {escape(report.session.title)}", styles["Normal"]),
            Paragraph(f"Mess: {mess_label(report.mess_type)}", styles["Normal"]),
            Paragraph(
                f"Period: {report.session.start_date:%d %b %Y} to "
                f"{report.session.end_date:%d %b %Y}",
                styles["Normal"],
            ),
            Paragraph(
                f"Status: {report.session.status.value.replace('_', ' ')} | "
                f"Generated: {report.generated_on.isoformat()}",
                styles["Normal"],
            ),
            Spacer(1, 6 * mm),
        ]
        if not report.items:
            story.append(Paragraph("No menu items to report.", styles["Italic"]))
        for day, meals in group_by_day(report.items).items():
            story.append(Paragraph(f"{day:%A, %d %b %Y}", styles["Heading2"]))
            rows: list[list[object]] = [["Meal", "Item", "Details", "Votes"]]
            for meal_type, items in meals.items():
                rows.extend(
                    _item_row(meal_type.value.title(), item, styles["BodyText"])
                    for item in items
                )
            table = Table(
                rows,
                colWidths=[25 * mm, 50 * mm, 80 * mm, 15 * mm],
                repeatRows=1,
            )
            table.setStyle(_TABLE_STYLE)
            story.append(table)
            story.append(Spacer(1, 5 * mm))
        document.build(story)
        return buffer.getvalue()


def mess_label(mess_type: MessType) -> str:
    """Return a display label such as 'Non Veg'."""
    return mess_type.value.replace("_", " ").title()


def _item_row(meal: str, item: MenuItem, style: object) -> list[object]:
    details = Paragraph(escape(item.description), style) if item.description else ""
    return [meal, item.name, details, str(item.vote_count)]
