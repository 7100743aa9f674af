from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from schema import ApplicationDraft
from summary import summary_rows

# --- Fonts (reportlab built-ins) ---
BASE_FONT = "Helvetica"
BOLD_FONT = "Helvetica-Bold"

# --- Styles ---
styles = getSampleStyleSheet()
BASE_FONT_SIZE = 11
TITLE_FONT_SIZE = 20

FIRM_COLOR = colors.HexColor("#2196F3")

title_style = ParagraphStyle(
    "SummaryTitle",
    parent=styles["Title"],
    fontName=BOLD_FONT,
    fontSize=TITLE_FONT_SIZE,
    leading=TITLE_FONT_SIZE + 2,
    textColor=colors.HexColor("#222e3a"),
    spaceAfter=8,
)
label_style = ParagraphStyle(
    "SummaryLabel",
    parent=styles["Normal"],
    fontName=BOLD_FONT,
    fontSize=BASE_FONT_SIZE,
    leading=BASE_FONT_SIZE + 2,
)
value_style = ParagraphStyle(
    "SummaryValue",
    parent=styles["Normal"],
    fontName=BASE_FONT,
    fontSize=BASE_FONT_SIZE,
    leading=BASE_FONT_SIZE + 2,
    textColor=colors.HexColor("#6c7a89"),
)


def create_summary_pdf(draft: ApplicationDraft) -> bytes:
    """Render the application summary as a one-page A4 PDF and return its bytes."""
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=20 * mm,
        rightMargin=20 * mm,
        topMargin=20 * mm,
        bottomMargin=20 * mm,
        title="Application Summary",
    )

    rows = [
        [Paragraph(escape(label), label_style), Paragraph(escape(value), value_style)]
        for label, value in summary_rows(draft)
    ]
    table = Table(rows, colWidths=[55 * mm, doc.width - 55 * mm])
    table.setStyle(
        TableStyle(
            [
                ("VALIGN", (0, 0), (-1, -1), "TOP"),
                ("LINEBELOW", (0, 0), (-1, -1), 0.25, colors.HexColor("#d9effb")),
                ("LINEABOVE", (0, 0), (-1, 0), 1, FIRM_COLOR),
                ("TOPPADDING", (0, 0), (-1, -1), 4),
                ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
            ]
        )
    )

    doc.build([Paragraph("Application Summary", title_style), Spacer(1, 6 * mm), table])
    return buffer.getvalue()
