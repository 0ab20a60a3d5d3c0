"""
Page furniture shared by every printed document.

Colors, the business header with its document cartouche, the signature
block and the legal footer are drawn the same way on invoices and on
closing reports.
"""

from datetime import date

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from madafacture.config import get_logger
from madafacture.config.settings import PdfSettings
from madafacture.core.entities.user_settings import UserSettings

logger = get_logger(__name__)

PRIMARY = (15, 23, 42)
ACCENT = (5, 150, 105)
NEUTRAL_BG = (248, 250, 252)
BORDER = (226, 232, 240)
TEXT_LIGHT = (100, 116, 139)

CARTOUCHE_X = 135


def safe_text(text: str | None) -> str:
    """Return *text* encodable by the latin-1 core fonts, '?' for the rest."""
    if not text:
        return ""
    return text.encode("latin-1", errors="replace").decode("latin-1")


def format_day(day: date) -> str:
    return day.strftime("%d/%m/%Y")


class DocumentPdf(FPDF):
    """FPDF subclass that prints the legal line at the bottom of every page."""

    def __init__(self, pdf_settings: PdfSettings, business: UserSettings) -> None:
        super().__init__(format="A4")
        self._footer_text = safe_text(
            f"{pdf_settings.footer_text} - NIF {business.nif} - {business.business_name}"
        )

    def footer(self) -> None:
        self.set_y(-12)
        self.set_font("Helvetica", "", 7)
        self.set_text_color(*TEXT_LIGHT)
        self.cell(0, 5, self._footer_text, align="C")
        self.set_text_color(0, 0, 0)


def draw_document_header(
    pdf: FPDF,
    business: UserSettings,
    title: str,
    number: str,
    issued: date,
    due: date | None = None,
) -> None:
    """Business identity on the left, document cartouche on the right."""
    text_x = 10
    if business.logo_path:
        try:
            pdf.image(business.logo_path, x=10, y=10, w=25, h=25)
            text_x = 40
        except Exception as e:
            logger.warning("logo_unreadable", logo_path=business.logo_path, error=str(e))

    pdf.set_text_color(*PRIMARY)
    pdf.set_font("Helvetica", "B", 14)
    pdf.set_xy(text_x, 12)
    pdf.multi_cell(
        85, 6, safe_text(business.business_name.upper()),
        new_x=XPos.LMARGIN, new_y=YPos.NEXT,
    )

    pdf.set_font("Helvetica", "", 8)
    pdf.set_text_color(*TEXT_LIGHT)
    details = [
        business.address,
        f"Tél: {business.phone}",
        f"Email: {business.email}",
        f"NIF: {business.nif} | STAT: {business.stat}",
        f"RCS: {business.rcs}",
    ]
    if business.bank_info:
        details.append(business.bank_info)
    for line in details:
        pdf.set_x(text_x)
        pdf.cell(85, 4, safe_text(line), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    pdf.set_fill_color(*NEUTRAL_BG)
    pdf.rect(CARTOUCHE_X, 10, 65, 38, style="F")

    pdf.set_text_color(*ACCENT)
    pdf.set_font("Helvetica", "B", 11)
    pdf.set_xy(CARTOUCHE_X + 5, 14)
    pdf.cell(60, 6, safe_text(title.upper()))

    pdf.set_text_color(*PRIMARY)
    pdf.set_font("Helvetica", "B", 9)
    pdf.set_xy(CARTOUCHE_X + 5, 24)
    pdf.cell(60, 5, safe_text(f"N° : {number}"))

    pdf.set_font("Helvetica", "", 8)
    pdf.set_xy(CARTOUCHE_X + 5, 31)
    pdf.cell(60, 5, f"Date : {format_day(issued)}")
    if due is not None:
        pdf.set_xy(CARTOUCHE_X + 5, 37)
        pdf.cell(60, 5, safe_text(f"Échéance : {format_day(due)}"))

    pdf.set_text_color(0, 0, 0)


def draw_signature_block(pdf: FPDF, y: float) -> None:
    """Client and management signature boxes, on a new page if needed."""
    if y > 245:
        pdf.add_page()
        y = 20
    y = max(y, 235.0)

    pdf.set_draw_color(*BORDER)
    pdf.line(10, y, 200, y)

    pdf.set_font("Helvetica", "B", 8)
    pdf.set_text_color(*PRIMARY)
    pdf.set_xy(15, y + 4)
    pdf.cell(60, 5, "LE CLIENT (Bon pour accord)")
    pdf.set_xy(145, y + 4)
    pdf.cell(55, 5, "LA DIRECTION")

    pdf.rect(10, y + 11, 65, 20)
    pdf.rect(135, y + 11, 65, 20)

    pdf.set_draw_color(0, 0, 0)
    pdf.set_text_color(0, 0, 0)
