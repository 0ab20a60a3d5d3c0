"""
End-of-day report PDF renderer using fpdf2.

The same renderer prints a live closing (with the day's transactions) and
a duplicate reprinted from an archived snapshot (figures and product
breakdown only).
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import date

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from madafacture.config.settings import PdfSettings, get_settings
from madafacture.core.entities.closing import DailyTotals, ProductStat
from madafacture.core.entities.transaction import PaymentTransaction
from madafacture.core.entities.user_settings import UserSettings
from madafacture.core.services.numbering import CLOSING_PREFIX
from madafacture.infrastructure.pdf.formatters import format_amount
from madafacture.infrastructure.pdf.layout import (
    ACCENT,
    NEUTRAL_BG,
    PRIMARY,
    TEXT_LIGHT,
    DocumentPdf,
    draw_document_header,
    draw_signature_block,
    safe_text,
)

STATS_Y = 58

_PRODUCT_COLUMNS = (
    ("ARTICLE", 90, "L"),
    ("UNITÉS", 20, "C"),
    ("CHIFFRE D'AFFAIRE", 40, "R"),
    ("MARGE", 40, "R"),
)

_TRANSACTION_COLUMNS = (
    ("HEURE", 18, "C"),
    ("LIBELLÉ", 62, "L"),
    ("CLIENT", 40, "L"),
    ("MODE", 35, "L"),
    ("MONTANT", 35, "R"),
)


class IDailyReportRenderer(ABC):
    """Interface for closing report rendering implementations."""

    @abstractmethod
    def render(
        self,
        transactions: Sequence[PaymentTransaction],
        product_stats: Sequence[ProductStat],
        totals: DailyTotals,
        day: date,
        settings: UserSettings,
        number: str | None = None,
        duplicate: bool = False,
        transactions_count: int | None = None,
    ) -> bytes:
        """Render a day's figures into PDF bytes."""
        ...


class Fpdf2DailyReportRenderer(IDailyReportRenderer):
    """Renders the "rapport de clôture"."""

    def __init__(self, pdf_settings: PdfSettings | None = None) -> None:
        if pdf_settings is None:
            pdf_settings = get_settings().pdf
        self._pdf_settings = pdf_settings

    def render(
        self,
        transactions: Sequence[PaymentTransaction],
        product_stats: Sequence[ProductStat],
        totals: DailyTotals,
        day: date,
        settings: UserSettings,
        number: str | None = None,
        duplicate: bool = False,
        transactions_count: int | None = None,
    ) -> bytes:
        if number is None:
            number = f"{CLOSING_PREFIX}{day.strftime('%Y%m%d')}"
        if transactions_count is None:
            transactions_count = len(transactions)
        title = "Rapport de clôture"
        if duplicate:
            title = f"{title} (duplicata)"

        pdf = DocumentPdf(self._pdf_settings, settings)
        pdf.set_auto_page_break(auto=True, margin=20)
        pdf.add_page()

        draw_document_header(pdf, settings, title, number, day)
        self._render_cards(pdf, totals, settings)
        self._render_methods(pdf, totals, transactions_count, settings)
        self._render_products(pdf, product_stats, settings)
        if transactions:
            self._render_transactions(pdf, transactions, settings)
        draw_signature_block(pdf, pdf.get_y() + 10)

        return bytes(pdf.output())

    @staticmethod
    def _render_cards(pdf: FPDF, totals: DailyTotals, settings: UserSettings) -> None:
        pdf.set_fill_color(*NEUTRAL_BG)
        pdf.rect(10, STATS_Y, 90, 22, style="F")
        pdf.rect(110, STATS_Y, 90, 22, style="F")

        pdf.set_font("Helvetica", "B", 8)
        pdf.set_text_color(*TEXT_LIGHT)
        pdf.set_xy(15, STATS_Y + 4)
        pdf.cell(80, 5, "RECETTE TOTALE (TTC)")
        pdf.set_xy(115, STATS_Y + 4)
        pdf.cell(80, 5, safe_text("BÉNÉFICE ESTIMÉ"))

        pdf.set_font("Helvetica", "B", 12)
        pdf.set_text_color(*PRIMARY)
        pdf.set_xy(15, STATS_Y + 11)
        pdf.cell(80, 7, format_amount(totals.total, settings.currency))
        pdf.set_text_color(*ACCENT)
        pdf.set_xy(115, STATS_Y + 11)
        pdf.cell(80, 7, format_amount(totals.profit, settings.currency))
        pdf.set_text_color(0, 0, 0)

    @staticmethod
    def _render_methods(
        pdf: FPDF, totals: DailyTotals, transactions_count: int, settings: UserSettings
    ) -> None:
        currency = settings.currency
        line = (
            f"Espèces : {format_amount(totals.cash, currency)}  |  "
            f"Mobile Money : {format_amount(totals.mobile, currency)}  |  "
            f"Crédit : {format_amount(totals.credit, currency)}  |  "
            f"Transactions : {transactions_count}"
        )
        pdf.set_xy(10, STATS_Y + 26)
        pdf.set_font("Helvetica", "", 8)
        pdf.set_text_color(*PRIMARY)
        pdf.cell(0, 5, safe_text(line), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_text_color(0, 0, 0)

    @staticmethod
    def _table_header(pdf: FPDF, columns: tuple) -> None:
        pdf.set_font("Helvetica", "B", 8)
        pdf.set_fill_color(*PRIMARY)
        pdf.set_text_color(255, 255, 255)
        for label, width, _ in columns:
            pdf.cell(width, 7, safe_text(label), border=1, fill=True, align="C")
        pdf.ln()
        pdf.set_text_color(0, 0, 0)
        pdf.set_font("Helvetica", "", 8)

    def _render_products(
        self, pdf: FPDF, product_stats: Sequence[ProductStat], settings: UserSettings
    ) -> None:
        pdf.ln(5)
        pdf.set_font("Helvetica", "B", 10)
        pdf.set_text_color(*PRIMARY)
        pdf.cell(0, 7, safe_text("DÉTAIL DES VENTES PAR ARTICLE"),
                 new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_text_color(0, 0, 0)

        self._table_header(pdf, _PRODUCT_COLUMNS)
        for stat in product_stats:
            values = (
                safe_text(stat.name[:55]),
                str(stat.quantity),
                format_amount(stat.revenue, settings.currency),
                format_amount(stat.profit, settings.currency),
            )
            for (_, width, align), value in zip(_PRODUCT_COLUMNS, values):
                pdf.cell(width, 6, value, border=1, align=align)
            pdf.ln()

    def _render_transactions(
        self,
        pdf: FPDF,
        transactions: Sequence[PaymentTransaction],
        settings: UserSettings,
    ) -> None:
        pdf.ln(5)
        pdf.set_font("Helvetica", "B", 10)
        pdf.set_text_color(*PRIMARY)
        pdf.cell(0, 7, "JOURNAL DES ENCAISSEMENTS", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_text_color(0, 0, 0)

        self._table_header(pdf, _TRANSACTION_COLUMNS)
        for tx in transactions:
            values = (
                tx.timestamp.strftime("%H:%M"),
                safe_text(tx.label[:38]),
                safe_text(tx.client_name[:24]),
                safe_text(tx.method.value),
                format_amount(tx.amount, settings.currency),
            )
            for (_, width, align), value in zip(_TRANSACTION_COLUMNS, values):
                pdf.cell(width, 6, value, border=1, align=align)
            pdf.ln()
