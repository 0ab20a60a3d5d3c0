"""
Sales document PDF renderer using fpdf2.

Renders an invoice, quote or cash receipt: business header and document
cartouche, client block, item table, totals, amount in words, payment
block and signature boxes.
"""

from abc import ABC, abstractmethod

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from madafacture.config.settings import PdfSettings, get_settings
from madafacture.core.entities.client import Client
from madafacture.core.entities.invoice import DocumentType, Invoice, InvoiceStatus
from madafacture.core.entities.transaction import PaymentMethod
from madafacture.core.entities.user_settings import UserSettings
from madafacture.infrastructure.pdf.formatters import format_amount, number_to_words
from madafacture.infrastructure.pdf.layout import (
    ACCENT,
    PRIMARY,
    TEXT_LIGHT,
    DocumentPdf,
    draw_document_header,
    draw_signature_block,
    safe_text,
)

CLIENT_SECTION_Y = 62
TABLE_START_Y = 95

_COLUMNS = (
    ("#", 10, "C"),
    ("DÉSIGNATION", 83, "L"),
    ("QTÉ", 15, "C"),
    ("UNITÉ", 18, "C"),
    ("P.U", 32, "R"),
    ("TOTAL HT", 32, "R"),
)


class IInvoicePdfRenderer(ABC):
    """Interface for sales document PDF rendering implementations."""

    @abstractmethod
    def render(self, invoice: Invoice, client: Client, settings: UserSettings) -> bytes:
        """Render a sales document into PDF bytes."""
        ...


def document_title(doc_type: DocumentType) -> str:
    if doc_type == DocumentType.RECU:
        return "Reçu de caisse"
    return doc_type.value


class Fpdf2InvoiceRenderer(IInvoicePdfRenderer):
    """Renders invoices, quotes and receipts. Inputs are never modified."""

    def __init__(self, pdf_settings: PdfSettings | None = None) -> None:
        if pdf_settings is None:
            pdf_settings = get_settings().pdf
        self._pdf_settings = pdf_settings

    def render(self, invoice: Invoice, client: Client, settings: UserSettings) -> bytes:
        pdf = DocumentPdf(self._pdf_settings, settings)
        pdf.set_auto_page_break(auto=True, margin=20)
        pdf.add_page()

        draw_document_header(
            pdf,
            settings,
            document_title(invoice.type),
            invoice.number,
            invoice.issue_date,
            invoice.due_date,
        )
        self._render_client(pdf, client)
        self._render_items(pdf, invoice, settings)
        self._render_totals(pdf, invoice, settings)
        self._render_payment(pdf, invoice, settings)
        draw_signature_block(pdf, pdf.get_y() + 10)

        return bytes(pdf.output())

    @staticmethod
    def _render_client(pdf: FPDF, client: Client) -> None:
        pdf.set_xy(10, CLIENT_SECTION_Y)
        pdf.set_font("Helvetica", "B", 8)
        pdf.set_text_color(*TEXT_LIGHT)
        pdf.cell(0, 5, "CLIENT / DESTINATAIRE :", new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        pdf.set_font("Helvetica", "B", 11)
        pdf.set_text_color(*PRIMARY)
        pdf.cell(0, 7, safe_text(client.name.upper()), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        pdf.set_font("Helvetica", "", 8)
        details = [client.address or "Adresse non communiquée"]
        if client.phone:
            details.append(f"Tél: {client.phone}")
        if client.fiscal and client.fiscal.nif:
            details.append(f"NIF: {client.fiscal.nif} | STAT: {client.fiscal.stat or 'N/A'}")
        for line in details:
            pdf.cell(0, 4, safe_text(line), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_text_color(0, 0, 0)

    @staticmethod
    def _render_items(pdf: FPDF, invoice: Invoice, settings: UserSettings) -> None:
        pdf.set_y(max(pdf.get_y() + 6, TABLE_START_Y))

        pdf.set_font("Helvetica", "B", 8)
        pdf.set_fill_color(*PRIMARY)
        pdf.set_text_color(255, 255, 255)
        for label, width, _ in _COLUMNS:
            if label == "P.U":
                label = f"P.U ({settings.currency})"
            pdf.cell(width, 7, safe_text(label), border=1, fill=True, align="C")
        pdf.ln()
        pdf.set_text_color(0, 0, 0)

        pdf.set_font("Helvetica", "", 8)
        for index, item in enumerate(invoice.items, 1):
            values = (
                str(index),
                safe_text(item.description[:50]),
                str(item.quantity),
                safe_text(item.unit or "U"),
                format_amount(item.unit_price, settings.currency),
                format_amount(item.line_total, settings.currency),
            )
            for (_, width, align), value in zip(_COLUMNS, values):
                pdf.cell(width, 6, value, border=1, align=align)
            pdf.ln()
        pdf.ln(4)

    @staticmethod
    def _render_totals(pdf: FPDF, invoice: Invoice, settings: UserSettings) -> None:
        currency = settings.currency
        pdf.set_font("Helvetica", "", 9)
        pdf.set_text_color(*PRIMARY)

        pdf.set_x(125)
        pdf.cell(40, 6, "TOTAL HORS-TAXES :")
        pdf.cell(35, 6, format_amount(invoice.subtotal, currency), align="R",
                 new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        if invoice.vat_total > 0:
            rates = {item.vat_rate for item in invoice.items}
            label = f"TVA ({rates.pop():g}%) :" if len(rates) == 1 else "TVA :"
            pdf.set_x(125)
            pdf.cell(40, 6, label)
            pdf.cell(35, 6, format_amount(invoice.vat_total, currency), align="R",
                     new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        pdf.set_x(125)
        pdf.set_fill_color(*PRIMARY)
        pdf.set_text_color(255, 255, 255)
        pdf.set_font("Helvetica", "B", 11)
        pdf.cell(35, 10, "TOTAL TTC :", fill=True)
        pdf.cell(40, 10, format_amount(invoice.total, currency), fill=True, align="R",
                 new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        pdf.ln(6)
        pdf.set_font("Helvetica", "I", 8)
        pdf.set_text_color(*TEXT_LIGHT)
        pdf.cell(0, 5, safe_text("Somme arrêtée à la valeur de :"),
                 new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_font("Helvetica", "B", 8)
        pdf.set_text_color(*PRIMARY)
        pdf.multi_cell(
            180, 5,
            safe_text(number_to_words(invoice.total, settings.currency_name).upper()),
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )
        pdf.set_text_color(0, 0, 0)

    @staticmethod
    def _render_payment(pdf: FPDF, invoice: Invoice, settings: UserSettings) -> None:
        """Payment box, only when something was collected."""
        if invoice.paid_amount <= 0:
            return

        method = invoice.payment_method or PaymentMethod.ESPECES
        lines = [
            f"MODE DE RÈGLEMENT : {method.value}",
            f"MONTANT ENCAISSÉ : {format_amount(invoice.paid_amount, settings.currency)}",
        ]
        if invoice.status == InvoiceStatus.PARTIEL:
            lines.append(
                f"RESTE À PAYER : {format_amount(invoice.balance_due, settings.currency)}"
            )

        pdf.ln(5)
        top = pdf.get_y()
        pdf.set_draw_color(*ACCENT)
        pdf.set_line_width(0.5)
        pdf.rect(10, top, 100, 5 * len(lines) + 5)
        pdf.set_line_width(0.2)
        pdf.set_draw_color(0, 0, 0)

        pdf.set_font("Helvetica", "B", 9)
        pdf.set_text_color(*ACCENT)
        pdf.set_y(top + 2.5)
        for line in lines:
            pdf.set_x(15)
            pdf.cell(90, 5, safe_text(line), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_y(top + 5 * len(lines) + 5)
        pdf.set_text_color(0, 0, 0)
