"""PDF generation infrastructure."""

from madafacture.infrastructure.pdf.daily_report_renderer import (
    Fpdf2DailyReportRenderer,
    IDailyReportRenderer,
)
from madafacture.infrastructure.pdf.export import (
    closing_filename,
    invoice_filename,
    save_pdf,
)
from madafacture.infrastructure.pdf.formatters import format_amount, number_to_words
from madafacture.infrastructure.pdf.invoice_renderer import (
    Fpdf2InvoiceRenderer,
    IInvoicePdfRenderer,
)

__all__ = [
    "Fpdf2DailyReportRenderer",
    "Fpdf2InvoiceRenderer",
    "IDailyReportRenderer",
    "IInvoicePdfRenderer",
    "closing_filename",
    "format_amount",
    "invoice_filename",
    "number_to_words",
    "save_pdf",
]
