"""
Service factory functions for dependency injection.

Wires the SQLite stores and fpdf2 renderers to the layer-pure services.
Use cases fall back to these when no collaborator is injected.
"""

from typing import TYPE_CHECKING

from madafacture.core.services import DailyJournalService
from madafacture.infrastructure.pdf import Fpdf2DailyReportRenderer, Fpdf2InvoiceRenderer

if TYPE_CHECKING:
    from madafacture.core.interfaces import (
        IInvoiceStore,
        ISalesStore,
        ITransactionStore,
    )


# Singleton service instances
_daily_journal_service: DailyJournalService | None = None
_invoice_renderer: Fpdf2InvoiceRenderer | None = None
_daily_report_renderer: Fpdf2DailyReportRenderer | None = None


async def get_daily_journal_service(
    transaction_store: "ITransactionStore | None" = None,
    sales_store: "ISalesStore | None" = None,
    invoice_store: "IInvoiceStore | None" = None,
) -> DailyJournalService:
    """
    Get or create the DailyJournalService.

    Any store passed in overrides the SQLite one, and the resulting service
    is not cached.
    """
    global _daily_journal_service

    overridden = any(s is not None for s in (transaction_store, sales_store, invoice_store))
    if _daily_journal_service is not None and not overridden:
        return _daily_journal_service

    # Lazy import infrastructure
    from madafacture.infrastructure.storage.sqlite import (
        get_invoice_store,
        get_sales_store,
        get_transaction_store,
    )

    service = DailyJournalService(
        transaction_store=transaction_store or await get_transaction_store(),
        sales_store=sales_store or await get_sales_store(),
        invoice_store=invoice_store or await get_invoice_store(),
    )

    if not overridden:
        _daily_journal_service = service

    return service


def get_invoice_renderer() -> Fpdf2InvoiceRenderer:
    """Get or create the invoice PDF renderer."""
    global _invoice_renderer
    if _invoice_renderer is None:
        _invoice_renderer = Fpdf2InvoiceRenderer()
    return _invoice_renderer


def get_daily_report_renderer() -> Fpdf2DailyReportRenderer:
    """Get or create the closing report PDF renderer."""
    global _daily_report_renderer
    if _daily_report_renderer is None:
        _daily_report_renderer = Fpdf2DailyReportRenderer()
    return _daily_report_renderer


def reset_services() -> None:
    """
    Reset all singleton service instances.

    Useful for testing or when configuration changes.
    """
    global _daily_journal_service
    global _invoice_renderer
    global _daily_report_renderer

    _daily_journal_service = None
    _invoice_renderer = None
    _daily_report_renderer = None


__all__ = [
    "get_daily_journal_service",
    "get_daily_report_renderer",
    "get_invoice_renderer",
    "reset_services",
]
