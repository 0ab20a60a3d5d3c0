"""Abstract interface for sales document storage."""

from abc import ABC, abstractmethod
from datetime import date

from madafacture.core.entities.invoice import DocumentType, Invoice, InvoiceStatus


class IInvoiceStore(ABC):
    """Interface for invoice, quote and receipt persistence."""

    @abstractmethod
    async def create_invoice(self, invoice: Invoice) -> Invoice:
        """Create a document with all its items."""
        pass

    @abstractmethod
    async def get_invoice(self, invoice_id: int) -> Invoice | None:
        """Get document by ID with items."""
        pass

    @abstractmethod
    async def update_payment(self, invoice: Invoice) -> Invoice:
        """Persist payment fields and status. Items and totals are immutable."""
        pass

    @abstractmethod
    async def list_invoices(
        self,
        doc_type: DocumentType | None = None,
        limit: int = 1000,
        offset: int = 0,
    ) -> list[Invoice]:
        """List documents newest first, optionally of one type."""
        pass

    @abstractmethod
    async def list_by_date(
        self,
        issue_date: date,
        exclude_statuses: tuple[InvoiceStatus, ...] = (),
    ) -> list[Invoice]:
        """List documents issued on a date."""
        pass

    @abstractmethod
    async def list_by_client(self, client_id: int) -> list[Invoice]:
        """List a client's documents newest first."""
        pass
