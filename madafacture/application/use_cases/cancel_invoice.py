"""Cancel Invoice Use Case."""

from madafacture.config import get_logger
from madafacture.core.entities.invoice import Invoice, InvoiceStatus
from madafacture.core.exceptions import InvoiceNotFoundError
from madafacture.core.interfaces import IInvoiceStore

logger = get_logger(__name__)


class CancelInvoiceUseCase:
    """
    Mark a document as cancelled.

    Cancelled documents drop out of the daily aggregation and receivables.
    Stock and ledger entries already written are left as they are.
    """

    def __init__(self, invoice_store: IInvoiceStore | None = None):
        self._invoice_store = invoice_store

    async def _get_invoice_store(self) -> IInvoiceStore:
        if self._invoice_store is None:
            from madafacture.infrastructure.storage.sqlite import get_invoice_store

            self._invoice_store = await get_invoice_store()
        return self._invoice_store

    async def execute(self, invoice_id: int) -> Invoice:
        store = await self._get_invoice_store()
        invoice = await store.get_invoice(invoice_id)
        if invoice is None:
            raise InvoiceNotFoundError(invoice_id)

        if invoice.status == InvoiceStatus.ANNULE:
            logger.debug("invoice_already_cancelled", invoice_id=invoice_id)
            return invoice

        invoice.status = InvoiceStatus.ANNULE
        invoice = await store.update_payment(invoice)
        logger.info("invoice_cancelled", invoice_id=invoice_id, number=invoice.number)
        return invoice
