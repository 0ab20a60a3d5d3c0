"""List Invoices Use Case: document list with search and totals."""

from dataclasses import dataclass

from madafacture.application.dto.requests import ListInvoicesRequest
from madafacture.config import get_logger
from madafacture.core.entities.invoice import Invoice
from madafacture.core.interfaces import IClientStore, IInvoiceStore
from madafacture.core.services.reports import summarize_invoices

logger = get_logger(__name__)


@dataclass
class InvoiceListResult:
    """Matching documents, with totals over the type filter."""

    invoices: list[Invoice]
    client_names: dict[int, str]
    total: float
    due: float


class ListInvoicesUseCase:
    """List documents newest first, optionally of one type, searched by text."""

    def __init__(
        self,
        invoice_store: IInvoiceStore | None = None,
        client_store: IClientStore | None = None,
    ):
        self._invoice_store = invoice_store
        self._client_store = client_store

    async def _get_invoice_store(self) -> IInvoiceStore:
        if self._invoice_store is None:
            from madafacture.infrastructure.storage.sqlite import get_invoice_store

            self._invoice_store = await get_invoice_store()
        return self._invoice_store

    async def _get_client_store(self) -> IClientStore:
        if self._client_store is None:
            from madafacture.infrastructure.storage.sqlite import get_client_store

            self._client_store = await get_client_store()
        return self._client_store

    async def execute(self, request: ListInvoicesRequest | None = None) -> InvoiceListResult:
        request = request or ListInvoicesRequest()
        invoice_store = await self._get_invoice_store()
        client_store = await self._get_client_store()

        invoices = await invoice_store.list_invoices(
            doc_type=request.doc_type, limit=request.limit, offset=request.offset
        )
        clients = await client_store.list_clients(limit=100_000)
        names = {c.id: c.name for c in clients}

        # Totals cover the type filter, not the text search
        ledger = summarize_invoices(invoices)

        query = request.query.strip().lower()
        if query:
            invoices = [
                inv
                for inv in invoices
                if query in inv.number.lower()
                or query in names.get(inv.client_id, "").lower()
            ]

        logger.debug(
            "invoices_listed",
            doc_type=request.doc_type.value if request.doc_type else None,
            count=len(invoices),
        )
        return InvoiceListResult(
            invoices=invoices,
            client_names=names,
            total=ledger.total,
            due=ledger.due,
        )
