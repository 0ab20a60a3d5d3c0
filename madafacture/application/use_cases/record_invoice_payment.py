"""Record Invoice Payment Use Case: partial or full settlement."""

from dataclasses import dataclass
from datetime import datetime

from madafacture.application.dto.requests import InvoicePaymentRequest
from madafacture.config import get_logger
from madafacture.core.entities.invoice import DocumentType, Invoice, InvoiceStatus
from madafacture.core.entities.transaction import PaymentTransaction, TransactionType
from madafacture.core.exceptions import (
    DatabaseError,
    InvoiceNotFoundError,
    InvoiceNotPayableError,
    MadaFactureError,
    ValidationError,
)
from madafacture.core.interfaces import IClientStore, IInvoiceStore, ITransactionStore

logger = get_logger(__name__)


@dataclass
class InvoicePaymentResult:
    """Result of recording a payment."""

    invoice: Invoice
    transaction: PaymentTransaction


class RecordInvoicePaymentUseCase:
    """Add a payment to a Facture or Reçu and append it to the ledger."""

    def __init__(
        self,
        invoice_store: IInvoiceStore | None = None,
        client_store: IClientStore | None = None,
        transaction_store: ITransactionStore | None = None,
    ):
        self._invoice_store = invoice_store
        self._client_store = client_store
        self._transaction_store = transaction_store

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

    async def _get_transaction_store(self) -> ITransactionStore:
        if self._transaction_store is None:
            from madafacture.infrastructure.storage.sqlite import get_transaction_store

            self._transaction_store = await get_transaction_store()
        return self._transaction_store

    async def execute(self, request: InvoicePaymentRequest) -> InvoicePaymentResult:
        """Execute record payment use case."""
        logger.info(
            "invoice_payment_started",
            invoice_id=request.invoice_id,
            amount=request.amount,
            method=request.payment_method.value,
        )

        if request.amount <= 0:
            raise ValidationError("amount", "payment must be positive", request.amount)

        try:
            invoice_store = await self._get_invoice_store()
            invoice = await invoice_store.get_invoice(request.invoice_id)
            if invoice is None:
                raise InvoiceNotFoundError(request.invoice_id)

            if invoice.type == DocumentType.DEVIS:
                raise InvoiceNotPayableError(invoice.id, "a quote cannot receive payments")
            if invoice.status == InvoiceStatus.ANNULE:
                raise InvoiceNotPayableError(invoice.id, "the document is cancelled")
            if invoice.status == InvoiceStatus.PAYE or invoice.balance_due <= 0:
                raise InvoiceNotPayableError(invoice.id, "the document is already paid")

            now = datetime.now()
            invoice.paid_amount += request.amount
            invoice.payment_method = request.payment_method
            invoice.paid_at = now
            if invoice.paid_amount >= invoice.total:
                invoice.status = InvoiceStatus.PAYE
                invoice.is_paid = True
            else:
                invoice.status = InvoiceStatus.PARTIEL
            invoice = await invoice_store.update_payment(invoice)

            client_store = await self._get_client_store()
            client = await client_store.get_client(invoice.client_id)

            transaction_store = await self._get_transaction_store()
            transaction = await transaction_store.add_transaction(
                PaymentTransaction(
                    timestamp=now,
                    amount=request.amount,
                    method=request.payment_method,
                    reference_id=str(invoice.id),
                    label=invoice.number,
                    client_name=client.name if client else "",
                    type=TransactionType.INVOICE_PAYMENT,
                )
            )

        except MadaFactureError:
            raise
        except Exception as e:
            logger.error("invoice_payment_failed", invoice_id=request.invoice_id, error=str(e))
            raise DatabaseError("record_invoice_payment", str(e)) from e

        logger.info(
            "invoice_payment_complete",
            invoice_id=invoice.id,
            status=invoice.status.value,
            balance_due=invoice.balance_due,
        )
        return InvoicePaymentResult(invoice=invoice, transaction=transaction)
