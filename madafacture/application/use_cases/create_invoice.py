"""
Create Invoice Use Case.

The invoice lifecycle engine: numbering, totals, status, stock decrement
and the immediate-payment ledger entry.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta

from madafacture.application.dto.requests import CreateInvoiceRequest
from madafacture.config import get_logger
from madafacture.core.entities.client import Client
from madafacture.core.entities.invoice import (
    Invoice,
    InvoiceItem,
    InvoiceStatus,
    InvoiceTotals,
)
from madafacture.core.entities.product import Product, StockState
from madafacture.core.entities.transaction import (
    PaymentMethod,
    PaymentTransaction,
    TransactionType,
)
from madafacture.core.entities.user_settings import UserSettings
from madafacture.core.exceptions import (
    ClientNotFoundError,
    DatabaseError,
    MadaFactureError,
    SettingsNotInitializedError,
    ValidationError,
)
from madafacture.core.interfaces import (
    IClientStore,
    IInvoiceStore,
    IProductStore,
    ISettingsStore,
    ITransactionStore,
)
from madafacture.core.services.numbering import format_invoice_number, get_sequence_lock

logger = get_logger(__name__)

DEFAULT_PAYMENT_TERMS = timedelta(days=30)


@dataclass
class CreateInvoiceResult:
    """Result of creating a sales document."""

    invoice: Invoice
    stock_alerts: list[Product] = field(default_factory=list)


class CreateInvoiceUseCase:
    """
    Create an invoice, quote or receipt.

    Flow:
    1. Validate the request (client, items) before any write
    2. Under the sequence lock: number the document, insert it, then
       decrement stock and record the payment for Facture/Reçu
    3. Advance the invoice counter once the row exists, whatever happens next
    """

    def __init__(
        self,
        client_store: IClientStore | None = None,
        invoice_store: IInvoiceStore | None = None,
        product_store: IProductStore | None = None,
        transaction_store: ITransactionStore | None = None,
        settings_store: ISettingsStore | None = None,
    ):
        self._client_store = client_store
        self._invoice_store = invoice_store
        self._product_store = product_store
        self._transaction_store = transaction_store
        self._settings_store = settings_store

    async def _get_client_store(self) -> IClientStore:
        if self._client_store is None:
            from madafacture.infrastructure.storage.sqlite import get_client_store

            self._client_store = await get_client_store()
        return self._client_store

    async def _get_invoice_store(self) -> IInvoiceStore:
        if self._invoice_store is None:
            from madafacture.infrastructure.storage.sqlite import get_invoice_store

            self._invoice_store = await get_invoice_store()
        return self._invoice_store

    async def _get_product_store(self) -> IProductStore:
        if self._product_store is None:
            from madafacture.infrastructure.storage.sqlite import get_product_store

            self._product_store = await get_product_store()
        return self._product_store

    async def _get_transaction_store(self) -> ITransactionStore:
        if self._transaction_store is None:
            from madafacture.infrastructure.storage.sqlite import get_transaction_store

            self._transaction_store = await get_transaction_store()
        return self._transaction_store

    async def _get_settings_store(self) -> ISettingsStore:
        if self._settings_store is None:
            from madafacture.infrastructure.storage.sqlite import get_settings_store

            self._settings_store = await get_settings_store()
        return self._settings_store

    async def execute(self, request: CreateInvoiceRequest) -> CreateInvoiceResult:
        """Execute create invoice use case."""
        logger.info(
            "create_invoice_started",
            client_id=request.client_id,
            type=request.type.value,
            items=len(request.items),
            pay_now=request.pay_now,
        )

        if not request.client_id or request.client_id <= 0:
            raise ValidationError("client_id", "a client must be selected", request.client_id)
        if not request.items:
            raise ValidationError("items", "at least one item is required", len(request.items))

        try:
            client_store = await self._get_client_store()
            client = await client_store.get_client(request.client_id)
            if client is None:
                raise ClientNotFoundError(request.client_id)

            settings_store = await self._get_settings_store()
            invoice_store = await self._get_invoice_store()

            async with get_sequence_lock():
                settings = await settings_store.get_settings()
                if settings is None:
                    raise SettingsNotInitializedError()

                invoice = await invoice_store.create_invoice(
                    self._build_invoice(request, settings)
                )
                try:
                    alerts = await self._apply_effects(invoice, client)
                except Exception as e:
                    logger.error(
                        "invoice_effects_failed",
                        invoice_id=invoice.id,
                        number=invoice.number,
                        error=str(e),
                    )
                    # The number is taken once the row exists
                    try:
                        await settings_store.advance_invoice_number(settings.id)
                    except Exception as advance_error:
                        logger.error(
                            "invoice_number_advance_failed",
                            settings_id=settings.id,
                            error=str(advance_error),
                        )
                    raise
                await settings_store.advance_invoice_number(settings.id)

        except MadaFactureError:
            raise
        except Exception as e:
            logger.error("create_invoice_failed", client_id=request.client_id, error=str(e))
            raise DatabaseError("create_invoice", str(e)) from e

        logger.info(
            "create_invoice_complete",
            invoice_id=invoice.id,
            number=invoice.number,
            total=invoice.total,
            status=invoice.status.value,
            stock_alerts=len(alerts),
        )
        return CreateInvoiceResult(invoice=invoice, stock_alerts=alerts)

    @staticmethod
    def _build_invoice(request: CreateInvoiceRequest, settings: UserSettings) -> Invoice:
        issue_date = request.issue_date or datetime.now().date()
        items = [
            InvoiceItem(
                description=item.description,
                quantity=item.quantity,
                unit_price=item.unit_price,
                purchase_price=item.purchase_price,
                vat_rate=settings.default_vat if item.vat_rate is None else item.vat_rate,
                unit=item.unit,
            )
            for item in request.items
        ]
        totals = InvoiceTotals.from_items(items)

        invoice = Invoice(
            number=format_invoice_number(settings, request.type, issue_date),
            issue_date=issue_date,
            due_date=request.due_date or issue_date + DEFAULT_PAYMENT_TERMS,
            client_id=request.client_id,
            type=request.type,
            items=items,
            subtotal=totals.subtotal,
            vat_total=totals.vat_total,
            total=totals.total,
            notes=request.notes,
            domain=settings.domain,
        )
        if request.pay_now:
            invoice.status = InvoiceStatus.PAYE
            invoice.is_paid = True
            invoice.paid_amount = totals.total
            invoice.paid_at = datetime.now()
            invoice.payment_method = request.payment_method or PaymentMethod.ESPECES
        else:
            invoice.status = InvoiceStatus.VALIDE
        return invoice

    async def _apply_effects(self, invoice: Invoice, client: Client) -> list[Product]:
        """Stock decrement and payment entry. Quotes have neither."""
        if not invoice.type.moves_stock:
            return []

        product_store = await self._get_product_store()
        alerts: dict[int, Product] = {}
        for item in invoice.items:
            product = await product_store.get_product_by_name(item.description)
            if product is None:
                logger.debug("invoice_item_unmatched", description=item.description)
                continue
            updated = await product_store.adjust_stock(product.id, -item.quantity)
            if updated is not None and updated.stock_state != StockState.IN_STOCK:
                alerts[updated.id] = updated

        if invoice.status == InvoiceStatus.PAYE:
            transaction_store = await self._get_transaction_store()
            await transaction_store.add_transaction(
                PaymentTransaction(
                    timestamp=invoice.paid_at or datetime.now(),
                    amount=invoice.total,
                    method=invoice.payment_method or PaymentMethod.ESPECES,
                    reference_id=str(invoice.id),
                    label=invoice.number,
                    client_name=client.name,
                    type=TransactionType.INVOICE_PAYMENT,
                )
            )

        return list(alerts.values())
