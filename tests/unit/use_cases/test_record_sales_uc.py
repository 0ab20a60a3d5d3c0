"""Unit tests for quick sales, invoice payments and cancellation."""

from datetime import date
from unittest.mock import AsyncMock

import aiosqlite
import pytest

from madafacture.application.dto.requests import InvoicePaymentRequest, QuickSaleRequest
from madafacture.application.use_cases.cancel_invoice import CancelInvoiceUseCase
from madafacture.application.use_cases.record_invoice_payment import (
    RecordInvoicePaymentUseCase,
)
from madafacture.application.use_cases.record_quick_sale import RecordQuickSaleUseCase
from madafacture.core.entities import (
    QUICK_SALE_REFERENCE,
    DocumentType,
    InvoiceStatus,
    PaymentMethod,
    TransactionType,
)
from madafacture.core.exceptions import (
    DatabaseError,
    InvoiceNotFoundError,
    InvoiceNotPayableError,
    ProductNotFoundError,
    ValidationError,
)


def _echo_with_id(entity):
    return entity.model_copy(update={"id": 1})


@pytest.fixture
def mock_transaction_store():
    store = AsyncMock()
    store.add_transaction = AsyncMock(side_effect=_echo_with_id)
    return store


class TestRecordQuickSaleUseCase:
    @pytest.fixture
    def mock_product_store(self, sample_product):
        store = AsyncMock()
        store.get_product = AsyncMock(return_value=sample_product)
        store.adjust_stock = AsyncMock(
            return_value=sample_product.model_copy(update={"stock": 7})
        )
        return store

    @pytest.fixture
    def mock_sales_store(self):
        store = AsyncMock()
        store.add_sale = AsyncMock(side_effect=_echo_with_id)
        return store

    @pytest.mark.asyncio
    async def test_sale_ledger_and_stock(self, mock_product_store, mock_sales_store,
                                         mock_transaction_store):
        use_case = RecordQuickSaleUseCase(
            product_store=mock_product_store,
            sales_store=mock_sales_store,
            transaction_store=mock_transaction_store,
        )

        result = await use_case.execute(
            QuickSaleRequest(product_id=1, quantity=3, payment_method=PaymentMethod.MOBILE_MONEY)
        )

        assert result.sale.total == 3000.0
        assert result.sale.unit_price == 1000.0
        assert result.sale.purchase_price == 600.0
        assert result.transaction.reference_id == QUICK_SALE_REFERENCE
        assert result.transaction.label == "Riz Makalioka 1kg (x3)"
        assert result.transaction.type == TransactionType.QUICK_SALE
        assert result.transaction.timestamp == result.sale.timestamp
        assert result.product.stock == 7
        mock_product_store.adjust_stock.assert_awaited_once_with(1, -3)

    @pytest.mark.asyncio
    async def test_unknown_product(self, mock_product_store, mock_sales_store,
                                   mock_transaction_store):
        mock_product_store.get_product = AsyncMock(return_value=None)
        use_case = RecordQuickSaleUseCase(
            product_store=mock_product_store,
            sales_store=mock_sales_store,
            transaction_store=mock_transaction_store,
        )

        with pytest.raises(ProductNotFoundError):
            await use_case.execute(QuickSaleRequest(product_id=99))

        mock_sales_store.add_sale.assert_not_awaited()
        mock_transaction_store.add_transaction.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_ledger_failure_is_a_database_error(self, mock_product_store, mock_sales_store,
                                                      mock_transaction_store):
        mock_transaction_store.add_transaction = AsyncMock(
            side_effect=aiosqlite.OperationalError("database is locked")
        )
        use_case = RecordQuickSaleUseCase(
            product_store=mock_product_store,
            sales_store=mock_sales_store,
            transaction_store=mock_transaction_store,
        )

        with pytest.raises(DatabaseError) as exc_info:
            await use_case.execute(QuickSaleRequest(product_id=1, quantity=2))

        assert exc_info.value.details["operation"] == "record_quick_sale"
        mock_product_store.adjust_stock.assert_not_awaited()


class TestRecordInvoicePaymentUseCase:
    @pytest.fixture
    def mock_invoice_store(self, sample_invoice):
        store = AsyncMock()
        store.get_invoice = AsyncMock(return_value=sample_invoice)
        store.update_payment = AsyncMock(side_effect=lambda inv: inv)
        return store

    @pytest.fixture
    def use_case(self, mock_invoice_store, sample_client, mock_transaction_store):
        client_store = AsyncMock()
        client_store.get_client = AsyncMock(return_value=sample_client)
        return RecordInvoicePaymentUseCase(
            invoice_store=mock_invoice_store,
            client_store=client_store,
            transaction_store=mock_transaction_store,
        )

    @pytest.mark.asyncio
    async def test_partial_then_full(self, use_case):
        first = await use_case.execute(InvoicePaymentRequest(invoice_id=7, amount=10000.0))

        assert first.invoice.status == InvoiceStatus.PARTIEL
        assert first.invoice.balance_due == 12200.0
        assert first.transaction.amount == 10000.0

        second = await use_case.execute(InvoicePaymentRequest(invoice_id=7, amount=12200.0))

        assert second.invoice.status == InvoiceStatus.PAYE
        assert second.invoice.is_paid is True
        assert second.transaction.reference_id == "7"
        assert second.transaction.type == TransactionType.INVOICE_PAYMENT

    @pytest.mark.asyncio
    async def test_non_positive_amount(self, use_case, mock_invoice_store):
        with pytest.raises(ValidationError):
            await use_case.execute(InvoicePaymentRequest(invoice_id=7, amount=0))

        mock_invoice_store.get_invoice.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_invoice(self, use_case, mock_invoice_store):
        mock_invoice_store.get_invoice = AsyncMock(return_value=None)

        with pytest.raises(InvoiceNotFoundError):
            await use_case.execute(InvoicePaymentRequest(invoice_id=99, amount=100.0))

    @pytest.mark.asyncio
    async def test_update_failure_is_a_database_error(self, use_case, mock_invoice_store,
                                                      mock_transaction_store):
        mock_invoice_store.update_payment = AsyncMock(
            side_effect=aiosqlite.OperationalError("disk I/O error")
        )

        with pytest.raises(DatabaseError) as exc_info:
            await use_case.execute(InvoicePaymentRequest(invoice_id=7, amount=100.0))

        assert exc_info.value.details["operation"] == "record_invoice_payment"
        mock_transaction_store.add_transaction.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("doc_type", "status"),
        [
            (DocumentType.DEVIS, InvoiceStatus.VALIDE),
            (DocumentType.FACTURE, InvoiceStatus.ANNULE),
            (DocumentType.FACTURE, InvoiceStatus.PAYE),
        ],
    )
    async def test_not_payable(self, use_case, sample_invoice, mock_transaction_store,
                               doc_type, status):
        sample_invoice.type = doc_type
        sample_invoice.status = status

        with pytest.raises(InvoiceNotPayableError):
            await use_case.execute(InvoicePaymentRequest(invoice_id=7, amount=100.0))

        mock_transaction_store.add_transaction.assert_not_awaited()


class TestCancelInvoiceUseCase:
    @pytest.mark.asyncio
    async def test_cancel_is_idempotent(self, sample_invoice):
        store = AsyncMock()
        store.get_invoice = AsyncMock(return_value=sample_invoice)
        store.update_payment = AsyncMock(side_effect=lambda inv: inv)
        use_case = CancelInvoiceUseCase(invoice_store=store)

        first = await use_case.execute(7)
        second = await use_case.execute(7)

        assert first.status == InvoiceStatus.ANNULE
        assert second.status == InvoiceStatus.ANNULE
        store.update_payment.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_cancel_unknown(self):
        store = AsyncMock()
        store.get_invoice = AsyncMock(return_value=None)

        with pytest.raises(InvoiceNotFoundError):
            await CancelInvoiceUseCase(invoice_store=store).execute(3)
