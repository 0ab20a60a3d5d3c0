"""Tests for daily journal aggregation."""

from datetime import date, datetime, time
from unittest.mock import AsyncMock

import pytest

from madafacture.core.entities import (
    Invoice,
    InvoiceItem,
    InvoiceStatus,
    PaymentMethod,
    PaymentTransaction,
    QuickSale,
    TransactionType,
)
from madafacture.core.services.daily_aggregation import (
    DailyJournalService,
    aggregate_products,
    compute_daily_stats,
    day_bounds,
)

DAY = date(2024, 6, 1)


def _tx(hour: int, amount: float, method: PaymentMethod, tx_id: int) -> PaymentTransaction:
    return PaymentTransaction(
        id=tx_id,
        timestamp=datetime.combine(DAY, time(hour)),
        amount=amount,
        method=method,
        reference_id="VENTE-RAPIDE",
        label="vente",
        client_name="Client comptoir",
        type=TransactionType.QUICK_SALE,
    )


def _sale(name: str, quantity: int, price: float, cost: float) -> QuickSale:
    return QuickSale(
        timestamp=datetime.combine(DAY, time(10)),
        product_id=1,
        product_name=name,
        quantity=quantity,
        unit_price=price,
        purchase_price=cost,
        total=quantity * price,
        payment_method=PaymentMethod.ESPECES,
    )


def _invoice(status: InvoiceStatus, *items: InvoiceItem) -> Invoice:
    return Invoice(
        number="FACT-2024-001",
        issue_date=DAY,
        due_date=DAY,
        client_id=1,
        items=list(items),
        status=status,
    )


class TestDayBounds:
    def test_half_open_day(self):
        start, end = day_bounds(DAY)

        assert start == datetime(2024, 6, 1, 0, 0)
        assert end == datetime(2024, 6, 2, 0, 0)


class TestAggregateProducts:
    def test_same_name_merges_across_prices_and_sources(self):
        sales = [_sale("Riz", 2, 1000.0, 600.0), _sale("Riz", 1, 1100.0, 600.0)]
        invoice = _invoice(
            InvoiceStatus.VALIDE,
            InvoiceItem(description="Riz", quantity=3, unit_price=900.0, purchase_price=600.0),
        )

        [riz] = aggregate_products(sales, [invoice])

        assert riz.quantity == 6
        assert riz.revenue == 2000.0 + 1100.0 + 2700.0
        assert riz.profit == 800.0 + 500.0 + 900.0

    def test_ordered_by_revenue_then_name(self):
        sales = [
            _sale("Sucre", 1, 500.0, 0.0),
            _sale("Huile", 1, 8000.0, 0.0),
            _sale("Farine", 1, 500.0, 0.0),
        ]

        stats = aggregate_products(sales, [])

        assert [s.name for s in stats] == ["Huile", "Farine", "Sucre"]


class TestComputeDailyStats:
    def test_totals_split_by_method(self):
        txs = [
            _tx(9, 3000.0, PaymentMethod.ESPECES, 1),
            _tx(10, 2000.0, PaymentMethod.MOBILE_MONEY, 2),
            _tx(11, 1500.0, PaymentMethod.CREDIT, 3),
            _tx(12, 4000.0, PaymentMethod.VIREMENT, 4),
        ]

        stats = compute_daily_stats(DAY, txs, [], [])

        assert stats.totals.total == 10500.0
        assert stats.totals.cash == 3000.0
        assert stats.totals.mobile == 2000.0
        assert stats.totals.credit == 1500.0
        assert stats.transactions_count == 4
        assert [tx.id for tx in stats.transactions] == [4, 3, 2, 1]

    def test_cancelled_documents_are_ignored(self):
        item = InvoiceItem(description="Riz", quantity=1, unit_price=1000.0, purchase_price=600.0)

        stats = compute_daily_stats(DAY, [], [], [_invoice(InvoiceStatus.ANNULE, item)])

        assert stats.products == ()
        assert stats.totals.profit == 0.0

    def test_profit_without_money(self):
        """A credit invoice with no ledger entry still shows in profit."""
        item = InvoiceItem(description="Riz", quantity=2, unit_price=1000.0, purchase_price=600.0)

        stats = compute_daily_stats(DAY, [], [], [_invoice(InvoiceStatus.VALIDE, item)])

        assert stats.totals.total == 0.0
        assert stats.totals.profit == 800.0

    def test_empty_day(self):
        stats = compute_daily_stats(DAY, [], [], [])

        assert stats.transactions_count == 0
        assert stats.totals.total == 0.0


class TestDailyJournalService:
    @pytest.mark.asyncio
    async def test_reads_the_day_from_every_store(self):
        transaction_store = AsyncMock()
        transaction_store.list_between = AsyncMock(
            return_value=[_tx(9, 3000.0, PaymentMethod.ESPECES, 1)]
        )
        sales_store = AsyncMock()
        sales_store.list_between = AsyncMock(return_value=[_sale("Riz", 3, 1000.0, 600.0)])
        invoice_store = AsyncMock()
        invoice_store.list_by_date = AsyncMock(return_value=[])

        service = DailyJournalService(transaction_store, sales_store, invoice_store)
        stats = await service.compute(DAY)

        start, end = day_bounds(DAY)
        transaction_store.list_between.assert_awaited_once_with(start, end)
        sales_store.list_between.assert_awaited_once_with(start, end)
        invoice_store.list_by_date.assert_awaited_once_with(
            DAY, exclude_statuses=(InvoiceStatus.ANNULE,)
        )
        assert stats.totals.total == 3000.0
        assert stats.totals.profit == 1200.0
