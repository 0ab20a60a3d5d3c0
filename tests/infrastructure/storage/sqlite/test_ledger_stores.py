"""Tests for SQLite quick sale and payment ledger stores."""

from datetime import date, datetime
from pathlib import Path

import pytest

from madafacture.core.entities import (
    QUICK_SALE_REFERENCE,
    PaymentMethod,
    PaymentTransaction,
    QuickSale,
    TransactionType,
)
from madafacture.core.services.daily_aggregation import day_bounds
from madafacture.infrastructure.storage.sqlite.sales_store import SQLiteSalesStore
from madafacture.infrastructure.storage.sqlite.transaction_store import SQLiteTransactionStore


def _transaction(timestamp: datetime, amount: float, method=PaymentMethod.ESPECES):
    return PaymentTransaction(
        timestamp=timestamp,
        amount=amount,
        method=method,
        reference_id=QUICK_SALE_REFERENCE,
        label="Riz Makalioka 1kg (x1)",
        client_name="Client comptoir",
        type=TransactionType.QUICK_SALE,
    )


def _sale(timestamp: datetime, quantity: int = 1) -> QuickSale:
    return QuickSale(
        timestamp=timestamp,
        product_id=1,
        product_name="Riz Makalioka 1kg",
        quantity=quantity,
        unit_price=1000.0,
        purchase_price=600.0,
        total=1000.0 * quantity,
        payment_method=PaymentMethod.ESPECES,
    )


class TestSQLiteTransactionStore:
    @pytest.mark.asyncio
    async def test_add_returns_copy_with_id(self, initialized_db: Path):
        store = SQLiteTransactionStore()
        tx = _transaction(datetime(2024, 6, 1, 9, 0), 3000.0)

        saved = await store.add_transaction(tx)

        assert saved.id is not None
        assert tx.id is None
        assert saved.amount == 3000.0

    @pytest.mark.asyncio
    async def test_list_between_respects_day_bounds_newest_first(self, initialized_db: Path):
        store = SQLiteTransactionStore()
        await store.add_transaction(_transaction(datetime(2024, 5, 31, 23, 59, 59), 1.0))
        await store.add_transaction(_transaction(datetime(2024, 6, 1, 0, 0), 2.0))
        await store.add_transaction(_transaction(datetime(2024, 6, 1, 18, 30), 3.0))
        await store.add_transaction(_transaction(datetime(2024, 6, 2, 0, 0), 4.0))

        start, end = day_bounds(date(2024, 6, 1))
        transactions = await store.list_between(start, end)

        assert [tx.amount for tx in transactions] == [3.0, 2.0]

    @pytest.mark.asyncio
    async def test_method_survives_round_trip(self, initialized_db: Path):
        store = SQLiteTransactionStore()
        await store.add_transaction(
            _transaction(datetime(2024, 6, 1, 9, 0), 500.0, PaymentMethod.CREDIT)
        )

        [tx] = await store.list_between(datetime(2024, 6, 1))

        assert tx.method == PaymentMethod.CREDIT
        assert tx.type == TransactionType.QUICK_SALE


class TestSQLiteSalesStore:
    @pytest.mark.asyncio
    async def test_add_and_list_between(self, initialized_db: Path):
        store = SQLiteSalesStore()
        await store.add_sale(_sale(datetime(2024, 6, 1, 8, 0), quantity=2))
        await store.add_sale(_sale(datetime(2024, 6, 2, 8, 0)))

        start, end = day_bounds(date(2024, 6, 1))
        sales = await store.list_between(start, end)

        assert len(sales) == 1
        assert sales[0].quantity == 2
        assert sales[0].profit == 800.0

    @pytest.mark.asyncio
    async def test_list_sales_returns_everything(self, initialized_db: Path):
        store = SQLiteSalesStore()
        await store.add_sale(_sale(datetime(2024, 6, 1, 8, 0)))
        await store.add_sale(_sale(datetime(2024, 6, 2, 8, 0)))

        assert len(await store.list_sales()) == 2
