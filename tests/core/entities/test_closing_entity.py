"""Tests for journal and closing entities."""

from datetime import date, datetime

from madafacture.core.entities import (
    DailyClosing,
    DailyStats,
    DailyTotals,
    PaymentMethod,
    PaymentTransaction,
    ProductStat,
    TransactionType,
)


def _stats() -> DailyStats:
    tx = PaymentTransaction(
        timestamp=datetime(2024, 6, 1, 9, 0),
        amount=5000.0,
        method=PaymentMethod.ESPECES,
        reference_id="7",
        label="Facture FACT-2024-200",
        client_name="Jean Rakoto",
        type=TransactionType.INVOICE_PAYMENT,
    )
    return DailyStats(
        day=date(2024, 6, 1),
        totals=DailyTotals(total=5000.0, profit=2000.0, cash=5000.0),
        transactions=(tx,),
        products=(ProductStat(name="Riz", quantity=5, revenue=5000.0, profit=2000.0),),
    )


class TestDailyClosing:
    def test_from_stats_copies_every_figure(self):
        closing = DailyClosing.from_stats("CLOT-20240601-001", _stats())

        assert closing.closing_date == date(2024, 6, 1)
        assert closing.total_revenue == 5000.0
        assert closing.total_profit == 2000.0
        assert closing.cash_amount == 5000.0
        assert closing.mobile_amount == 0.0
        assert closing.transactions_count == 1
        assert closing.aggregated_products[0].name == "Riz"

    def test_totals_view(self):
        closing = DailyClosing.from_stats("CLOT-20240601-001", _stats())

        assert closing.totals == DailyTotals(total=5000.0, profit=2000.0, cash=5000.0)

    def test_stats_count_transactions(self):
        assert _stats().transactions_count == 1
