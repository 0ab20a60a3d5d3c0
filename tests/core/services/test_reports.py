"""Tests for dashboard, catalog and archive summaries."""

from datetime import date

from madafacture.core.entities import (
    DailyClosing,
    DocumentType,
    Invoice,
    InvoiceItem,
    InvoiceStatus,
    Product,
)
from madafacture.core.services.reports import (
    search_closings,
    summarize_client_account,
    summarize_invoices,
    summarize_stock,
    top_products_by_profit,
    total_receivables,
)


def _doc(total: float, status: InvoiceStatus, paid: float = 0.0, doc_type=DocumentType.FACTURE,
         items=()) -> Invoice:
    return Invoice(
        number="FACT-2024-001",
        issue_date=date(2024, 6, 1),
        due_date=date(2024, 7, 1),
        client_id=1,
        type=doc_type,
        items=list(items),
        total=total,
        paid_amount=paid,
        status=status,
    )


class TestSummarizeStock:
    def test_counts_and_value(self):
        products = [
            Product(name="A", unit_price=100.0, stock=10),
            Product(name="B", unit_price=50.0, stock=3),
            Product(name="C", unit_price=20.0, stock=0),
            Product(name="D", unit_price=20.0, stock=-1),
        ]

        overview = summarize_stock(products)

        assert overview.total_value == 1000.0 + 150.0 + 0.0 - 20.0
        assert overview.low_stock_count == 1
        assert overview.out_of_stock_count == 2


class TestClientAccount:
    def test_paid_due_and_cancelled(self):
        account = summarize_client_account([
            _doc(1000.0, InvoiceStatus.PAYE, paid=1000.0),
            _doc(2000.0, InvoiceStatus.PARTIEL, paid=500.0),
            _doc(4000.0, InvoiceStatus.ANNULE),
        ])

        assert account.total_paid == 1000.0
        assert account.total_due == 2000.0
        assert account.invoice_count == 3


class TestInvoiceLedger:
    def test_total_and_due(self):
        ledger = summarize_invoices([
            _doc(1000.0, InvoiceStatus.PAYE, paid=1000.0),
            _doc(2000.0, InvoiceStatus.PARTIEL, paid=500.0),
        ])

        assert ledger.total == 3000.0
        assert ledger.due == 1500.0


class TestReceivables:
    def test_quotes_count_but_cancelled_and_paid_do_not(self):
        receivables = total_receivables([
            _doc(1000.0, InvoiceStatus.VALIDE),
            _doc(2000.0, InvoiceStatus.PARTIEL, paid=500.0),
            _doc(3000.0, InvoiceStatus.VALIDE, doc_type=DocumentType.DEVIS),
            _doc(4000.0, InvoiceStatus.ANNULE),
            _doc(5000.0, InvoiceStatus.PAYE, paid=5000.0),
        ])

        assert receivables == 1000.0 + 1500.0 + 3000.0


class TestTopProducts:
    def test_ranked_by_profit(self):
        invoices = [
            _doc(0.0, InvoiceStatus.VALIDE, items=[
                InvoiceItem(description="Riz", quantity=10, unit_price=1000.0, purchase_price=900.0),
                InvoiceItem(description="Huile", quantity=1, unit_price=8000.0, purchase_price=6000.0),
                InvoiceItem(description="Sel", quantity=1, unit_price=300.0, purchase_price=100.0),
                InvoiceItem(description="Sucre", quantity=1, unit_price=600.0, purchase_price=300.0),
            ]),
            _doc(0.0, InvoiceStatus.ANNULE, items=[
                InvoiceItem(description="Sel", quantity=100, unit_price=300.0, purchase_price=100.0),
            ]),
        ]

        top = top_products_by_profit([], invoices)

        assert [p.name for p in top] == ["Huile", "Riz", "Sucre"]


class TestSearchClosings:
    def test_matches_number_or_date(self):
        closings = [
            DailyClosing(number="CLOT-20240601-001", closing_date=date(2024, 6, 1),
                         total_revenue=1.0, total_profit=0.0),
            DailyClosing(number="CLOT-20240702-002", closing_date=date(2024, 7, 2),
                         total_revenue=1.0, total_profit=0.0),
        ]

        assert len(search_closings(closings, "  ")) == 2
        assert [c.number for c in search_closings(closings, "clot-202406")] == ["CLOT-20240601-001"]
        assert [c.number for c in search_closings(closings, "2024-07")] == ["CLOT-20240702-002"]
