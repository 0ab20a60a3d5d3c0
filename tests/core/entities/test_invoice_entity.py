"""Tests for invoice entities."""

import pytest
from pydantic import ValidationError

from madafacture.core.entities import (
    DocumentType,
    InvoiceItem,
    InvoiceStatus,
    InvoiceTotals,
)


class TestInvoiceItem:
    def test_line_figures(self):
        item = InvoiceItem(
            description="Huile 1L", quantity=2, unit_price=8000.0,
            purchase_price=6500.0, vat_rate=20.0,
        )

        assert item.line_total == 16000.0
        assert item.vat_amount == 3200.0
        assert item.profit == 3000.0

    def test_quantity_must_be_positive(self):
        with pytest.raises(ValidationError):
            InvoiceItem(description="Huile 1L", quantity=0, unit_price=8000.0)

    def test_item_is_frozen(self):
        item = InvoiceItem(description="Huile 1L", quantity=1, unit_price=8000.0)

        with pytest.raises(ValidationError):
            item.quantity = 3


class TestInvoiceTotals:
    def test_mixed_vat_rates(self):
        items = [
            InvoiceItem(description="A", quantity=3, unit_price=1000.0),
            InvoiceItem(description="B", quantity=2, unit_price=8000.0, vat_rate=20.0),
        ]

        totals = InvoiceTotals.from_items(items)

        assert totals.subtotal == 19000.0
        assert totals.vat_total == 3200.0
        assert totals.total == 22200.0

    def test_no_items(self):
        totals = InvoiceTotals.from_items([])

        assert totals.total == 0.0


class TestInvoice:
    def test_balance_and_profit(self, sample_invoice):
        sample_invoice.paid_amount = 10000.0

        assert sample_invoice.balance_due == 12200.0
        assert sample_invoice.profit == 1200.0 + 3000.0

    @pytest.mark.parametrize(
        ("status", "counted"),
        [
            (InvoiceStatus.VALIDE, True),
            (InvoiceStatus.PARTIEL, True),
            (InvoiceStatus.PAYE, True),
            (InvoiceStatus.ANNULE, False),
            (InvoiceStatus.BROUILLON, False),
        ],
    )
    def test_counts_as_sale(self, sample_invoice, status, counted):
        sample_invoice.status = status

        assert sample_invoice.counts_as_sale is counted

    def test_only_quotes_leave_stock_alone(self):
        assert DocumentType.FACTURE.moves_stock
        assert DocumentType.RECU.moves_stock
        assert not DocumentType.DEVIS.moves_stock
