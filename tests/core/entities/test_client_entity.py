"""Tests for client and product entities."""

import pytest
from pydantic import ValidationError

from madafacture.core.entities import (
    Client,
    ClientType,
    FiscalIdentifiers,
    Product,
    StockState,
)


class TestClient:
    def test_company_keeps_fiscal_identifiers(self):
        client = Client(
            name="SARL Vanille Export",
            type=ClientType.COMPANY,
            fiscal=FiscalIdentifiers(nif="3000111222"),
        )

        assert client.is_company
        assert client.fiscal.nif == "3000111222"

    def test_individual_refuses_fiscal_identifiers(self):
        with pytest.raises(ValidationError):
            Client(name="Jean Rakoto", fiscal=FiscalIdentifiers(nif="3000111222"))

    def test_individual_accepts_empty_fiscal_block(self):
        client = Client(name="Jean Rakoto", fiscal=FiscalIdentifiers())

        assert not client.is_company

    def test_name_is_required(self):
        with pytest.raises(ValidationError):
            Client(name="")


class TestProduct:
    @pytest.mark.parametrize(
        ("stock", "state"),
        [
            (-2, StockState.OUT),
            (0, StockState.OUT),
            (1, StockState.LOW),
            (5, StockState.LOW),
            (6, StockState.IN_STOCK),
        ],
    )
    def test_stock_state(self, stock, state):
        product = Product(name="Savon", unit_price=500.0, stock=stock)

        assert product.stock_state == state

    def test_margin_and_stock_value(self, sample_product):
        assert sample_product.unit_margin == 400.0
        assert sample_product.stock_value == 10000.0

    def test_negative_price_refused(self):
        with pytest.raises(ValidationError):
            Product(name="Savon", unit_price=-1.0)
