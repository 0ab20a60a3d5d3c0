"""Pytest configuration and fixtures."""

from datetime import date, datetime

import pytest

import madafacture.core.services.numbering as numbering
from madafacture.application.services import reset_services
from madafacture.config.settings import PdfSettings, reset_settings
from madafacture.core.entities import (
    Client,
    ClientType,
    DocumentType,
    FiscalIdentifiers,
    Invoice,
    InvoiceItem,
    InvoiceStatus,
    Product,
    UserSettings,
)


@pytest.fixture(autouse=True)
def _reset_singletons():
    """Every test starts without cached settings, services or sequence lock."""
    reset_settings()
    reset_services()
    numbering._sequence_lock = None
    yield
    reset_settings()
    reset_services()
    numbering._sequence_lock = None


@pytest.fixture
def pdf_settings(tmp_path) -> PdfSettings:
    return PdfSettings(export_dir=tmp_path / "exports")


@pytest.fixture
def user_settings() -> UserSettings:
    """Business profile as stored after first run."""
    return UserSettings(
        id=1,
        business_name="Épicerie Soa",
        nif="4001234567",
        stat="47111 11 2020 0 00123",
        rcs="2020 B 00123",
        address="Lot II A 45 Analakely, Antananarivo",
        phone="034 12 345 67",
        email="contact@soa.mg",
        invoice_prefix="FACT-",
        next_invoice_number=200,
        next_closing_number=1,
    )


@pytest.fixture
def sample_client() -> Client:
    return Client(
        id=1,
        name="Jean Rakoto",
        type=ClientType.INDIVIDUAL,
        phone="033 11 222 33",
        address="Ambohijatovo",
    )


@pytest.fixture
def company_client() -> Client:
    return Client(
        id=2,
        name="SARL Vanille Export",
        type=ClientType.COMPANY,
        address="Zone Forello, Tanjombato",
        fiscal=FiscalIdentifiers(nif="3000111222", stat="46900 11 2015 0 00456"),
    )


@pytest.fixture
def sample_product() -> Product:
    return Product(
        id=1,
        name="Riz Makalioka 1kg",
        unit_price=1000.0,
        purchase_price=600.0,
        stock=10,
        category="Alimentation",
    )


@pytest.fixture
def sample_invoice() -> Invoice:
    """A validated, unpaid invoice of two lines."""
    items = [
        InvoiceItem(description="Riz Makalioka 1kg", quantity=3, unit_price=1000.0,
                    purchase_price=600.0),
        InvoiceItem(description="Huile 1L", quantity=2, unit_price=8000.0,
                    purchase_price=6500.0, vat_rate=20.0),
    ]
    return Invoice(
        id=7,
        number="FACT-2024-200",
        issue_date=date(2024, 6, 1),
        due_date=date(2024, 7, 1),
        client_id=1,
        type=DocumentType.FACTURE,
        items=items,
        subtotal=19000.0,
        vat_total=3200.0,
        total=22200.0,
        status=InvoiceStatus.VALIDE,
        created_at=datetime(2024, 6, 1, 9, 30),
    )
