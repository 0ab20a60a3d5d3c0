"""Core domain entities."""

from madafacture.core.entities.client import (
    Client,
    ClientType,
    FiscalIdentifiers,
)
from madafacture.core.entities.closing import (
    DailyClosing,
    DailyStats,
    DailyTotals,
    ProductStat,
)
from madafacture.core.entities.invoice import (
    BusinessDomain,
    DocumentType,
    Invoice,
    InvoiceItem,
    InvoiceStatus,
    InvoiceTotals,
)
from madafacture.core.entities.product import (
    LOW_STOCK_THRESHOLD,
    Product,
    StockState,
)
from madafacture.core.entities.sale import QuickSale
from madafacture.core.entities.transaction import (
    QUICK_SALE_REFERENCE,
    PaymentMethod,
    PaymentTransaction,
    TransactionType,
)
from madafacture.core.entities.user_settings import UserSettings

__all__ = [
    # Client entities
    "Client",
    "ClientType",
    "FiscalIdentifiers",
    # Catalog entities
    "Product",
    "StockState",
    "LOW_STOCK_THRESHOLD",
    # Invoice entities
    "Invoice",
    "InvoiceItem",
    "InvoiceTotals",
    "InvoiceStatus",
    "DocumentType",
    "BusinessDomain",
    # Ledger entities
    "PaymentTransaction",
    "PaymentMethod",
    "TransactionType",
    "QUICK_SALE_REFERENCE",
    "QuickSale",
    # Journal entities
    "DailyClosing",
    "DailyStats",
    "DailyTotals",
    "ProductStat",
    # Settings
    "UserSettings",
]
