"""SQLite storage implementations."""

from madafacture.infrastructure.storage.sqlite.client_store import SQLiteClientStore
from madafacture.infrastructure.storage.sqlite.closing_store import SQLiteClosingStore
from madafacture.infrastructure.storage.sqlite.connection import (
    SQLitePool,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)
from madafacture.infrastructure.storage.sqlite.invoice_store import SQLiteInvoiceStore
from madafacture.infrastructure.storage.sqlite.product_store import SQLiteProductStore
from madafacture.infrastructure.storage.sqlite.sales_store import SQLiteSalesStore
from madafacture.infrastructure.storage.sqlite.settings_store import SQLiteSettingsStore
from madafacture.infrastructure.storage.sqlite.transaction_store import (
    SQLiteTransactionStore,
)

# Singleton instances
_client_store: SQLiteClientStore | None = None
_product_store: SQLiteProductStore | None = None
_invoice_store: SQLiteInvoiceStore | None = None
_sales_store: SQLiteSalesStore | None = None
_transaction_store: SQLiteTransactionStore | None = None
_closing_store: SQLiteClosingStore | None = None
_settings_store: SQLiteSettingsStore | None = None


async def get_client_store() -> SQLiteClientStore:
    """Get singleton client store instance."""
    global _client_store
    if _client_store is None:
        _client_store = SQLiteClientStore()
    return _client_store


async def get_product_store() -> SQLiteProductStore:
    """Get singleton product store instance."""
    global _product_store
    if _product_store is None:
        _product_store = SQLiteProductStore()
    return _product_store


async def get_invoice_store() -> SQLiteInvoiceStore:
    """Get singleton invoice store instance."""
    global _invoice_store
    if _invoice_store is None:
        _invoice_store = SQLiteInvoiceStore()
    return _invoice_store


async def get_sales_store() -> SQLiteSalesStore:
    """Get singleton quick sale store instance."""
    global _sales_store
    if _sales_store is None:
        _sales_store = SQLiteSalesStore()
    return _sales_store


async def get_transaction_store() -> SQLiteTransactionStore:
    """Get singleton payment ledger instance."""
    global _transaction_store
    if _transaction_store is None:
        _transaction_store = SQLiteTransactionStore()
    return _transaction_store


async def get_closing_store() -> SQLiteClosingStore:
    """Get singleton closing store instance."""
    global _closing_store
    if _closing_store is None:
        _closing_store = SQLiteClosingStore()
    return _closing_store


async def get_settings_store() -> SQLiteSettingsStore:
    """Get singleton settings store instance."""
    global _settings_store
    if _settings_store is None:
        _settings_store = SQLiteSettingsStore()
    return _settings_store


__all__ = [
    # Connection
    "SQLitePool",
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
    # Store classes
    "SQLiteClientStore",
    "SQLiteClosingStore",
    "SQLiteInvoiceStore",
    "SQLiteProductStore",
    "SQLiteSalesStore",
    "SQLiteSettingsStore",
    "SQLiteTransactionStore",
    # Factory functions
    "get_client_store",
    "get_closing_store",
    "get_invoice_store",
    "get_product_store",
    "get_sales_store",
    "get_settings_store",
    "get_transaction_store",
]
