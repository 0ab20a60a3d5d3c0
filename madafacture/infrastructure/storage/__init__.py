"""Storage infrastructure implementations."""

from madafacture.infrastructure.storage.sqlite import (
    SQLiteClientStore,
    SQLiteClosingStore,
    SQLiteInvoiceStore,
    SQLiteProductStore,
    SQLiteSalesStore,
    SQLiteSettingsStore,
    SQLiteTransactionStore,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)

__all__ = [
    # SQLite stores
    "SQLiteClientStore",
    "SQLiteClosingStore",
    "SQLiteInvoiceStore",
    "SQLiteProductStore",
    "SQLiteSalesStore",
    "SQLiteSettingsStore",
    "SQLiteTransactionStore",
    # Connection pool
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
]
