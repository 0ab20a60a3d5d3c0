"""Core interfaces (ports) for dependency injection."""

from madafacture.core.interfaces.client_store import IClientStore
from madafacture.core.interfaces.closing_store import IClosingStore
from madafacture.core.interfaces.invoice_store import IInvoiceStore
from madafacture.core.interfaces.product_store import IProductStore
from madafacture.core.interfaces.sales_store import ISalesStore
from madafacture.core.interfaces.settings_store import ISettingsStore
from madafacture.core.interfaces.transaction_store import ITransactionStore

__all__ = [
    "IClientStore",
    "IClosingStore",
    "IInvoiceStore",
    "IProductStore",
    "ISalesStore",
    "ISettingsStore",
    "ITransactionStore",
]
