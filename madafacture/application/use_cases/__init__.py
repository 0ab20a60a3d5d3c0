"""Application use cases."""

from madafacture.application.use_cases.business_settings import (
    InitializeSettingsUseCase,
    UpdateSettingsUseCase,
)
from madafacture.application.use_cases.cancel_invoice import CancelInvoiceUseCase
from madafacture.application.use_cases.clients import (
    ClientAccountResult,
    CreateClientUseCase,
    GetClientAccountUseCase,
    UpdateClientNotesUseCase,
)
from madafacture.application.use_cases.closings import (
    ClosingArchiveResult,
    ListClosingsUseCase,
    ReprintClosingResult,
    ReprintClosingUseCase,
)
from madafacture.application.use_cases.create_invoice import (
    CreateInvoiceResult,
    CreateInvoiceUseCase,
)
from madafacture.application.use_cases.daily_journal import (
    ComputeDailyStatsUseCase,
    FinalizeClosingResult,
    FinalizeClosingUseCase,
)
from madafacture.application.use_cases.dashboard import (
    DashboardSummary,
    GetDashboardSummaryUseCase,
)
from madafacture.application.use_cases.generate_invoice_pdf import (
    GenerateInvoicePdfUseCase,
    InvoicePdfResult,
)
from madafacture.application.use_cases.list_invoices import (
    InvoiceListResult,
    ListInvoicesUseCase,
)
from madafacture.application.use_cases.products import (
    CreateProductUseCase,
    GetStockOverviewUseCase,
    StockOverviewResult,
    UpdateProductUseCase,
)
from madafacture.application.use_cases.record_invoice_payment import (
    InvoicePaymentResult,
    RecordInvoicePaymentUseCase,
)
from madafacture.application.use_cases.record_quick_sale import (
    QuickSaleResult,
    RecordQuickSaleUseCase,
)

__all__ = [
    # Invoice lifecycle
    "CreateInvoiceUseCase",
    "CreateInvoiceResult",
    "RecordQuickSaleUseCase",
    "QuickSaleResult",
    "RecordInvoicePaymentUseCase",
    "InvoicePaymentResult",
    "CancelInvoiceUseCase",
    "ListInvoicesUseCase",
    "InvoiceListResult",
    "GenerateInvoicePdfUseCase",
    "InvoicePdfResult",
    # Daily journal
    "ComputeDailyStatsUseCase",
    "FinalizeClosingUseCase",
    "FinalizeClosingResult",
    "ListClosingsUseCase",
    "ClosingArchiveResult",
    "ReprintClosingUseCase",
    "ReprintClosingResult",
    "GetDashboardSummaryUseCase",
    "DashboardSummary",
    # Clients
    "CreateClientUseCase",
    "UpdateClientNotesUseCase",
    "GetClientAccountUseCase",
    "ClientAccountResult",
    # Catalog
    "CreateProductUseCase",
    "UpdateProductUseCase",
    "GetStockOverviewUseCase",
    "StockOverviewResult",
    # Settings
    "InitializeSettingsUseCase",
    "UpdateSettingsUseCase",
]
