"""
Application layer - Use cases, DTOs, and service factories.

This layer orchestrates business logic by:
1. Defining request DTOs validating caller input
2. Implementing use cases that coordinate stores, services and renderers
3. Providing factory functions for dependency injection

Use cases are the only entry points into the system.
"""

from madafacture.application.dto.requests import (
    CreateClientRequest,
    CreateInvoiceRequest,
    CreateProductRequest,
    InvoiceItemRequest,
    InvoicePaymentRequest,
    ListInvoicesRequest,
    QuickSaleRequest,
    UpdateProductRequest,
    UpdateSettingsRequest,
)
from madafacture.application.services import (
    get_daily_journal_service,
    get_daily_report_renderer,
    get_invoice_renderer,
    reset_services,
)
from madafacture.application.use_cases import (
    CancelInvoiceUseCase,
    ComputeDailyStatsUseCase,
    CreateClientUseCase,
    CreateInvoiceUseCase,
    CreateProductUseCase,
    FinalizeClosingUseCase,
    GenerateInvoicePdfUseCase,
    GetClientAccountUseCase,
    GetDashboardSummaryUseCase,
    GetStockOverviewUseCase,
    InitializeSettingsUseCase,
    ListClosingsUseCase,
    ListInvoicesUseCase,
    RecordInvoicePaymentUseCase,
    RecordQuickSaleUseCase,
    ReprintClosingUseCase,
    UpdateClientNotesUseCase,
    UpdateProductUseCase,
    UpdateSettingsUseCase,
)

__all__ = [
    # Request DTOs
    "CreateClientRequest",
    "CreateInvoiceRequest",
    "CreateProductRequest",
    "InvoiceItemRequest",
    "InvoicePaymentRequest",
    "ListInvoicesRequest",
    "QuickSaleRequest",
    "UpdateProductRequest",
    "UpdateSettingsRequest",
    # Use Cases
    "CancelInvoiceUseCase",
    "ComputeDailyStatsUseCase",
    "CreateClientUseCase",
    "CreateInvoiceUseCase",
    "CreateProductUseCase",
    "FinalizeClosingUseCase",
    "GenerateInvoicePdfUseCase",
    "GetClientAccountUseCase",
    "GetDashboardSummaryUseCase",
    "GetStockOverviewUseCase",
    "InitializeSettingsUseCase",
    "ListClosingsUseCase",
    "ListInvoicesUseCase",
    "RecordInvoicePaymentUseCase",
    "RecordQuickSaleUseCase",
    "ReprintClosingUseCase",
    "UpdateClientNotesUseCase",
    "UpdateProductUseCase",
    "UpdateSettingsUseCase",
    # Service factories
    "get_daily_journal_service",
    "get_daily_report_renderer",
    "get_invoice_renderer",
    "reset_services",
]
