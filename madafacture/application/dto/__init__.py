"""Data Transfer Objects for the application layer.

Request DTOs validate and parse caller input before a use case runs.
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

__all__ = [
    "CreateClientRequest",
    "CreateInvoiceRequest",
    "CreateProductRequest",
    "InvoiceItemRequest",
    "InvoicePaymentRequest",
    "ListInvoicesRequest",
    "QuickSaleRequest",
    "UpdateProductRequest",
    "UpdateSettingsRequest",
]
