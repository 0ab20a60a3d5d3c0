"""
Domain exceptions for MadaFacture.

Three families matter to callers:

- validation errors (bad input, nothing written yet),
- storage errors (persistence failed, operation aborted),
- precondition errors (a correct "nothing to do" state, not a defect).
"""

from datetime import date
from typing import Any


class MadaFactureError(Exception):
    """Base exception for all MadaFacture errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for display or logging."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Validation Exceptions
class ValidationError(MadaFactureError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )


class ClientNotFoundError(ValidationError):
    """Referenced client does not exist."""

    def __init__(self, client_id: int):
        super().__init__(
            field="client_id",
            message=f"Client not found: {client_id}",
            value=client_id,
        )
        self.code = "CLIENT_NOT_FOUND"


# Storage Exceptions
class StorageError(MadaFactureError):
    """Base exception for storage operations."""

    pass


class ProductNotFoundError(StorageError):
    """Product not found in storage."""

    def __init__(self, product_id: int):
        super().__init__(
            f"Product not found: {product_id}",
            code="PRODUCT_NOT_FOUND",
            details={"product_id": product_id},
        )


class InvoiceNotFoundError(StorageError):
    """Invoice not found in storage."""

    def __init__(self, invoice_id: int):
        super().__init__(
            f"Invoice not found: {invoice_id}",
            code="INVOICE_NOT_FOUND",
            details={"invoice_id": invoice_id},
        )


class ClosingNotFoundError(StorageError):
    """Daily closing not found in storage."""

    def __init__(self, closing_id: int):
        super().__init__(
            f"Closing not found: {closing_id}",
            code="CLOSING_NOT_FOUND",
            details={"closing_id": closing_id},
        )


class SettingsNotInitializedError(StorageError):
    """The business profile has not been created yet."""

    def __init__(self) -> None:
        super().__init__(
            "Business settings are not initialized",
            code="SETTINGS_NOT_INITIALIZED",
        )


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


# Precondition Exceptions
class PreconditionError(MadaFactureError):
    """The operation has nothing to do in the current state."""

    pass


class NothingToCloseError(PreconditionError):
    """No transaction was recorded on the date being closed."""

    def __init__(self, day: date):
        super().__init__(
            f"Nothing to close on {day.isoformat()}",
            code="NOTHING_TO_CLOSE",
            details={"date": day.isoformat()},
        )


class ClosingAlreadyExistsError(PreconditionError):
    """A closing exists for the date and replacement was not confirmed."""

    def __init__(self, day: date, number: str):
        super().__init__(
            f"Closing {number} already exists for {day.isoformat()}",
            code="CLOSING_ALREADY_EXISTS",
            details={"date": day.isoformat(), "number": number},
        )


class InvoiceNotPayableError(PreconditionError):
    """The invoice cannot receive a payment."""

    def __init__(self, invoice_id: int, reason: str):
        super().__init__(
            f"Invoice {invoice_id} cannot be paid: {reason}",
            code="INVOICE_NOT_PAYABLE",
            details={"invoice_id": invoice_id, "reason": reason},
        )


# Export Exceptions
class DocumentExportError(MadaFactureError):
    """Writing a rendered document to disk failed."""

    def __init__(self, filename: str, reason: str):
        super().__init__(
            f"Failed to export '{filename}': {reason}",
            code="DOCUMENT_EXPORT_ERROR",
            details={"filename": filename, "reason": reason},
        )
