"""Tests for the domain exception hierarchy."""

from datetime import date

from madafacture.core.exceptions import (
    ClientNotFoundError,
    ClosingAlreadyExistsError,
    DatabaseError,
    InvoiceNotPayableError,
    MadaFactureError,
    NothingToCloseError,
    PreconditionError,
    ProductNotFoundError,
    StorageError,
    ValidationError,
)


class TestExceptions:
    def test_client_not_found_is_a_validation_error(self):
        error = ClientNotFoundError(12)

        assert isinstance(error, ValidationError)
        assert error.code == "CLIENT_NOT_FOUND"
        assert error.details["field"] == "client_id"

    def test_storage_family(self):
        assert isinstance(ProductNotFoundError(1), StorageError)
        assert isinstance(DatabaseError("create_invoice", "disk full"), StorageError)

    def test_preconditions_are_not_storage_errors(self):
        for error in (
            NothingToCloseError(date(2024, 6, 1)),
            ClosingAlreadyExistsError(date(2024, 6, 1), "CLOT-20240601-001"),
            InvoiceNotPayableError(3, "already paid"),
        ):
            assert isinstance(error, PreconditionError)
            assert not isinstance(error, StorageError)

    def test_to_dict(self):
        error = NothingToCloseError(date(2024, 6, 1))

        assert error.to_dict() == {
            "error": "NOTHING_TO_CLOSE",
            "message": "Nothing to close on 2024-06-01",
            "details": {"date": "2024-06-01"},
        }

    def test_default_code_is_class_name(self):
        assert MadaFactureError("boom").code == "MadaFactureError"

    def test_validation_value_is_truncated(self):
        error = ValidationError("notes", "too long", "x" * 500)

        assert len(error.details["value"]) == 100
