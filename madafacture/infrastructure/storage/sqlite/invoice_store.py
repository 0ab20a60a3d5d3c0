"""
SQLite implementation of sales document storage.

Handles invoices, quotes and receipts with their line items.
"""

from datetime import date, datetime

import aiosqlite

from madafacture.config import get_logger
from madafacture.core.entities.invoice import (
    BusinessDomain,
    DocumentType,
    Invoice,
    InvoiceItem,
    InvoiceStatus,
)
from madafacture.core.entities.transaction import PaymentMethod
from madafacture.core.exceptions import InvoiceNotFoundError
from madafacture.core.interfaces.invoice_store import IInvoiceStore
from madafacture.infrastructure.storage.sqlite.connection import get_connection, get_transaction

logger = get_logger(__name__)


class SQLiteInvoiceStore(IInvoiceStore):
    """SQLite implementation of sales document storage."""

    async def create_invoice(self, invoice: Invoice) -> Invoice:
        """Insert the header and every item in one transaction."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO invoices (
                    number, issue_date, due_date, client_id, type,
                    subtotal, vat_total, total, paid_amount, is_paid, status,
                    payment_method, paid_at, notes, domain, created_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    invoice.number,
                    invoice.issue_date.isoformat(),
                    invoice.due_date.isoformat(),
                    invoice.client_id,
                    invoice.type.value,
                    invoice.subtotal,
                    invoice.vat_total,
                    invoice.total,
                    invoice.paid_amount,
                    int(invoice.is_paid),
                    invoice.status.value,
                    invoice.payment_method.value if invoice.payment_method else None,
                    invoice.paid_at.isoformat(timespec="microseconds") if invoice.paid_at else None,
                    invoice.notes,
                    invoice.domain.value,
                    invoice.created_at.isoformat(timespec="microseconds"),
                ),
            )
            invoice.id = cursor.lastrowid

            items = []
            for position, item in enumerate(invoice.items):
                items.append(await self._insert_item(conn, invoice.id, position, item))
            invoice.items = items

        logger.info(
            "invoice_created",
            invoice_id=invoice.id,
            number=invoice.number,
            items=len(invoice.items),
        )
        return invoice

    async def _insert_item(
        self,
        conn: aiosqlite.Connection,
        invoice_id: int,
        position: int,
        item: InvoiceItem,
    ) -> InvoiceItem:
        """Insert a single line item."""
        cursor = await conn.execute(
            """
            INSERT INTO invoice_items (
                invoice_id, position, description, quantity, unit_price,
                purchase_price, vat_rate, unit
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                invoice_id,
                position,
                item.description,
                item.quantity,
                item.unit_price,
                item.purchase_price,
                item.vat_rate,
                item.unit,
            ),
        )
        return item.model_copy(update={"id": cursor.lastrowid, "invoice_id": invoice_id})

    async def get_invoice(self, invoice_id: int) -> Invoice | None:
        """Get document by ID with items."""
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM invoices WHERE id = ?", (invoice_id,))
            row = await cursor.fetchone()
            if row is None:
                return None

            invoice = self._row_to_invoice(row)
            invoice.items = await self._load_items(conn, invoice.id)
            return invoice

    async def update_payment(self, invoice: Invoice) -> Invoice:
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                UPDATE invoices SET
                    paid_amount = ?, is_paid = ?, status = ?,
                    payment_method = ?, paid_at = ?
                WHERE id = ?
                """,
                (
                    invoice.paid_amount,
                    int(invoice.is_paid),
                    invoice.status.value,
                    invoice.payment_method.value if invoice.payment_method else None,
                    invoice.paid_at.isoformat(timespec="microseconds") if invoice.paid_at else None,
                    invoice.id,
                ),
            )
            if cursor.rowcount == 0:
                raise InvoiceNotFoundError(invoice.id)

        logger.info(
            "invoice_payment_updated",
            invoice_id=invoice.id,
            status=invoice.status.value,
            paid_amount=invoice.paid_amount,
        )
        return invoice

    async def list_invoices(
        self,
        doc_type: DocumentType | None = None,
        limit: int = 1000,
        offset: int = 0,
    ) -> list[Invoice]:
        query = "SELECT * FROM invoices"
        params: list = []
        if doc_type is not None:
            query += " WHERE type = ?"
            params.append(doc_type.value)
        query += " ORDER BY issue_date DESC, id DESC LIMIT ? OFFSET ?"
        params.extend([limit, offset])

        async with get_connection() as conn:
            cursor = await conn.execute(query, params)
            rows = await cursor.fetchall()
            return await self._with_items(conn, rows)

    async def list_by_date(
        self,
        issue_date: date,
        exclude_statuses: tuple[InvoiceStatus, ...] = (),
    ) -> list[Invoice]:
        query = "SELECT * FROM invoices WHERE issue_date = ?"
        params: list = [issue_date.isoformat()]
        if exclude_statuses:
            placeholders = ", ".join("?" for _ in exclude_statuses)
            query += f" AND status NOT IN ({placeholders})"
            params.extend(s.value for s in exclude_statuses)
        query += " ORDER BY id"

        async with get_connection() as conn:
            cursor = await conn.execute(query, params)
            rows = await cursor.fetchall()
            return await self._with_items(conn, rows)

    async def list_by_client(self, client_id: int) -> list[Invoice]:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM invoices WHERE client_id = ? ORDER BY issue_date DESC, id DESC",
                (client_id,),
            )
            rows = await cursor.fetchall()
            return await self._with_items(conn, rows)

    async def _with_items(
        self, conn: aiosqlite.Connection, rows: list[aiosqlite.Row]
    ) -> list[Invoice]:
        invoices = []
        for row in rows:
            invoice = self._row_to_invoice(row)
            invoice.items = await self._load_items(conn, invoice.id)
            invoices.append(invoice)
        return invoices

    async def _load_items(
        self, conn: aiosqlite.Connection, invoice_id: int
    ) -> list[InvoiceItem]:
        cursor = await conn.execute(
            "SELECT * FROM invoice_items WHERE invoice_id = ? ORDER BY position",
            (invoice_id,),
        )
        rows = await cursor.fetchall()
        return [self._row_to_item(r) for r in rows]

    @staticmethod
    def _row_to_invoice(row: aiosqlite.Row) -> Invoice:
        """Convert a database row to an Invoice entity (without items)."""
        return Invoice(
            id=row["id"],
            number=row["number"],
            issue_date=date.fromisoformat(row["issue_date"]),
            due_date=date.fromisoformat(row["due_date"]),
            client_id=row["client_id"],
            type=DocumentType(row["type"]),
            subtotal=row["subtotal"],
            vat_total=row["vat_total"],
            total=row["total"],
            paid_amount=row["paid_amount"],
            is_paid=bool(row["is_paid"]),
            status=InvoiceStatus(row["status"]),
            payment_method=PaymentMethod(row["payment_method"]) if row["payment_method"] else None,
            paid_at=datetime.fromisoformat(row["paid_at"]) if row["paid_at"] else None,
            notes=row["notes"] or "",
            domain=BusinessDomain(row["domain"]),
            created_at=datetime.fromisoformat(row["created_at"]),
        )

    @staticmethod
    def _row_to_item(row: aiosqlite.Row) -> InvoiceItem:
        """Convert a database row to an InvoiceItem entity."""
        return InvoiceItem(
            id=row["id"],
            invoice_id=row["invoice_id"],
            description=row["description"],
            quantity=row["quantity"],
            unit_price=row["unit_price"],
            purchase_price=row["purchase_price"],
            vat_rate=row["vat_rate"],
            unit=row["unit"],
        )
