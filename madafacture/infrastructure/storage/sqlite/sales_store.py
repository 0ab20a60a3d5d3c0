"""SQLite implementation of quick sale storage."""

from datetime import datetime

import aiosqlite

from madafacture.config import get_logger
from madafacture.core.entities.sale import QuickSale
from madafacture.core.entities.transaction import PaymentMethod
from madafacture.core.interfaces.sales_store import ISalesStore
from madafacture.infrastructure.storage.sqlite.connection import get_connection, get_transaction

logger = get_logger(__name__)


class SQLiteSalesStore(ISalesStore):
    """SQLite implementation of point-of-sale records."""

    async def add_sale(self, sale: QuickSale) -> QuickSale:
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO quick_sales (
                    timestamp, product_id, product_name, quantity, unit_price,
                    purchase_price, total, payment_method, client_name
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    sale.timestamp.isoformat(timespec="microseconds"),
                    sale.product_id,
                    sale.product_name,
                    sale.quantity,
                    sale.unit_price,
                    sale.purchase_price,
                    sale.total,
                    sale.payment_method.value,
                    sale.client_name,
                ),
            )
            saved = sale.model_copy(update={"id": cursor.lastrowid})

        logger.info(
            "quick_sale_recorded",
            sale_id=saved.id,
            product_id=saved.product_id,
            quantity=saved.quantity,
            total=saved.total,
        )
        return saved

    async def list_between(
        self, start: datetime, end: datetime | None = None
    ) -> list[QuickSale]:
        query = "SELECT * FROM quick_sales WHERE timestamp >= ?"
        params: list = [start.isoformat(timespec="microseconds")]
        if end is not None:
            query += " AND timestamp < ?"
            params.append(end.isoformat(timespec="microseconds"))
        query += " ORDER BY timestamp, id"

        async with get_connection() as conn:
            cursor = await conn.execute(query, params)
            rows = await cursor.fetchall()
            return [self._row_to_sale(row) for row in rows]

    async def list_sales(self) -> list[QuickSale]:
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM quick_sales ORDER BY timestamp, id")
            rows = await cursor.fetchall()
            return [self._row_to_sale(row) for row in rows]

    @staticmethod
    def _row_to_sale(row: aiosqlite.Row) -> QuickSale:
        """Convert a database row to a QuickSale entity."""
        return QuickSale(
            id=row["id"],
            timestamp=datetime.fromisoformat(row["timestamp"]),
            product_id=row["product_id"],
            product_name=row["product_name"],
            quantity=row["quantity"],
            unit_price=row["unit_price"],
            purchase_price=row["purchase_price"],
            total=row["total"],
            payment_method=PaymentMethod(row["payment_method"]),
            client_name=row["client_name"] or "",
        )
