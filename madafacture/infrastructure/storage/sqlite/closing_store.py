"""SQLite implementation of the daily closing archive."""

import json
from datetime import date, datetime

import aiosqlite

from madafacture.config import get_logger
from madafacture.core.entities.closing import DailyClosing, ProductStat
from madafacture.core.interfaces.closing_store import IClosingStore
from madafacture.infrastructure.storage.sqlite.connection import get_connection, get_transaction

logger = get_logger(__name__)


class SQLiteClosingStore(IClosingStore):
    """SQLite implementation of closing storage. One closing per date."""

    async def create_closing(self, closing: DailyClosing) -> DailyClosing:
        async with get_transaction() as conn:
            saved = await self._insert(conn, closing)
        logger.info(
            "closing_created",
            closing_id=saved.id,
            number=saved.number,
            closing_date=saved.closing_date.isoformat(),
        )
        return saved

    async def replace_closing(self, closing: DailyClosing) -> DailyClosing:
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM daily_closings WHERE closing_date = ?",
                (closing.closing_date.isoformat(),),
            )
            deleted = cursor.rowcount
            saved = await self._insert(conn, closing)
        logger.info(
            "closing_replaced",
            closing_id=saved.id,
            number=saved.number,
            closing_date=saved.closing_date.isoformat(),
            deleted=deleted,
        )
        return saved

    async def _insert(
        self, conn: aiosqlite.Connection, closing: DailyClosing
    ) -> DailyClosing:
        products = json.dumps(
            [p.model_dump() for p in closing.aggregated_products],
            ensure_ascii=False,
        )
        cursor = await conn.execute(
            """
            INSERT INTO daily_closings (
                number, closing_date, timestamp, total_revenue, total_profit,
                cash_amount, mobile_amount, credit_amount, transactions_count,
                aggregated_products
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                closing.number,
                closing.closing_date.isoformat(),
                closing.timestamp.isoformat(timespec="microseconds"),
                closing.total_revenue,
                closing.total_profit,
                closing.cash_amount,
                closing.mobile_amount,
                closing.credit_amount,
                closing.transactions_count,
                products,
            ),
        )
        return closing.model_copy(update={"id": cursor.lastrowid})

    async def get_closing(self, closing_id: int) -> DailyClosing | None:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM daily_closings WHERE id = ?", (closing_id,)
            )
            row = await cursor.fetchone()
            return self._row_to_closing(row) if row else None

    async def get_by_date(self, closing_date: date) -> DailyClosing | None:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM daily_closings WHERE closing_date = ?",
                (closing_date.isoformat(),),
            )
            row = await cursor.fetchone()
            return self._row_to_closing(row) if row else None

    async def list_closings(
        self, limit: int = 1000, offset: int = 0
    ) -> list[DailyClosing]:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM daily_closings ORDER BY closing_date DESC LIMIT ? OFFSET ?",
                (limit, offset),
            )
            rows = await cursor.fetchall()
            return [self._row_to_closing(row) for row in rows]

    @staticmethod
    def _row_to_closing(row: aiosqlite.Row) -> DailyClosing:
        """Convert a database row to a DailyClosing entity."""
        products = tuple(
            ProductStat(**p) for p in json.loads(row["aggregated_products"] or "[]")
        )
        return DailyClosing(
            id=row["id"],
            number=row["number"],
            closing_date=date.fromisoformat(row["closing_date"]),
            timestamp=datetime.fromisoformat(row["timestamp"]),
            total_revenue=row["total_revenue"],
            total_profit=row["total_profit"],
            cash_amount=row["cash_amount"],
            mobile_amount=row["mobile_amount"],
            credit_amount=row["credit_amount"],
            transactions_count=row["transactions_count"],
            aggregated_products=products,
        )
