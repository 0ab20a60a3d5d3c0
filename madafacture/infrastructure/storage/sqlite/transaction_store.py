"""SQLite implementation of the payment ledger."""

from datetime import datetime

import aiosqlite

from madafacture.config import get_logger
from madafacture.core.entities.transaction import (
    PaymentMethod,
    PaymentTransaction,
    TransactionType,
)
from madafacture.core.interfaces.transaction_store import ITransactionStore
from madafacture.infrastructure.storage.sqlite.connection import get_connection, get_transaction

logger = get_logger(__name__)


class SQLiteTransactionStore(ITransactionStore):
    """Append-only payment ledger. Entries are never updated or deleted."""

    async def add_transaction(
        self, transaction: PaymentTransaction
    ) -> PaymentTransaction:
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO payment_transactions (
                    timestamp, amount, method, reference_id, label, client_name, type
                ) VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    transaction.timestamp.isoformat(timespec="microseconds"),
                    transaction.amount,
                    transaction.method.value,
                    transaction.reference_id,
                    transaction.label,
                    transaction.client_name,
                    transaction.type.value,
                ),
            )
            saved = transaction.model_copy(update={"id": cursor.lastrowid})

        logger.info(
            "transaction_recorded",
            transaction_id=saved.id,
            type=saved.type.value,
            method=saved.method.value,
            amount=saved.amount,
        )
        return saved

    async def list_between(
        self, start: datetime, end: datetime | None = None
    ) -> list[PaymentTransaction]:
        query = "SELECT * FROM payment_transactions WHERE timestamp >= ?"
        params: list = [start.isoformat(timespec="microseconds")]
        if end is not None:
            query += " AND timestamp < ?"
            params.append(end.isoformat(timespec="microseconds"))
        query += " ORDER BY timestamp DESC, id DESC"

        async with get_connection() as conn:
            cursor = await conn.execute(query, params)
            rows = await cursor.fetchall()
            return [self._row_to_transaction(row) for row in rows]

    @staticmethod
    def _row_to_transaction(row: aiosqlite.Row) -> PaymentTransaction:
        return PaymentTransaction(
            id=row["id"],
            timestamp=datetime.fromisoformat(row["timestamp"]),
            amount=row["amount"],
            method=PaymentMethod(row["method"]),
            reference_id=row["reference_id"],
            label=row["label"],
            client_name=row["client_name"] or "",
            type=TransactionType(row["type"]),
        )
