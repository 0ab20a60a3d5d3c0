"""SQLite implementation of client storage."""

from datetime import datetime

import aiosqlite

from madafacture.config import get_logger
from madafacture.core.entities.client import Client, ClientType, FiscalIdentifiers
from madafacture.core.interfaces.client_store import IClientStore
from madafacture.infrastructure.storage.sqlite.connection import get_connection, get_transaction

logger = get_logger(__name__)


class SQLiteClientStore(IClientStore):
    """SQLite implementation of client storage."""

    async def create_client(self, client: Client) -> Client:
        fiscal = client.fiscal or FiscalIdentifiers()
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO clients (
                    name, type, email, phone, address, nif, stat, notes, created_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    client.name,
                    client.type.value,
                    client.email,
                    client.phone,
                    client.address,
                    fiscal.nif,
                    fiscal.stat,
                    client.notes,
                    client.created_at.isoformat(timespec="microseconds"),
                ),
            )
            client.id = cursor.lastrowid

        logger.info("client_created", client_id=client.id, type=client.type.value)
        return client

    async def get_client(self, client_id: int) -> Client | None:
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM clients WHERE id = ?", (client_id,))
            row = await cursor.fetchone()
            return self._row_to_client(row) if row else None

    async def update_notes(self, client_id: int, notes: str) -> None:
        async with get_transaction() as conn:
            await conn.execute(
                "UPDATE clients SET notes = ? WHERE id = ?",
                (notes, client_id),
            )
        logger.debug("client_notes_updated", client_id=client_id)

    async def list_clients(self, limit: int = 500, offset: int = 0) -> list[Client]:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM clients ORDER BY name, id LIMIT ? OFFSET ?",
                (limit, offset),
            )
            rows = await cursor.fetchall()
            return [self._row_to_client(row) for row in rows]

    @staticmethod
    def _row_to_client(row: aiosqlite.Row) -> Client:
        """Convert a database row to a Client entity."""
        client_type = ClientType(row["type"])
        fiscal = None
        if client_type == ClientType.COMPANY:
            fiscal = FiscalIdentifiers(nif=row["nif"], stat=row["stat"])

        return Client(
            id=row["id"],
            name=row["name"],
            type=client_type,
            email=row["email"],
            phone=row["phone"],
            address=row["address"],
            fiscal=fiscal,
            notes=row["notes"] or "",
            created_at=datetime.fromisoformat(row["created_at"]),
        )
