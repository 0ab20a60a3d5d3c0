"""SQLite implementation of the business profile singleton."""

import aiosqlite

from madafacture.config import get_logger
from madafacture.core.entities.invoice import BusinessDomain
from madafacture.core.entities.user_settings import UserSettings
from madafacture.core.exceptions import SettingsNotInitializedError
from madafacture.core.interfaces.settings_store import ISettingsStore
from madafacture.infrastructure.storage.sqlite.connection import get_connection, get_transaction

logger = get_logger(__name__)

_PROFILE_COLUMNS = (
    "business_name",
    "nif",
    "stat",
    "rcs",
    "bank_info",
    "address",
    "phone",
    "email",
    "logo_path",
    "default_vat",
    "currency",
    "currency_name",
    "domain",
    "invoice_prefix",
    "shop_mode_enabled",
    "show_profits",
)


def _profile_values(settings: UserSettings) -> list:
    values = []
    for column in _PROFILE_COLUMNS:
        value = getattr(settings, column)
        if isinstance(value, BusinessDomain):
            value = value.value
        elif isinstance(value, bool):
            value = int(value)
        values.append(value)
    return values


class SQLiteSettingsStore(ISettingsStore):
    """The settings table holds at most one meaningful row: the lowest id."""

    async def get_settings(self) -> UserSettings | None:
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM user_settings ORDER BY id LIMIT 1")
            row = await cursor.fetchone()
            return self._row_to_settings(row) if row else None

    async def create_settings(self, settings: UserSettings) -> UserSettings:
        columns = (*_PROFILE_COLUMNS, "next_invoice_number", "next_closing_number")
        values = [
            *_profile_values(settings),
            settings.next_invoice_number,
            settings.next_closing_number,
        ]
        async with get_transaction() as conn:
            cursor = await conn.execute(
                f"INSERT INTO user_settings ({', '.join(columns)}) "
                f"VALUES ({', '.join('?' for _ in columns)})",
                values,
            )
            settings.id = cursor.lastrowid

        logger.info(
            "settings_created",
            settings_id=settings.id,
            business_name=settings.business_name,
        )
        return settings

    async def update_settings(self, settings: UserSettings) -> UserSettings:
        assignments = ", ".join(f"{c} = ?" for c in _PROFILE_COLUMNS)
        async with get_transaction() as conn:
            cursor = await conn.execute(
                f"UPDATE user_settings SET {assignments} WHERE id = ?",
                [*_profile_values(settings), settings.id],
            )
            if cursor.rowcount == 0:
                raise SettingsNotInitializedError()

        logger.info("settings_updated", settings_id=settings.id)
        return settings

    async def advance_invoice_number(self, settings_id: int) -> int:
        return await self._advance(settings_id, "next_invoice_number")

    async def advance_closing_number(self, settings_id: int) -> int:
        return await self._advance(settings_id, "next_closing_number")

    async def _advance(self, settings_id: int, column: str) -> int:
        async with get_transaction() as conn:
            cursor = await conn.execute(
                f"UPDATE user_settings SET {column} = {column} + 1 WHERE id = ?",
                (settings_id,),
            )
            if cursor.rowcount == 0:
                raise SettingsNotInitializedError()
            cursor = await conn.execute(
                f"SELECT {column} FROM user_settings WHERE id = ?", (settings_id,)
            )
            row = await cursor.fetchone()

        logger.debug("sequence_advanced", column=column, value=row[0])
        return row[0]

    @staticmethod
    def _row_to_settings(row: aiosqlite.Row) -> UserSettings:
        """Convert a database row to a UserSettings entity."""
        return UserSettings(
            id=row["id"],
            business_name=row["business_name"],
            nif=row["nif"] or "",
            stat=row["stat"] or "",
            rcs=row["rcs"] or "",
            bank_info=row["bank_info"],
            address=row["address"] or "",
            phone=row["phone"] or "",
            email=row["email"] or "",
            logo_path=row["logo_path"],
            default_vat=row["default_vat"],
            currency=row["currency"],
            currency_name=row["currency_name"],
            domain=BusinessDomain(row["domain"]),
            invoice_prefix=row["invoice_prefix"],
            next_invoice_number=row["next_invoice_number"],
            next_closing_number=row["next_closing_number"],
            shop_mode_enabled=bool(row["shop_mode_enabled"]),
            show_profits=bool(row["show_profits"]),
        )
