"""SQLite implementation of the product catalog."""

from datetime import datetime

import aiosqlite

from madafacture.config import get_logger
from madafacture.core.entities.product import Product
from madafacture.core.exceptions import ProductNotFoundError
from madafacture.core.interfaces.product_store import IProductStore
from madafacture.infrastructure.storage.sqlite.connection import get_connection, get_transaction

logger = get_logger(__name__)


class SQLiteProductStore(IProductStore):
    """SQLite implementation of product storage and stock updates."""

    async def create_product(self, product: Product) -> Product:
        now = datetime.now()
        product.created_at = now
        product.updated_at = now
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                INSERT INTO products (
                    name, unit_price, purchase_price, unit, stock, category,
                    created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    product.name,
                    product.unit_price,
                    product.purchase_price,
                    product.unit,
                    product.stock,
                    product.category,
                    product.created_at.isoformat(timespec="microseconds"),
                    product.updated_at.isoformat(timespec="microseconds"),
                ),
            )
            product.id = cursor.lastrowid

        logger.info("product_created", product_id=product.id, name=product.name)
        return product

    async def get_product(self, product_id: int) -> Product | None:
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM products WHERE id = ?", (product_id,))
            row = await cursor.fetchone()
            return self._row_to_product(row) if row else None

    async def get_product_by_name(self, name: str) -> Product | None:
        """Exact, case-sensitive match. Duplicate names resolve to the oldest product."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM products WHERE name = ? ORDER BY id LIMIT 1",
                (name,),
            )
            row = await cursor.fetchone()
            return self._row_to_product(row) if row else None

    async def update_product(self, product: Product) -> Product:
        product.updated_at = datetime.now()
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                UPDATE products SET
                    name = ?, unit_price = ?, purchase_price = ?, unit = ?,
                    stock = ?, category = ?, updated_at = ?
                WHERE id = ?
                """,
                (
                    product.name,
                    product.unit_price,
                    product.purchase_price,
                    product.unit,
                    product.stock,
                    product.category,
                    product.updated_at.isoformat(timespec="microseconds"),
                    product.id,
                ),
            )
            if cursor.rowcount == 0:
                raise ProductNotFoundError(product.id)

        logger.info("product_updated", product_id=product.id)
        return product

    async def adjust_stock(self, product_id: int, delta: int) -> Product | None:
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "UPDATE products SET stock = stock + ?, updated_at = ? WHERE id = ?",
                (delta, datetime.now().isoformat(timespec="microseconds"), product_id),
            )
            if cursor.rowcount == 0:
                return None

            cursor = await conn.execute("SELECT * FROM products WHERE id = ?", (product_id,))
            row = await cursor.fetchone()

        product = self._row_to_product(row)
        logger.debug(
            "stock_adjusted",
            product_id=product_id,
            delta=delta,
            stock=product.stock,
        )
        return product

    async def list_products(self, limit: int = 1000, offset: int = 0) -> list[Product]:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM products ORDER BY name, id LIMIT ? OFFSET ?",
                (limit, offset),
            )
            rows = await cursor.fetchall()
            return [self._row_to_product(row) for row in rows]

    @staticmethod
    def _row_to_product(row: aiosqlite.Row) -> Product:
        """Convert a database row to a Product entity."""
        return Product(
            id=row["id"],
            name=row["name"],
            unit_price=row["unit_price"],
            purchase_price=row["purchase_price"] or 0.0,
            unit=row["unit"],
            stock=row["stock"],
            category=row["category"],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )
