"""
aiosqlite access to the MadaFacture database file.

Connections are opened on first use, up to the configured size, and handed
out one at a time. Store methods borrow a connection for a single read or a
single write transaction and never nest, so one connection serves the
operator; a larger size only helps concurrent readers.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import aiosqlite

from madafacture.config import get_logger, get_settings

logger = get_logger(__name__)

PRAGMAS = (
    "PRAGMA journal_mode=WAL",
    "PRAGMA synchronous=NORMAL",
    # Declared only for invoice_items -> invoices
    "PRAGMA foreign_keys=ON",
)


class SQLitePool:
    """Lazily filled set of aiosqlite connections to one database file."""

    def __init__(self, path: Path, size: int = 1, busy_timeout_ms: int = 30000):
        self.path = path
        self.size = max(1, size)
        self.busy_timeout_ms = busy_timeout_ms

        self._idle: asyncio.Queue[aiosqlite.Connection] = asyncio.Queue()
        self._opened: list[aiosqlite.Connection] = []
        self._open_lock = asyncio.Lock()

    @property
    def open_count(self) -> int:
        return len(self._opened)

    async def _open(self) -> aiosqlite.Connection:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        conn = await aiosqlite.connect(self.path)
        for pragma in PRAGMAS:
            await conn.execute(pragma)
        await conn.execute(f"PRAGMA busy_timeout={self.busy_timeout_ms}")
        conn.row_factory = aiosqlite.Row

        self._opened.append(conn)
        logger.debug("sqlite_connection_opened", db_path=str(self.path), open=self.open_count)
        return conn

    async def _take(self) -> aiosqlite.Connection:
        if self._idle.empty():
            async with self._open_lock:
                if self.open_count < self.size:
                    return await self._open()
        return await self._idle.get()

    @asynccontextmanager
    async def borrow(self) -> AsyncIterator[aiosqlite.Connection]:
        """Hold one connection for the duration of the block."""
        conn = await self._take()
        try:
            yield conn
        finally:
            self._idle.put_nowait(conn)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[aiosqlite.Connection]:
        """
        Borrow a connection inside an immediate write transaction.

        The write lock is taken up front; the block commits when it exits
        normally and rolls back when it raises.
        """
        async with self.borrow() as conn:
            await conn.execute("BEGIN IMMEDIATE")
            try:
                yield conn
            except BaseException:
                await conn.rollback()
                raise
            await conn.commit()

    async def close(self) -> None:
        async with self._open_lock:
            for conn in self._opened:
                await conn.close()
            closed = self.open_count
            self._opened.clear()
            self._idle = asyncio.Queue()
        logger.info("sqlite_pool_closed", db_path=str(self.path), closed=closed)


_pool: SQLitePool | None = None


async def get_pool() -> SQLitePool:
    """Pool for the configured database file, created on first call."""
    global _pool
    if _pool is None:
        storage = get_settings().storage
        _pool = SQLitePool(
            storage.db_path,
            size=storage.pool_size,
            busy_timeout_ms=storage.busy_timeout,
        )
        logger.info("sqlite_pool_created", db_path=str(storage.db_path), size=_pool.size)
    return _pool


async def close_pool() -> None:
    global _pool
    if _pool is not None:
        await _pool.close()
        _pool = None


@asynccontextmanager
async def get_connection() -> AsyncIterator[aiosqlite.Connection]:
    """Connection for reads."""
    pool = await get_pool()
    async with pool.borrow() as conn:
        yield conn


@asynccontextmanager
async def get_transaction() -> AsyncIterator[aiosqlite.Connection]:
    """Connection inside a write transaction."""
    pool = await get_pool()
    async with pool.transaction() as conn:
        yield conn
