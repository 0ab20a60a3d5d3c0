"""
Schema migrations for the MadaFacture database.

Migrations are the ``vNNN_name.sql`` files next to this module. They run in
version order, once each, and are recorded with a checksum of their text in
``schema_migrations``. An existing database file is copied aside before
pending migrations run and put back if one of them fails.

Run from the shell with ``madafacture-migrate`` (``--status``, ``--verify``,
``--no-backup``).
"""

import argparse
import asyncio
import hashlib
import re
import shutil
import sys
import time
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import aiosqlite

from madafacture.config import configure_logging, get_logger, get_settings

logger = get_logger(__name__)

MIGRATIONS_DIR = Path(__file__).parent

_FILENAME = re.compile(r"^v(\d{3,})_(\w+)\.sql$")

REQUIRED_TABLES = (
    "clients",
    "products",
    "invoices",
    "invoice_items",
    "user_settings",
    "quick_sales",
    "payment_transactions",
    "daily_closings",
    "schema_migrations",
)


@dataclass(frozen=True)
class Migration:
    """One versioned SQL script."""

    version: str
    name: str
    path: Path
    checksum: str

    @classmethod
    def load(cls, path: Path) -> "Migration":
        match = _FILENAME.match(path.name)
        if match is None:
            raise ValueError(f"Invalid migration filename: {path.name}")
        digest = hashlib.sha256(path.read_bytes()).hexdigest()[:16]
        return cls(version=match.group(1), name=match.group(2), path=path, checksum=digest)

    @property
    def sql(self) -> str:
        return self.path.read_text(encoding="utf-8")


@dataclass
class MigrationResult:
    version: str
    name: str
    success: bool
    execution_time_ms: int
    error: str | None = None


@dataclass
class MigrationStatus:
    """Applied and pending versions of one database file."""

    exists: bool
    applied: dict[str, str] = field(default_factory=dict)
    pending: list[str] = field(default_factory=list)

    @property
    def current_version(self) -> str | None:
        return max(self.applied) if self.applied else None


@dataclass
class SchemaCheck:
    name: str
    passed: bool
    detail: str = ""


def bundled_migrations(directory: Path = MIGRATIONS_DIR) -> list[Migration]:
    """Migration scripts of *directory*, oldest first."""
    migrations = []
    for path in sorted(directory.glob("v*.sql")):
        try:
            migrations.append(Migration.load(path))
        except ValueError as e:
            logger.warning("migration_file_ignored", path=str(path), error=str(e))
    return sorted(migrations, key=lambda m: int(m.version))


async def _recorded_migrations(conn: aiosqlite.Connection) -> dict[str, str]:
    cursor = await conn.execute(
        "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = 'schema_migrations'"
    )
    if await cursor.fetchone() is None:
        return {}
    cursor = await conn.execute("SELECT version, checksum FROM schema_migrations")
    return {version: checksum for version, checksum in await cursor.fetchall()}


async def _apply(conn: aiosqlite.Connection, migration: Migration) -> MigrationResult:
    logger.info("migration_started", version=migration.version, name=migration.name)
    started = time.perf_counter()

    try:
        await conn.executescript(migration.sql)
        elapsed = int((time.perf_counter() - started) * 1000)
        await conn.execute(
            """
            INSERT INTO schema_migrations (version, name, checksum, execution_time_ms)
            VALUES (?, ?, ?, ?)
            """,
            (migration.version, migration.name, migration.checksum, elapsed),
        )
        await conn.commit()
    except aiosqlite.Error as e:
        await conn.rollback()
        logger.error("migration_failed", version=migration.version, error=str(e))
        return MigrationResult(
            version=migration.version,
            name=migration.name,
            success=False,
            execution_time_ms=int((time.perf_counter() - started) * 1000),
            error=str(e),
        )

    logger.info("migration_applied", version=migration.version, execution_time_ms=elapsed)
    return MigrationResult(
        version=migration.version,
        name=migration.name,
        success=True,
        execution_time_ms=elapsed,
    )


def _backup(db_path: Path) -> Path:
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    backup_path = db_path.with_name(f"{db_path.stem}.backup_{stamp}{db_path.suffix}")
    shutil.copy2(db_path, backup_path)
    logger.info("database_backed_up", backup_path=str(backup_path))
    return backup_path


def _restore(db_path: Path, backup_path: Path) -> None:
    # Stale WAL pages would be replayed over the restored file
    for suffix in ("-wal", "-shm"):
        db_path.with_name(db_path.name + suffix).unlink(missing_ok=True)
    shutil.copy2(backup_path, db_path)
    logger.warning("database_restored", backup_path=str(backup_path))


async def migration_status(
    db_path: Path | None = None,
    directory: Path = MIGRATIONS_DIR,
) -> MigrationStatus:
    db_path = db_path or get_settings().storage.db_path
    bundled = bundled_migrations(directory)
    if not db_path.exists():
        return MigrationStatus(exists=False, pending=[m.version for m in bundled])

    async with aiosqlite.connect(db_path) as conn:
        applied = await _recorded_migrations(conn)
    return MigrationStatus(
        exists=True,
        applied=applied,
        pending=[m.version for m in bundled if m.version not in applied],
    )


async def initialize_database(
    db_path: Path | None = None,
    backup: bool = True,
    directory: Path = MIGRATIONS_DIR,
) -> list[MigrationResult]:
    """
    Bring the database file up to the latest schema.

    Args:
        db_path: Database file, the configured one by default.
        backup: Copy an existing file aside first and restore it on failure.
        directory: Where the migration scripts live.

    Returns:
        One result per migration attempted; empty when already up to date.
        Application stops at the first failed migration.
    """
    db_path = db_path or get_settings().storage.db_path
    db_path.parent.mkdir(parents=True, exist_ok=True)

    status = await migration_status(db_path, directory)
    if not status.pending:
        logger.debug("database_up_to_date", db_path=str(db_path))
        return []

    bundled = bundled_migrations(directory)
    for migration in bundled:
        recorded = status.applied.get(migration.version)
        if recorded is not None and recorded != migration.checksum:
            # Edited after being applied; never re-run
            logger.warning("migration_checksum_mismatch", version=migration.version)

    backup_path = _backup(db_path) if backup and status.exists else None
    logger.info("database_migrating", db_path=str(db_path), pending=status.pending)

    results: list[MigrationResult] = []
    try:
        async with aiosqlite.connect(db_path) as conn:
            await conn.execute("PRAGMA journal_mode=WAL")
            for migration in bundled:
                if migration.version not in status.pending:
                    continue
                result = await _apply(conn, migration)
                results.append(result)
                if not result.success:
                    break
    except Exception:
        if backup_path is not None:
            _restore(db_path, backup_path)
        raise

    if backup_path is not None:
        if all(r.success for r in results):
            backup_path.unlink()
        else:
            _restore(db_path, backup_path)
    return results


async def verify_schema(
    db_path: Path | None = None,
    directory: Path = MIGRATIONS_DIR,
) -> list[SchemaCheck]:
    """Check the file's integrity and the constraints the stores rely on."""
    db_path = db_path or get_settings().storage.db_path
    checks: list[SchemaCheck] = []

    async with aiosqlite.connect(db_path) as conn:
        cursor = await conn.execute("PRAGMA integrity_check")
        (integrity,) = await cursor.fetchone()
        checks.append(SchemaCheck("integrity", integrity == "ok", integrity))

        cursor = await conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
        tables = {row[0] for row in await cursor.fetchall()}
        missing = [t for t in REQUIRED_TABLES if t not in tables]
        checks.append(SchemaCheck("required_tables", not missing, ", ".join(missing)))

        applied = await _recorded_migrations(conn)
        changed = [
            m.version
            for m in bundled_migrations(directory)
            if m.version in applied and applied[m.version] != m.checksum
        ]
        checks.append(SchemaCheck("migration_checksums", not changed, ", ".join(changed)))

        unique_columns = []
        cursor = await conn.execute("PRAGMA index_list('daily_closings')")
        for index in await cursor.fetchall():
            if index[2]:
                info = await conn.execute(f"PRAGMA index_info('{index[1]}')")
                unique_columns.append([col[2] for col in await info.fetchall()])
        checks.append(
            SchemaCheck("closing_date_unique", ["closing_date"] in unique_columns)
        )

        cursor = await conn.execute("PRAGMA foreign_key_list('invoice_items')")
        cascades = any(
            fk[2] == "invoices" and fk[3] == "invoice_id" and fk[6] == "CASCADE"
            for fk in await cursor.fetchall()
        )
        checks.append(SchemaCheck("invoice_items_cascade", cascades))

        cursor = await conn.execute("PRAGMA foreign_key_check")
        orphans = await cursor.fetchall()
        checks.append(SchemaCheck("orphan_invoice_items", not orphans, str(len(orphans))))

    return checks


def main() -> None:
    """``madafacture-migrate`` entry point."""
    parser = argparse.ArgumentParser(description="MadaFacture database migrations")
    parser.add_argument("--db-path", type=Path, help="database file (default from settings)")
    parser.add_argument("--status", action="store_true", help="show applied and pending versions")
    parser.add_argument("--verify", action="store_true", help="check the schema")
    parser.add_argument("--no-backup", action="store_true", help="do not copy the file first")
    args = parser.parse_args()
    configure_logging()

    async def run() -> bool:
        if args.status:
            status = await migration_status(args.db_path)
            print(f"database: {'present' if status.exists else 'missing'}")
            print(f"version:  {status.current_version or '-'}")
            print(f"pending:  {', '.join(status.pending) or '-'}")
            return True

        if args.verify:
            checks = await verify_schema(args.db_path)
            for check in checks:
                line = f"{'ok  ' if check.passed else 'FAIL'} {check.name}"
                print(f"{line}  {check.detail}" if check.detail and not check.passed else line)
            return all(c.passed for c in checks)

        results = await initialize_database(args.db_path, backup=not args.no_backup)
        if not results:
            print("database is up to date")
        for result in results:
            outcome = "applied" if result.success else f"FAILED: {result.error}"
            print(f"v{result.version} {result.name} {outcome} ({result.execution_time_ms}ms)")
        return all(r.success for r in results)

    if not asyncio.run(run()):
        sys.exit(1)


if __name__ == "__main__":
    main()
