"""Tests for the schema migrator."""

import shutil
from pathlib import Path

import aiosqlite
import pytest

from madafacture.infrastructure.storage.sqlite.migrations import (
    REQUIRED_TABLES,
    Migration,
    bundled_migrations,
    initialize_database,
    migration_status,
    verify_schema,
)
from madafacture.infrastructure.storage.sqlite.migrations.migrator import MIGRATIONS_DIR


@pytest.fixture
def scripts_dir(tmp_path: Path) -> Path:
    """Private copy of the bundled scripts that a test may extend."""
    directory = tmp_path / "scripts"
    directory.mkdir()
    for path in MIGRATIONS_DIR.glob("v*.sql"):
        shutil.copy2(path, directory / path.name)
    return directory


async def _tables(db_path: Path) -> set[str]:
    async with aiosqlite.connect(db_path) as conn:
        cursor = await conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
        return {row[0] for row in await cursor.fetchall()}


class TestMigration:
    def test_parses_versioned_filename(self, tmp_path: Path):
        path = tmp_path / "v007_add_things.sql"
        path.write_text("SELECT 1;", encoding="utf-8")

        migration = Migration.load(path)

        assert migration.version == "007"
        assert migration.name == "add_things"
        assert len(migration.checksum) == 16
        assert migration.sql == "SELECT 1;"

    def test_rejects_unversioned_filename(self, tmp_path: Path):
        path = tmp_path / "schema.sql"
        path.write_text("SELECT 1;", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid migration filename"):
            Migration.load(path)

    def test_bundled_migrations_start_at_001(self):
        migrations = bundled_migrations()

        assert migrations[0].version == "001"
        assert [m.version for m in migrations] == sorted(m.version for m in migrations)

    def test_misnamed_script_is_ignored(self, scripts_dir: Path):
        (scripts_dir / "v2_too_short.sql").write_text("SELECT 1;", encoding="utf-8")

        versions = [m.version for m in bundled_migrations(scripts_dir)]

        assert "2" not in versions


class TestInitializeDatabase:
    @pytest.mark.asyncio
    async def test_fresh_database_gets_every_table(self, temp_db_path: Path):
        results = await initialize_database(temp_db_path, backup=False)

        assert [r.success for r in results] == [True]
        assert set(REQUIRED_TABLES) <= await _tables(temp_db_path)

    @pytest.mark.asyncio
    async def test_second_run_is_a_no_op(self, temp_db_path: Path):
        await initialize_database(temp_db_path, backup=False)

        assert await initialize_database(temp_db_path, backup=True) == []
        assert list(temp_db_path.parent.glob("*.backup_*")) == []

    @pytest.mark.asyncio
    async def test_checksum_is_recorded(self, temp_db_path: Path):
        await initialize_database(temp_db_path, backup=False)

        async with aiosqlite.connect(temp_db_path) as conn:
            cursor = await conn.execute("SELECT version, checksum FROM schema_migrations")
            recorded = dict(await cursor.fetchall())

        assert recorded == {m.version: m.checksum for m in bundled_migrations()}

    @pytest.mark.asyncio
    async def test_new_script_applies_and_drops_backup(
        self, temp_db_path: Path, scripts_dir: Path
    ):
        await initialize_database(temp_db_path, backup=False, directory=scripts_dir)
        (scripts_dir / "v002_add_suppliers.sql").write_text(
            "CREATE TABLE suppliers (id INTEGER PRIMARY KEY, name TEXT NOT NULL);",
            encoding="utf-8",
        )

        results = await initialize_database(temp_db_path, directory=scripts_dir)

        assert [(r.version, r.success) for r in results] == [("002", True)]
        assert "suppliers" in await _tables(temp_db_path)
        assert list(temp_db_path.parent.glob("*.backup_*")) == []

    @pytest.mark.asyncio
    async def test_failed_script_restores_the_file(self, temp_db_path: Path, scripts_dir: Path):
        await initialize_database(temp_db_path, backup=False, directory=scripts_dir)
        (scripts_dir / "v002_broken.sql").write_text(
            "CREATE TABLE half_done (id INTEGER);\nALTER TABLE missing ADD COLUMN x;",
            encoding="utf-8",
        )

        results = await initialize_database(temp_db_path, directory=scripts_dir)

        assert results[0].success is False
        assert "missing" in results[0].error
        assert "half_done" not in await _tables(temp_db_path)
        status = await migration_status(temp_db_path, scripts_dir)
        assert status.pending == ["002"]


class TestMigrationStatus:
    @pytest.mark.asyncio
    async def test_missing_database(self, tmp_path: Path):
        status = await migration_status(tmp_path / "absent.db")

        assert status.exists is False
        assert status.current_version is None
        assert status.pending == [m.version for m in bundled_migrations()]

    @pytest.mark.asyncio
    async def test_up_to_date_database(self, temp_db_path: Path):
        await initialize_database(temp_db_path, backup=False)

        status = await migration_status(temp_db_path)

        assert status.exists is True
        assert status.current_version == bundled_migrations()[-1].version
        assert status.pending == []


class TestVerifySchema:
    @pytest.mark.asyncio
    async def test_migrated_database_passes(self, temp_db_path: Path):
        await initialize_database(temp_db_path, backup=False)

        checks = await verify_schema(temp_db_path)

        assert {c.name for c in checks} == {
            "integrity",
            "required_tables",
            "migration_checksums",
            "closing_date_unique",
            "invoice_items_cascade",
            "orphan_invoice_items",
        }
        assert all(c.passed for c in checks)

    @pytest.mark.asyncio
    async def test_detects_closing_table_without_unique_date(self, temp_db_path: Path):
        await initialize_database(temp_db_path, backup=False)
        async with aiosqlite.connect(temp_db_path) as conn:
            await conn.executescript(
                """
                DROP TABLE daily_closings;
                CREATE TABLE daily_closings (id INTEGER PRIMARY KEY, closing_date TEXT);
                """
            )

        checks = {c.name: c for c in await verify_schema(temp_db_path)}

        assert checks["closing_date_unique"].passed is False
        assert checks["required_tables"].passed is True

    @pytest.mark.asyncio
    async def test_detects_orphan_items_and_edited_script(
        self, temp_db_path: Path, scripts_dir: Path
    ):
        await initialize_database(temp_db_path, backup=False, directory=scripts_dir)
        async with aiosqlite.connect(temp_db_path) as conn:
            await conn.execute(
                "INSERT INTO invoice_items (invoice_id, position, description, quantity, "
                "unit_price) VALUES (999, 0, 'Riz', 1, 1000.0)"
            )
            await conn.commit()
        script = next(scripts_dir.glob("v001_*.sql"))
        script.write_text(script.read_text(encoding="utf-8") + "\n-- edited\n", encoding="utf-8")

        checks = {c.name: c for c in await verify_schema(temp_db_path, scripts_dir)}

        assert checks["orphan_invoice_items"].passed is False
        assert checks["orphan_invoice_items"].detail == "1"
        assert checks["migration_checksums"].passed is False
        assert checks["migration_checksums"].detail == "001"
