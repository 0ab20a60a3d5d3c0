"""Database migrations module."""

from madafacture.infrastructure.storage.sqlite.migrations.migrator import (
    REQUIRED_TABLES,
    Migration,
    MigrationResult,
    MigrationStatus,
    SchemaCheck,
    bundled_migrations,
    initialize_database,
    migration_status,
    verify_schema,
)

__all__ = [
    "REQUIRED_TABLES",
    "Migration",
    "MigrationResult",
    "MigrationStatus",
    "SchemaCheck",
    "bundled_migrations",
    "initialize_database",
    "migration_status",
    "verify_schema",
]
