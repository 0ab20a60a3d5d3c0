"""Fixtures for end-to-end flows on a real, migrated SQLite file."""

from collections.abc import AsyncGenerator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

import madafacture.infrastructure.storage.sqlite.connection as conn_module
from madafacture.application.use_cases import InitializeSettingsUseCase
from madafacture.config.settings import BusinessSettings
from madafacture.core.entities import UserSettings
from madafacture.infrastructure.storage.sqlite.migrations import initialize_database


@pytest.fixture
async def database(tmp_path: Path) -> AsyncGenerator[Path, None]:
    db_path = tmp_path / "madafacture.db"
    await initialize_database(db_path, backup=False)

    mock_settings = MagicMock()
    mock_settings.storage.db_path = db_path
    mock_settings.storage.pool_size = 1
    mock_settings.storage.busy_timeout = 5000

    conn_module._pool = None
    with patch.object(conn_module, "get_settings", return_value=mock_settings):
        try:
            yield db_path
        finally:
            await conn_module.close_pool()


@pytest.fixture
async def business(database: Path) -> UserSettings:
    """Business profile seeded with invoice counter 200."""
    app_settings = MagicMock()
    app_settings.business = BusinessSettings(
        business_name="Épicerie Soa",
        nif="4001234567",
        first_invoice_number=200,
    )
    return await InitializeSettingsUseCase(app_settings=app_settings).execute()
