"""
Application settings with Pydantic v2 validation.

Loads configuration from environment variables with sensible defaults.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Storage configuration."""

    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    data_dir: Path = Path("data")
    db_name: str = "madafacture.db"

    # SQLite settings
    pool_size: int = 1
    busy_timeout: int = 30000  # ms

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.db_name


class PdfSettings(BaseSettings):
    """PDF export configuration."""

    model_config = SettingsConfigDict(env_prefix="PDF_")

    export_dir: Path = Path("data/exports")
    footer_text: str = "MadaFacture - Document certifié conforme"


class BusinessSettings(BaseSettings):
    """
    Seed values for the business profile.

    Only used the first time the database is initialized; afterwards the
    stored profile is edited through the settings use case.
    """

    model_config = SettingsConfigDict(env_prefix="BUSINESS_")

    business_name: str = "Ma Boutique"
    nif: str = ""
    stat: str = ""
    rcs: str = ""
    bank_info: str | None = None
    address: str = ""
    phone: str = ""
    email: str = ""
    logo_path: str | None = None

    default_vat: float = 0.0
    currency: str = "Ar"
    currency_name: str = "Ariary"
    domain: Literal["Commerce", "Services"] = "Commerce"

    invoice_prefix: str = "FACT-"
    first_invoice_number: int = 1
    shop_mode_enabled: bool = True
    show_profits: bool = True


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "MadaFacture"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Sub-settings
    storage: StorageSettings = Field(default_factory=StorageSettings)
    pdf: PdfSettings = Field(default_factory=PdfSettings)
    business: BusinessSettings = Field(default_factory=BusinessSettings)

    @field_validator("storage", mode="before")
    @classmethod
    def ensure_data_dir(cls, v: Any) -> StorageSettings:
        if isinstance(v, dict):
            settings = StorageSettings(**v)
        else:
            settings = v or StorageSettings()
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        return settings


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
