"""
Application settings with Pydantic v2 validation.

Loads configuration from environment variables with sensible defaults.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from snackbooks.core.entities.production import ProductionConfig


class StorageSettings(BaseSettings):
    """Storage configuration."""

    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    data_dir: Path = Path("data")
    db_name: str = "snackbooks.db"

    # SQLite settings
    pool_size: int = 5
    busy_timeout: int = 30000  # ms

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.db_name


class APISettings(BaseSettings):
    """API server configuration."""

    model_config = SettingsConfigDict(env_prefix="API_")

    host: str = "0.0.0.0"
    port: int = 5000
    debug: bool = False
    cors_origins: list[str] = ["*"]


class ProductionSettings(BaseSettings):
    """Production yield and costing constants."""

    model_config = SettingsConfigDict(env_prefix="PRODUCTION_")

    yield_ratio: float = Field(default=1.4, gt=0)
    oil_ratio: float = Field(default=0.1, ge=0)
    salt_ratio: float = Field(default=0.02, ge=0)
    spice_ratio: float = Field(default=0.01, ge=0)
    batch_unit_kg: float = Field(default=5.0, gt=0)
    minutes_per_batch: float = Field(default=30.0, ge=0)
    gas_cost_per_minute: float = Field(default=2.0, ge=0)

    # Forecast window for upcoming deliveries
    forecast_days: int = Field(default=7, ge=0)

    def to_config(self) -> ProductionConfig:
        """Build the calculator config from these settings."""
        return ProductionConfig(
            yield_ratio=self.yield_ratio,
            oil_ratio=self.oil_ratio,
            salt_ratio=self.salt_ratio,
            spice_ratio=self.spice_ratio,
            batch_unit_kg=self.batch_unit_kg,
            minutes_per_batch=self.minutes_per_batch,
            gas_cost_per_minute=self.gas_cost_per_minute,
        )


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "SnackBooks"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Sub-settings
    storage: StorageSettings = Field(default_factory=StorageSettings)
    api: APISettings = Field(default_factory=APISettings)
    production: ProductionSettings = Field(default_factory=ProductionSettings)

    @field_validator("storage", mode="before")
    @classmethod
    def coerce_storage(cls, v: Any) -> StorageSettings:
        if isinstance(v, dict):
            return StorageSettings(**v)
        return v or StorageSettings()


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
