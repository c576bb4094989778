"""Tests for application settings and logging setup."""

from pathlib import Path

import pytest
import structlog
from pydantic import ValidationError

from snackbooks.config import Settings, configure_logging, get_logger, get_settings, reset_settings


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.app_name == "SnackBooks"
        assert settings.storage.db_path == Path("data") / "snackbooks.db"
        assert settings.api.port == 5000
        assert settings.production.forecast_days == 7

    def test_singleton(self):
        assert get_settings() is get_settings()

    def test_reset_rebuilds(self):
        first = get_settings()
        reset_settings()
        assert get_settings() is not first

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        monkeypatch.setenv("STORAGE_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("STORAGE_DB_NAME", "books.db")
        monkeypatch.setenv("API_PORT", "8080")
        monkeypatch.setenv("PRODUCTION_YIELD_RATIO", "1.5")
        monkeypatch.setenv("PRODUCTION_FORECAST_DAYS", "14")

        settings = get_settings()
        assert settings.storage.db_path == tmp_path / "books.db"
        assert settings.api.port == 8080
        assert settings.production.yield_ratio == 1.5
        assert settings.production.forecast_days == 14

    def test_invalid_production_value_rejected(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("PRODUCTION_YIELD_RATIO", "0")
        with pytest.raises(ValidationError):
            Settings()

    def test_production_settings_to_config(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("PRODUCTION_GAS_COST_PER_MINUTE", "2.5")
        config = get_settings().production.to_config()
        assert config.gas_cost_per_minute == 2.5
        assert config.yield_ratio == 1.4


class TestLogging:
    def test_configure_logging_production_renders_json(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        configure_logging()
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_get_logger(self):
        configure_logging()
        logger = get_logger("snackbooks.test")
        assert hasattr(logger, "info")
