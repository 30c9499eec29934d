"""
Test suite for database configuration.

System role: Verification of settings parsing and engine options
"""

import logging

import pytest
from pydantic import ValidationError
from sqlalchemy.pool import StaticPool

from gamesdb.configs import DatabaseSettings, Settings


class TestDatabaseSettings:
    """Test suite for DatabaseSettings."""

    def test_url_should_come_from_environment(self, monkeypatch) -> None:
        """Test GAMESDB_DB_URL overrides the default."""
        monkeypatch.setenv("GAMESDB_DB_URL", "sqlite:///from-env.db")
        monkeypatch.setenv("GAMESDB_DB_ECHO_SQL", "true")

        settings = DatabaseSettings()

        assert settings.url == "sqlite:///from-env.db"
        assert settings.echo_sql is True

    def test_memory_url_should_be_detected(self) -> None:
        """Test both in-memory spellings."""
        assert DatabaseSettings(url="sqlite:///:memory:").is_memory
        assert DatabaseSettings(url="sqlite://").is_memory
        assert not DatabaseSettings(url="sqlite:///games.db").is_memory

    def test_memory_engine_options_should_use_static_pool(self) -> None:
        """Test in-memory SQLite shares one connection."""
        options = DatabaseSettings(url="sqlite:///:memory:").engine_options()

        assert options["poolclass"] is StaticPool
        assert options["connect_args"] == {"check_same_thread": False}
        assert "pool_size" not in options

    def test_file_engine_options_should_skip_pool_sizing(self) -> None:
        """Test file SQLite keeps the default pool."""
        options = DatabaseSettings(url="sqlite:///games.db").engine_options()

        assert "poolclass" not in options
        assert "pool_size" not in options

    def test_server_engine_options_should_size_pool(self) -> None:
        """Test a server URL gets pool sizing from settings."""
        settings = DatabaseSettings(
            url="postgresql://games@localhost/games", pool_size=3, max_overflow=1, pool_timeout=5
        )

        options = settings.engine_options()

        assert options["pool_size"] == 3
        assert options["max_overflow"] == 1
        assert options["pool_timeout"] == 5
        assert "connect_args" not in options


class TestBaseSettings:
    """Test suite for the shared environment and logging settings."""

    def test_log_level_should_be_normalized(self) -> None:
        """Test lower-case level names are accepted."""
        assert DatabaseSettings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_should_be_rejected(self) -> None:
        """Test a name the logging module does not know fails validation."""
        with pytest.raises(ValidationError):
            DatabaseSettings(log_level="LOUD")

    def test_log_level_should_come_from_environment(self, monkeypatch) -> None:
        """Test GAMESDB_LOG_LEVEL feeds the shared base settings."""
        monkeypatch.setenv("GAMESDB_LOG_LEVEL", "warning")

        assert Settings().effective_log_level == logging.WARNING

    def test_debug_should_force_debug_level(self) -> None:
        """Test debug mode overrides the configured level."""
        settings = Settings(log_level="ERROR", debug=True)

        assert settings.effective_log_level == logging.DEBUG

    def test_unknown_environment_should_be_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(environment="staging-eu")
