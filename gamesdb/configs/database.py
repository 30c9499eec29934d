"""
Database configuration settings.

Manages the SQLAlchemy connection URL and pool parameters for the
games store. Any SQLAlchemy-supported backend works; SQLite is the
default for local runs and tests.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for ORM
"""

from typing import Any

from pydantic import Field
from pydantic_settings import SettingsConfigDict
from sqlalchemy.pool import StaticPool

from gamesdb.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """Backing store configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GAMESDB_DB_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str = Field(default="sqlite:///games.db", description="SQLAlchemy database URL")

    pool_size: int = Field(default=10, description="Connection pool size")
    max_overflow: int = Field(default=20, description="Maximum overflow connections")
    pool_timeout: int = Field(default=30, description="Connection pool timeout in seconds")
    pool_pre_ping: bool = Field(default=True, description="Verify connections before use")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    @property
    def is_sqlite(self) -> bool:
        """Whether the URL targets SQLite."""
        return self.url.startswith("sqlite")

    @property
    def is_memory(self) -> bool:
        """Whether the URL targets an in-memory SQLite database."""
        return self.is_sqlite and (":memory:" in self.url or self.url.rstrip("/") == "sqlite:")

    def engine_options(self) -> dict[str, Any]:
        """
        Build keyword arguments for sqlalchemy.create_engine.

        SQLite does not accept QueuePool sizing; in-memory databases need a
        StaticPool so every session sees the same connection.

        Returns:
            dict: Engine keyword arguments
        """
        options: dict[str, Any] = {
            "echo": self.echo_sql,
            "pool_pre_ping": self.pool_pre_ping,
        }
        if self.is_sqlite:
            options["connect_args"] = {"check_same_thread": False}
            if self.is_memory:
                options["poolclass"] = StaticPool
            return options

        options.update(
            pool_size=self.pool_size,
            max_overflow=self.max_overflow,
            pool_timeout=self.pool_timeout,
        )
        return options
