"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the package
"""

from functools import lru_cache

from gamesdb.configs.base import BaseSettings
from gamesdb.configs.database import DatabaseSettings


class Settings(BaseSettings):
    """Unified settings aggregating all config modules."""

    database: DatabaseSettings = DatabaseSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get settings singleton.

    Environment variables are loaded once, on first call.

    Returns:
        Settings: Settings instance

    Usage:
        from gamesdb.configs import get_settings
        settings = get_settings()
    """
    return Settings()
