"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, gamesdb.configs
System role: Database schema initialization

Usage:
    python -m gamesdb.boundary.db.create_tables
"""

from gamesdb.boundary.db.base import Base
from gamesdb.boundary.db.connection import GamesDatabase
from gamesdb.configs import DatabaseSettings, get_settings
from gamesdb.observability.logger import configure_logging, get_logger

logger = get_logger(__name__)


def create_all_tables(settings: DatabaseSettings | None = None) -> list[str]:
    """
    Create all database tables from registered ORM models.

    Idempotent: existing tables remain unchanged.

    Args:
        settings: Database settings; environment-backed when omitted

    Returns:
        list[str]: Names of the registered tables

    Raises:
        ConfigurationError: If the database cannot be reached
    """
    with GamesDatabase(settings) as db:
        Base.metadata.create_all(bind=db.engine())
    tables = sorted(Base.metadata.tables)
    logger.info("Tables ready: %s", ", ".join(tables))
    return tables


def drop_all_tables(settings: DatabaseSettings | None = None) -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.

    Args:
        settings: Database settings; environment-backed when omitted
    """
    with GamesDatabase(settings) as db:
        db.drop_all()


if __name__ == "__main__":
    configure_logging(get_settings().effective_log_level)
    create_all_tables()
