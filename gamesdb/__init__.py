"""
gamesdb - persistence layer for a games catalog and price-tracking service.

Stores external catalog records (BoardGameGeek, CoolStuffInc, Miniature
Market), canonical games, users, collections, wishlists, media,
playthroughs and per-source statistics behind one uniform CRUD contract.
"""

__version__ = "0.1.0"

from gamesdb.boundary.db import EntityKind, GamesDatabase
from gamesdb.configs import DatabaseSettings
from gamesdb.core.exceptions import (
    ConfigurationError,
    GamesDBException,
    KeyConflictError,
    KeyNotFoundError,
    MalformedTemplateError,
    OperationError,
)

__all__ = [
    "GamesDatabase",
    "EntityKind",
    "DatabaseSettings",
    "GamesDBException",
    "ConfigurationError",
    "OperationError",
    "KeyConflictError",
    "KeyNotFoundError",
    "MalformedTemplateError",
]
