"""
Core domain layer: exception hierarchy shared by every module.
"""

from gamesdb.core.exceptions import (
    ConfigurationError,
    GamesDBException,
    KeyConflictError,
    KeyNotFoundError,
    MalformedTemplateError,
    OperationError,
)

__all__ = [
    "GamesDBException",
    "ConfigurationError",
    "OperationError",
    "KeyConflictError",
    "KeyNotFoundError",
    "MalformedTemplateError",
]
