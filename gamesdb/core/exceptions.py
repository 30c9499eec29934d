"""
Exception hierarchy for the games persistence layer.

Two tiers: ConfigurationError for a missing or broken connection,
OperationError for failures of an otherwise valid, connected call.
All exceptions carry a details dict for logging and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the data-access contract
"""

from typing import Any


class GamesDBException(Exception):
    """Base exception for all games persistence errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(GamesDBException):
    """Raised when the connection is not open or cannot be established."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            url: Database URL involved (password already masked)
            details: Additional context
        """
        details = details or {}
        if url:
            details["url"] = url
        super().__init__(message, details)


class OperationError(GamesDBException):
    """Raised when a connected repository call fails."""

    def __init__(
        self,
        message: str,
        kind: str | None = None,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize operation error.

        Args:
            message: Error message
            kind: Entity kind the call targeted
            operation: Operation that failed (insert, update, delete, query...)
            details: Additional context
        """
        details = details or {}
        if kind:
            details["kind"] = kind
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class KeyConflictError(OperationError):
    """Raised when a write collides with an existing key or unique value."""

    def __init__(
        self,
        kind: str,
        key: Any,
        operation: str = "insert",
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details["key"] = key
        super().__init__(f"{kind} with key {key} already exists", kind, operation, details)
        self.key = key


class KeyNotFoundError(OperationError):
    """Raised when an update or delete matched no rows."""

    def __init__(
        self,
        kind: str,
        key: Any,
        operation: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details["key"] = key
        super().__init__(f"{kind} with key {key} not found", kind, operation, details)
        self.key = key


class MalformedTemplateError(OperationError):
    """Raised when an ad hoc query template or row limit is unusable."""

    def __init__(
        self,
        message: str,
        kind: str | None = None,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, kind, "query", details)
