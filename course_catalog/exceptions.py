"""Custom exceptions for the course catalog reader.

Exception Hierarchy:
    CatalogError (base)
    ├── DatabaseError
    │   ├── DatabaseConnectionError
    │   └── QueryError
    ├── NotFoundError
    │   ├── AuthorNotFoundError
    │   └── RowNotFoundError
    └── ConfigurationError
        └── MissingConfigError

Any CatalogError raised out of ``CatalogStore.find_all`` carries a
``partial`` attribute with the courses built before the failure.
"""

from typing import Optional


class CatalogError(Exception):
    """Base exception for all catalog reader errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        self.partial: tuple = ()
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Database Errors
# =============================================================================

class DatabaseError(CatalogError):
    """Base class for database-related errors."""
    pass


class DatabaseConnectionError(DatabaseError):
    """Raised when the store cannot be opened."""

    def __init__(self, db_path: str, reason: Optional[str] = None):
        self.db_path = db_path
        message = f"Failed to open catalog store at '{db_path}'"
        if reason:
            message += f": {reason}"
        super().__init__(message, details={'db_path': db_path, 'reason': reason})


class QueryError(DatabaseError):
    """Raised when a query fails to execute or a row cannot be scanned."""

    def __init__(self, query: str, reason: Optional[str] = None):
        self.query = query
        message = "Query failed"
        if reason:
            message += f": {reason}"
        # Collapse whitespace so multi-line SQL stays readable in logs
        super().__init__(message, details={'query': ' '.join(query.split()), 'reason': reason})


# =============================================================================
# Absence Errors
# =============================================================================

class NotFoundError(CatalogError):
    """Base class for a specific, named absence in the store."""
    pass


class AuthorNotFoundError(NotFoundError):
    """Raised when a course has no author association row."""

    def __init__(self, course_pk: int):
        self.course_pk = course_pk
        super().__init__("author not found", details={'course_pk': course_pk})


class RowNotFoundError(NotFoundError):
    """Raised when a query expected to yield a row yields none."""

    def __init__(self, query: str):
        self.query = query
        super().__init__("no row", details={'query': ' '.join(query.split())})


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(CatalogError):
    """Raised when there's a configuration problem."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        self.config_key = config_key
        super().__init__(message, details={'config_key': config_key})


class MissingConfigError(ConfigurationError):
    """Raised when a required configuration value is missing."""

    def __init__(self, config_key: str):
        super().__init__(
            f"Missing required configuration: '{config_key}'",
            config_key=config_key
        )
