"""
Custom Exception Classes for the Blog Client

This module defines custom exceptions for the conditions the facade detects
locally. Failures reported by Supabase itself are returned as-is in the
result pair and are not wrapped.
"""


class BlogClientError(Exception):
    """Base exception for all Blog Client errors."""
    pass


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(BlogClientError):
    """Raised when configuration validation fails or required settings are missing."""
    pass


# =============================================================================
# Authentication Errors
# =============================================================================

class AuthenticationError(BlogClientError):
    """Base exception for authentication-related errors."""
    pass


class NotAuthenticatedError(AuthenticationError):
    """Raised when a write operation is attempted without a signed-in user."""

    def __init__(self, message: str = "You must sign in first"):
        super().__init__(message)


# =============================================================================
# Query Errors
# =============================================================================

class QueryError(BlogClientError):
    """Base exception for errors detected while building or reading a query."""
    pass


class InvalidPaginationError(QueryError):
    """Raised when page or limit is not a positive integer."""
    pass


class RecordNotFoundError(QueryError):
    """Raised when a query that should affect one row matched none."""
    pass


# =============================================================================
# Database Errors
# =============================================================================

class DatabaseError(BlogClientError):
    """Base exception for backend connection errors."""
    pass


class ConnectionError(DatabaseError):
    """Raised when the Supabase client cannot be created."""
    pass
