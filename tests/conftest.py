"""
Shared Test Fixtures for the Blog Client

This module provides common fixtures used across all test modules.
Fixtures include a chainable mock of the Supabase query builder, a mock
Supabase client, signed-in and signed-out auth providers, log capture, and
data factories for test records.
"""

import pytest
from unittest.mock import MagicMock
from typing import Any, Dict, List, Optional
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from utils.exceptions import NotAuthenticatedError


# Query builder methods that return the builder itself in postgrest-py
CHAIN_METHODS = ("select", "insert", "update", "delete", "eq", "order", "range", "single", "limit")


# =============================================================================
# Supabase Client Fixtures
# =============================================================================

@pytest.fixture
def api_response():
    """
    Factory fixture for creating mock PostgREST API responses.

    Usage:
        def test_query(api_response):
            response = api_response(data=[{'id': 1}], count=1)

    Returns:
        callable: A factory function for creating mock responses.
    """
    def _create_response(data: Any = None, count: Optional[int] = None) -> MagicMock:
        response = MagicMock()
        response.data = data
        response.count = count
        return response

    return _create_response


@pytest.fixture
def query_builder(api_response):
    """
    Mock PostgREST query builder.

    Every filter/modifier call returns the same builder so chained calls can
    be asserted on one object; execute() returns an empty response unless the
    test overrides it.

    Usage:
        def test_query(query_builder, api_response):
            query_builder.execute.return_value = api_response(data=[...])
            ...
            query_builder.eq.assert_any_call("id", 1)
    """
    builder = MagicMock()
    for name in CHAIN_METHODS:
        getattr(builder, name).return_value = builder
    builder.execute.return_value = api_response(data=[], count=0)
    return builder


@pytest.fixture
def mock_supabase_client(query_builder):
    """
    Mock supabase.Client whose table() calls all return query_builder.

    Returns:
        MagicMock: The mock client. Auth calls live under mock.auth.
    """
    client = MagicMock()
    client.table.return_value = query_builder
    return client


# =============================================================================
# Auth Fixtures
# =============================================================================

@pytest.fixture
def user_factory():
    """Factory fixture for creating mock Supabase user objects."""
    def _create_user(user_id: str = "user-1", email: str = "reader@example.com",
                     username: str = "reader") -> MagicMock:
        user = MagicMock()
        user.id = user_id
        user.email = email
        user.user_metadata = {"username": username}
        return user

    return _create_user


@pytest.fixture
def signed_in_auth(user_factory):
    """Current-user provider with a signed-in user (id "user-1")."""
    user = user_factory()
    auth = MagicMock()
    auth.get_current_user.return_value = user
    auth.require_user.return_value = user
    auth.user = user
    return auth


@pytest.fixture
def signed_out_auth():
    """Current-user provider with no session."""
    auth = MagicMock()
    auth.get_current_user.return_value = None
    auth.require_user.side_effect = NotAuthenticatedError()
    return auth


# =============================================================================
# Logging Fixtures
# =============================================================================

@pytest.fixture
def capture_logs():
    """
    Capture log messages for assertion in tests.

    Returns:
        list: A list that will contain captured log records.
    """
    import logging

    class LogCapture(logging.Handler):
        def __init__(self):
            super().__init__()
            self.records = []

        def emit(self, record):
            self.records.append(record)

    handler = LogCapture()
    handler.setLevel(logging.DEBUG)

    root_logger = logging.getLogger()
    original_level = root_logger.level
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(handler)

    yield handler.records

    root_logger.removeHandler(handler)
    root_logger.setLevel(original_level)


# =============================================================================
# Data Model Factories
# =============================================================================

@pytest.fixture
def post_factory():
    """
    Factory fixture for creating post rows as Supabase returns them.

    Usage:
        def test_posts(post_factory):
            post = post_factory(post_id=3, status='draft')
    """
    def _create_post(post_id: int = 1, title: str = "Hello", status: str = "published",
                     author_id: str = "user-1",
                     created_at: str = "2024-01-15T10:00:00+00:00") -> Dict[str, Any]:
        return {
            "id": post_id,
            "title": title,
            "content": f"Body of {title}",
            "status": status,
            "author_id": author_id,
            "created_at": created_at,
            "users": {"id": author_id, "username": "reader", "avatar_url": None, "bio": None},
        }

    return _create_post


@pytest.fixture
def comment_factory():
    """Factory fixture for creating comment rows."""
    def _create_comment(comment_id: int = 1, post_id: int = 1, user_id: str = "user-1",
                        content: str = "Nice post") -> Dict[str, Any]:
        return {
            "id": comment_id,
            "post_id": post_id,
            "user_id": user_id,
            "content": content,
            "created_at": "2024-01-15T11:00:00+00:00",
            "users": {"id": user_id, "username": "reader", "avatar_url": None},
        }

    return _create_comment


@pytest.fixture
def sample_posts(post_factory) -> List[Dict[str, Any]]:
    """Three published posts, newest first."""
    return [
        post_factory(post_id=3, title="Third", created_at="2024-01-17T10:00:00+00:00"),
        post_factory(post_id=2, title="Second", created_at="2024-01-16T10:00:00+00:00"),
        post_factory(post_id=1, title="First", created_at="2024-01-15T10:00:00+00:00"),
    ]
