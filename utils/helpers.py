"""
Helper Utility Module

This module provides various helper functions used throughout the Blog Client.
"""

from typing import Any, Optional, Tuple
from urllib.parse import urlparse

from utils.exceptions import InvalidPaginationError


def is_valid_url(url: str) -> bool:
    """
    Check if a URL is valid.

    Args:
        url: The URL to validate

    Returns:
        bool: True if the URL is valid, False otherwise
    """
    try:
        result = urlparse(url)
        return all([result.scheme, result.netloc])
    except Exception:
        return False


def page_range(page: int, limit: int, max_limit: Optional[int] = None) -> Tuple[int, int]:
    """
    Convert a 1-based page number and page size into an inclusive row range.

    Args:
        page: The page number, starting at 1
        limit: Rows per page
        max_limit: Largest accepted limit, or None for no cap

    Returns:
        Tuple: (first_row, last_row), both inclusive and 0-based

    Raises:
        InvalidPaginationError: If page or limit is not a positive integer,
            or limit exceeds max_limit
    """
    if isinstance(page, bool) or not isinstance(page, int) or page < 1:
        raise InvalidPaginationError(f"page must be a positive integer, got {page!r}")
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise InvalidPaginationError(f"limit must be a positive integer, got {limit!r}")
    if max_limit is not None and limit > max_limit:
        raise InvalidPaginationError(f"limit must be at most {max_limit}, got {limit}")

    first = (page - 1) * limit
    return first, first + limit - 1


def safe_get(data: Any, *keys, default: Any = None) -> Any:
    """
    Safely get a value from a nested dictionary or object.

    Args:
        data: The dictionary (or object with attributes) to search
        *keys: The keys to follow
        default: Default value if key doesn't exist

    Returns:
        The value at the specified keys or the default value
    """
    for key in keys:
        if data is None:
            return default
        if isinstance(data, dict):
            if key not in data:
                return default
            data = data[key]
        elif hasattr(data, key):
            data = getattr(data, key)
        else:
            return default
    return data
