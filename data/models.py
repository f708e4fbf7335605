"""
Data Models for the Blog Client

This module contains the result types every facade operation returns.
Records themselves are the plain dictionaries Supabase hands back.
"""

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass
class Result:
    """Uniform result pair: a payload on success, the caught error on failure."""
    data: Any = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __iter__(self) -> Iterator[Any]:
        # Allows ``data, error = service.get_post_by_id(...)``
        yield self.data
        yield self.error


@dataclass
class PagedResult(Result):
    """Result of a paginated listing, with the exact remote row count."""
    total: int = 0
