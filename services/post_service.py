"""
Post Service Module

This module handles blog post records stored in Supabase: the published
listing, single-post reads, and author-only create, update, and delete.
"""

from typing import Any, Dict, Optional

from supabase import Client

from config import settings
from data.database import db
from data.models import PagedResult, Result
from services.protocols import CurrentUserProvider
from utils.exceptions import RecordNotFoundError
from utils.helpers import page_range, safe_get
from utils.logger import get_logger

logger = get_logger(__name__)


class PostService:
    """Service for blog post CRUD."""

    def __init__(self, auth: CurrentUserProvider, client: Optional[Client] = None):
        """
        Initialize the post service.

        Args:
            auth: Provider of the signed-in user, used by write operations.
            client: Supabase client to use. Defaults to the shared client.
        """
        self.auth = auth
        self._client = client

    @property
    def client(self) -> Client:
        return self._client or db.client

    def _table(self):
        return self.client.table(settings.POSTS_TABLE)

    def get_published_posts(self, limit: int = settings.DEFAULT_PAGE_LIMIT,
                            page: int = settings.DEFAULT_PAGE) -> PagedResult:
        """
        Fetch one page of published posts, newest first, with their authors.

        Args:
            limit: Posts per page.
            page: 1-based page number.

        Returns:
            PagedResult: The posts and the exact total of published posts, or
            an empty list, a zero total, and the caught error.
        """
        try:
            first, last = page_range(page, limit, settings.MAX_PAGE_LIMIT)

            response = (
                self._table()
                .select(settings.POST_SELECT, count="exact")
                .eq("status", settings.PUBLISHED_STATUS)
                .order(settings.CREATED_AT_COLUMN, desc=True)
                .range(first, last)
                .execute()
            )

            posts = response.data or []
            total = response.count or 0
            logger.debug(f"Fetched {len(posts)} published posts (page {page}, total {total})")
            return PagedResult(data=posts, total=total)

        except Exception as e:
            logger.error(f"Error fetching published posts: {e}")
            return PagedResult(data=[], error=e, total=0)

    def get_post_by_id(self, post_id: Any) -> Result:
        """
        Fetch a single post with its author.

        Returns:
            Result: The post row, or None and the caught error.
        """
        try:
            response = (
                self._table()
                .select(settings.POST_SELECT)
                .eq("id", post_id)
                .single()
                .execute()
            )
            return Result(data=response.data)

        except Exception as e:
            logger.error(f"Error fetching post {post_id}: {e}")
            return Result(error=e)

    def create_post(self, post_data: Dict[str, Any]) -> Result:
        """
        Create a post owned by the signed-in user.

        Args:
            post_data: Column values for the new post (title, content, status, ...).

        Returns:
            Result: The created row, or None and the caught error.
        """
        try:
            user = self.auth.require_user()

            response = (
                self._table()
                .insert({**post_data, settings.POST_AUTHOR_COLUMN: safe_get(user, "id")})
                .execute()
            )

            post = response.data[0] if response.data else None
            logger.info(f"Created post {safe_get(post, 'id')}")
            return Result(data=post)

        except Exception as e:
            logger.error(f"Error creating post: {e}")
            return Result(error=e)

    def update_post(self, post_id: Any, post_data: Dict[str, Any]) -> Result:
        """
        Update a post owned by the signed-in user.

        Returns:
            Result: The updated row, or None and the caught error. A post that
            does not exist or belongs to someone else yields RecordNotFoundError.
        """
        try:
            user = self.auth.require_user()

            response = (
                self._table()
                .update(post_data)
                .eq("id", post_id)
                .eq(settings.POST_AUTHOR_COLUMN, safe_get(user, "id"))
                .execute()
            )

            if not response.data:
                raise RecordNotFoundError(f"No post {post_id} owned by the current user")

            logger.info(f"Updated post {post_id}")
            return Result(data=response.data[0])

        except Exception as e:
            logger.error(f"Error updating post {post_id}: {e}")
            return Result(error=e)

    def delete_post(self, post_id: Any) -> Result:
        """
        Delete a post owned by the signed-in user.

        Returns:
            Result: The deleted rows (empty when the post is not the caller's),
            or None and the caught error.
        """
        try:
            user = self.auth.require_user()

            response = (
                self._table()
                .delete()
                .eq("id", post_id)
                .eq(settings.POST_AUTHOR_COLUMN, safe_get(user, "id"))
                .execute()
            )

            deleted = response.data or []
            logger.info(f"Deleted {len(deleted)} post(s) for id {post_id}")
            return Result(data=deleted)

        except Exception as e:
            logger.error(f"Error deleting post {post_id}: {e}")
            return Result(error=e)
