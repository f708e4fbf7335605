"""
Comment Service Module

This module handles comments on blog posts: listing a post's comments and
author-only create and delete.
"""

from typing import Any, Dict, Optional

from supabase import Client

from config import settings
from data.database import db
from data.models import Result
from services.protocols import CurrentUserProvider
from utils.helpers import safe_get
from utils.logger import get_logger

logger = get_logger(__name__)


class CommentService:
    """Service for post comments."""

    def __init__(self, auth: CurrentUserProvider, client: Optional[Client] = None):
        self.auth = auth
        self._client = client

    @property
    def client(self) -> Client:
        return self._client or db.client

    def _table(self):
        return self.client.table(settings.COMMENTS_TABLE)

    def get_comments_by_post_id(self, post_id: Any) -> Result:
        """
        Fetch a post's comments, oldest first, with their authors.

        Returns:
            Result: The comment rows, or an empty list and the caught error.
        """
        try:
            response = (
                self._table()
                .select(settings.COMMENT_SELECT)
                .eq(settings.COMMENT_POST_COLUMN, post_id)
                .order(settings.CREATED_AT_COLUMN, desc=False)
                .execute()
            )
            return Result(data=response.data or [])

        except Exception as e:
            logger.error(f"Error fetching comments for post {post_id}: {e}")
            return Result(data=[], error=e)

    def create_comment(self, comment_data: Dict[str, Any]) -> Result:
        """
        Create a comment owned by the signed-in user.

        Args:
            comment_data: Column values for the comment (post_id, content, ...).

        Returns:
            Result: The created row, or None and the caught error.
        """
        try:
            user = self.auth.require_user()

            response = (
                self._table()
                .insert({**comment_data, settings.COMMENT_AUTHOR_COLUMN: safe_get(user, "id")})
                .execute()
            )

            comment = response.data[0] if response.data else None
            logger.info(f"Created comment on post {comment_data.get(settings.COMMENT_POST_COLUMN)}")
            return Result(data=comment)

        except Exception as e:
            logger.error(f"Error creating comment: {e}")
            return Result(error=e)

    def delete_comment(self, comment_id: Any) -> Result:
        """
        Delete a comment written by the signed-in user.

        Returns:
            Result: The deleted rows (empty when the comment is not the
            caller's), or None and the caught error.
        """
        try:
            user = self.auth.require_user()

            response = (
                self._table()
                .delete()
                .eq("id", comment_id)
                .eq(settings.COMMENT_AUTHOR_COLUMN, safe_get(user, "id"))
                .execute()
            )

            deleted = response.data or []
            logger.info(f"Deleted {len(deleted)} comment(s) for id {comment_id}")
            return Result(data=deleted)

        except Exception as e:
            logger.error(f"Error deleting comment {comment_id}: {e}")
            return Result(error=e)
