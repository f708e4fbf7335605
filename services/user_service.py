"""
User Service Module

This module reads and updates user profile rows.
"""

from typing import Any, Dict, Optional

from supabase import Client

from config import settings
from data.database import db
from data.models import Result
from services.protocols import CurrentUserProvider
from utils.exceptions import RecordNotFoundError
from utils.logger import get_logger

logger = get_logger(__name__)


class UserService:
    """Service for user profiles."""

    def __init__(self, auth: CurrentUserProvider, client: Optional[Client] = None):
        self.auth = auth
        self._client = client

    @property
    def client(self) -> Client:
        return self._client or db.client

    def get_profile(self, user_id: Any) -> Result:
        """
        Fetch a user's profile row.

        Returns:
            Result: The profile, or None and the caught error.
        """
        try:
            response = (
                self.client.table(settings.USERS_TABLE)
                .select("*")
                .eq("id", user_id)
                .single()
                .execute()
            )
            return Result(data=response.data)

        except Exception as e:
            logger.error(f"Error fetching profile {user_id}: {e}")
            return Result(error=e)

    def update_profile(self, user_id: Any, profile_data: Dict[str, Any]) -> Result:
        """
        Update a user's profile (username, avatar_url, bio, ...).

        Row-level security on the users table decides whose profile the
        session may change; a session is still required locally.

        Returns:
            Result: The updated profile, or None and the caught error.
        """
        try:
            self.auth.require_user()

            response = (
                self.client.table(settings.USERS_TABLE)
                .update(profile_data)
                .eq("id", user_id)
                .execute()
            )

            if not response.data:
                raise RecordNotFoundError(f"No profile updated for user {user_id}")

            logger.info(f"Updated profile {user_id}")
            return Result(data=response.data[0])

        except Exception as e:
            logger.error(f"Error updating profile {user_id}: {e}")
            return Result(error=e)
