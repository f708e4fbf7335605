"""
Auth Service Module

This module wraps Supabase authentication: sign-up, sign-in, sign-out,
current-user lookup, and auth-state subscriptions.
"""

from typing import Any, Callable, Optional

from supabase import Client

from data.database import db
from data.models import Result
from utils.exceptions import NotAuthenticatedError
from utils.logger import get_logger

logger = get_logger(__name__)


class AuthService:
    """Service for Supabase authentication."""

    def __init__(self, client: Optional[Client] = None):
        """
        Initialize the auth service.

        Args:
            client: Supabase client to use. Defaults to the shared client.
        """
        self._client = client

    @property
    def client(self) -> Client:
        return self._client or db.client

    def sign_up(self, email: str, password: str, username: str) -> Result:
        """
        Register a new account. The username is stored as user metadata.

        Args:
            email: Account email address.
            password: Account password.
            username: Display name for the new user.

        Returns:
            Result: The auth response (user and session) or the caught error.
        """
        try:
            response = self.client.auth.sign_up({
                "email": email,
                "password": password,
                "options": {
                    "data": {"username": username}
                }
            })
            logger.info("Signed up new account")
            return Result(data=response)
        except Exception as e:
            logger.error(f"Sign-up failed: {e}")
            return Result(error=e)

    def sign_in(self, email: str, password: str) -> Result:
        """
        Sign in with email and password.

        Returns:
            Result: The auth response (user and session) or the caught error.
        """
        try:
            response = self.client.auth.sign_in_with_password({
                "email": email,
                "password": password
            })
            logger.info("Signed in")
            return Result(data=response)
        except Exception as e:
            logger.error(f"Sign-in failed: {e}")
            return Result(error=e)

    def sign_out(self) -> Result:
        """Sign out of the current session."""
        try:
            self.client.auth.sign_out()
            logger.info("Signed out")
            return Result()
        except Exception as e:
            logger.error(f"Sign-out failed: {e}")
            return Result(error=e)

    def get_current_user(self) -> Optional[Any]:
        """
        Look up the signed-in user.

        Returns:
            The user object, or None if there is no session or the lookup failed.
        """
        try:
            response = self.client.auth.get_user()
            if not response:
                return None
            return response.user
        except Exception as e:
            logger.error(f"Failed to get current user: {e}")
            return None

    def require_user(self) -> Any:
        """
        Return the signed-in user.

        Raises:
            NotAuthenticatedError: If there is no signed-in user.
        """
        user = self.get_current_user()
        if not user:
            raise NotAuthenticatedError()
        return user

    def on_auth_state_change(self, callback: Callable[[str, Any], None]) -> Any:
        """
        Subscribe to auth state changes (sign-in, sign-out, token refresh).

        Args:
            callback: Called with (event, session) on every change.

        Returns:
            The subscription handle; call its unsubscribe() to stop listening.
        """
        return self.client.auth.on_auth_state_change(callback)
