"""
Database Module for the Blog Client

This module manages the single Supabase client shared by every service.
The client is created lazily from settings the first time it is needed.
"""

import threading
from typing import Optional

from supabase import Client, create_client

from config import settings
from utils.exceptions import ConnectionError as DatabaseConnectionError
from utils.logger import get_logger

logger = get_logger(__name__)


class SupabaseConnection:
    """Holder for the shared Supabase client."""

    def __init__(self, url: Optional[str] = None, key: Optional[str] = None):
        """
        Initialize the connection holder.

        Args:
            url: Supabase project URL. Defaults to settings.SUPABASE_URL.
            key: Supabase anon key. Defaults to settings.SUPABASE_ANON_KEY.
        """
        self.url = url
        self.key = key
        self.conn: Optional[Client] = None
        self._lock = threading.Lock()

    def connect(self) -> bool:
        """
        Create the Supabase client.

        Returns:
            bool: True if the client was created, False otherwise.
        """
        url = self.url or settings.SUPABASE_URL
        key = self.key or settings.SUPABASE_ANON_KEY

        if not url or not key:
            logger.error("Missing Supabase credentials (SUPABASE_URL / SUPABASE_ANON_KEY)")
            return False

        try:
            self.conn = create_client(url, key)
            logger.info("Supabase client created")
            return True
        except Exception as e:
            logger.error(f"Failed to create Supabase client: {e}")
            self.conn = None
            return False

    @property
    def client(self) -> Client:
        """
        Return the shared client, creating it on first use.

        Raises:
            ConnectionError: If the client cannot be created.
        """
        conn = self.conn
        if not conn:
            with self._lock:
                # Another thread may have connected while we waited
                if not self.conn and not self.connect():
                    raise DatabaseConnectionError("Supabase client is not available")
                conn = self.conn
        return conn

    def close(self) -> None:
        """Drop the shared client so the next access creates a fresh one."""
        with self._lock:
            if self.conn:
                self.conn = None
                logger.info("Supabase client released")


# Create a default connection instance for use throughout the application
db = SupabaseConnection()
