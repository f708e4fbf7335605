"""
Configuration Settings for the Blog Client

This module centralizes all configuration settings for the Blog Client,
including the Supabase project credentials, table names, and query defaults.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Determine the application root directory
APP_ROOT = Path(__file__).resolve().parent.parent

# Load environment variables from .env file
load_dotenv(dotenv_path=os.path.join(APP_ROOT, '.env'))

# =============================================================================
# Supabase Project Settings
# =============================================================================

SUPABASE_URL = os.getenv("SUPABASE_URL", "")
SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY", "")

# =============================================================================
# Table Settings
# =============================================================================

USERS_TABLE = os.getenv("BLOG_USERS_TABLE", "users")
POSTS_TABLE = os.getenv("BLOG_POSTS_TABLE", "posts")
COMMENTS_TABLE = os.getenv("BLOG_COMMENTS_TABLE", "comments")

# Foreign-key columns that tie records to their owner
POST_AUTHOR_COLUMN = "author_id"
COMMENT_AUTHOR_COLUMN = "user_id"
COMMENT_POST_COLUMN = "post_id"

PUBLISHED_STATUS = "published"
CREATED_AT_COLUMN = "created_at"

# Embedded author columns for post and comment reads
POST_SELECT = f"*, {USERS_TABLE} (id, username, avatar_url, bio)"
COMMENT_SELECT = f"*, {USERS_TABLE} (id, username, avatar_url)"

# =============================================================================
# Query Settings
# =============================================================================

DEFAULT_PAGE = 1
DEFAULT_PAGE_LIMIT = int(os.getenv("BLOG_DEFAULT_PAGE_LIMIT", "10"))
MAX_PAGE_LIMIT = 100                 # Largest page size a listing accepts

# =============================================================================
# Logging Settings
# =============================================================================

DEFAULT_LOG_LEVEL = os.getenv("BLOG_LOG_LEVEL", "INFO").upper()
