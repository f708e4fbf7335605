"""
Configuration Validation for the Blog Client

This module contains configuration validation logic and the configuration
summary used for startup logging.
"""

from utils.exceptions import ConfigurationError
from utils.helpers import is_valid_url


def validate_settings():
    """
    Validate that all required settings are properly configured.

    Raises:
        ConfigurationError: If required settings are missing or invalid.
    """
    # Import settings here to avoid circular imports
    from config import settings

    errors = []

    # Required environment variables
    required_vars = [
        ("SUPABASE_URL", settings.SUPABASE_URL),
        ("SUPABASE_ANON_KEY", settings.SUPABASE_ANON_KEY),
    ]

    for var_name, var_value in required_vars:
        if not var_value:
            errors.append(f"Missing required environment variable: {var_name}")

    if settings.SUPABASE_URL and not is_valid_url(settings.SUPABASE_URL):
        errors.append(f"SUPABASE_URL is not a valid URL: {settings.SUPABASE_URL}")

    # Table names must be present
    for name in ("USERS_TABLE", "POSTS_TABLE", "COMMENTS_TABLE"):
        if not getattr(settings, name):
            errors.append(f"{name} must not be empty")

    if not 1 <= settings.DEFAULT_PAGE_LIMIT <= settings.MAX_PAGE_LIMIT:
        errors.append(f"DEFAULT_PAGE_LIMIT must be between 1 and {settings.MAX_PAGE_LIMIT}, "
                      f"got {settings.DEFAULT_PAGE_LIMIT}")

    # Raise all errors at once
    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ConfigurationError(error_msg)

    return True


def get_config_summary() -> dict:
    """
    Returns a summary of current configuration (without sensitive values).
    Useful for logging startup state.
    """
    # Import settings here to avoid circular imports
    from config import settings

    url = settings.SUPABASE_URL
    return {
        "supabase": {
            "url": url[:30] + "..." if url and len(url) > 30 else url,
            "anon_key_configured": bool(settings.SUPABASE_ANON_KEY),
        },
        "tables": {
            "users": settings.USERS_TABLE,
            "posts": settings.POSTS_TABLE,
            "comments": settings.COMMENTS_TABLE,
        },
        "query_settings": {
            "default_page_limit": settings.DEFAULT_PAGE_LIMIT,
            "max_page_limit": settings.MAX_PAGE_LIMIT,
        },
    }
