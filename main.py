"""
Blog Client Application

This is the main entry point for the Blog Client. It wires the auth, post,
comment, and user services around one shared Supabase client and offers a
small read-only command line for inspecting blog data.
"""

import sys
import json
import argparse
import logging
from typing import Optional

from supabase import Client

from config import settings
from config.validators import validate_settings, get_config_summary
from utils.logger import get_logger, setup_file_logging
from utils.exceptions import BlogClientError, ConfigurationError
from data.database import db
from data.models import Result, PagedResult
from services.auth_service import AuthService
from services.post_service import PostService
from services.comment_service import CommentService
from services.user_service import UserService

# Set up logging
logger = get_logger(__name__)


class BlogClient:
    """
    Facade over the blog's Supabase backend.

    Groups the four services so callers hold one object:
    ``client.auth``, ``client.posts``, ``client.comments``, ``client.users``.
    """

    def __init__(
        self,
        client: Optional[Client] = None,
        auth_service: Optional[AuthService] = None,
        post_service: Optional[PostService] = None,
        comment_service: Optional[CommentService] = None,
        user_service: Optional[UserService] = None,
    ):
        """
        Initialize the Blog Client.

        Args:
            client: Supabase client shared by the default services.
                Defaults to the module-level shared client.
            auth_service: Optional AuthService instance (for dependency injection).
            post_service: Optional PostService instance.
            comment_service: Optional CommentService instance.
            user_service: Optional UserService instance.
        """
        self.auth = auth_service or AuthService(client)
        self.posts = post_service or PostService(self.auth, client)
        self.comments = comment_service or CommentService(self.auth, client)
        self.users = user_service or UserService(self.auth, client)


def create_blog_client(client: Optional[Client] = None, validate: bool = True) -> BlogClient:
    """
    Build a BlogClient, validating settings first.

    Args:
        client: Supabase client to use. Defaults to the shared client.
        validate: Whether to run validate_settings() before building.

    Raises:
        ConfigurationError: If validation is requested and fails.
    """
    if validate:
        validate_settings()
        logger.debug(f"Configuration: {get_config_summary()}")
    return BlogClient(client=client or db.client)


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Blog Client')
    parser.add_argument('--log-file', type=str, default=None, help='Log file path')
    parser.add_argument('--log-level', type=str, choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        default=settings.DEFAULT_LOG_LEVEL, help='Logging level')

    subparsers = parser.add_subparsers(dest='command', required=True)

    posts_parser = subparsers.add_parser('posts', help='List published posts')
    posts_parser.add_argument('--page', type=int, default=settings.DEFAULT_PAGE, help='Page number (1-based)')
    posts_parser.add_argument('--limit', type=int, default=settings.DEFAULT_PAGE_LIMIT, help='Posts per page')

    post_parser = subparsers.add_parser('post', help='Show a single post')
    post_parser.add_argument('post_id', help='Post ID')

    comments_parser = subparsers.add_parser('comments', help="List a post's comments")
    comments_parser.add_argument('post_id', help='Post ID')

    profile_parser = subparsers.add_parser('profile', help='Show a user profile')
    profile_parser.add_argument('user_id', help='User ID')

    return parser.parse_args(argv)


def run_command(blog: BlogClient, args) -> Result:
    """Dispatch a parsed CLI command to the matching service call."""
    if args.command == 'posts':
        return blog.posts.get_published_posts(limit=args.limit, page=args.page)
    if args.command == 'post':
        return blog.posts.get_post_by_id(args.post_id)
    if args.command == 'comments':
        return blog.comments.get_comments_by_post_id(args.post_id)
    if args.command == 'profile':
        return blog.users.get_profile(args.user_id)
    raise BlogClientError(f"Unknown command: {args.command}")


def format_result(result: Result) -> str:
    """Render a successful result as JSON."""
    payload = {"data": result.data}
    if isinstance(result, PagedResult):
        payload["total"] = result.total
    return json.dumps(payload, indent=2, default=str, ensure_ascii=False)


def main(argv=None):
    """Main entry point for the application."""
    # Parse command line arguments
    args = parse_arguments(argv)

    # Set up logging
    log_level = getattr(logging, args.log_level)
    if args.log_file:
        try:
            setup_file_logging(args.log_file, log_level)
        except OSError as e:
            logger.error(f"Cannot open log file {args.log_file}: {e}")
            return 2
    else:
        get_logger().setLevel(log_level)

    logger.debug(f"Running command: {args.command}")

    try:
        blog = create_blog_client()
        result = run_command(blog, args)

        if result.ok:
            print(format_result(result))
            exit_code = 0
        else:
            logger.warning(f"Command '{args.command}' failed: {result.error}")
            exit_code = 1

    except ConfigurationError as e:
        logger.error(str(e))
        exit_code = 2
    except Exception as e:
        logger.error(f"Unhandled exception in Blog Client: {e}", exc_info=True)
        exit_code = 2

    logger.debug(f"Blog Client finished with exit code {exit_code}")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
