"""
Service Protocol Definitions

This module defines typing.Protocol interfaces for services used by the
Blog Client. Write services depend on the protocol rather than on AuthService
so tests can inject a stand-in for the signed-in user.

Protocols defined:
- CurrentUserProvider: Interface for resolving the signed-in user
"""

from typing import Any, Optional, Protocol


class CurrentUserProvider(Protocol):
    """Protocol defining how write services find the signed-in user.

    Implementations should provide methods for:
    - Looking up the current user, returning None when signed out
    - Looking up the current user, raising NotAuthenticatedError when signed out
    """

    def get_current_user(self) -> Optional[Any]:
        """Return the signed-in user, or None if there is no session."""
        ...

    def require_user(self) -> Any:
        """Return the signed-in user.

        Raises:
            NotAuthenticatedError: If there is no session.
        """
        ...
