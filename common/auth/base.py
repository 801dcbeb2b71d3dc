"""
Abstract authentication provider interface.

Defines the contract that all auth providers must implement.
This allows swapping between different auth strategies without changing
application code.

Example:
    from common.auth import AuthProvider, FirebaseAuth

    def get_auth_provider(settings) -> AuthProvider:
        return FirebaseAuth(settings.FIREBASE_CREDENTIALS_PATH)
"""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any


class AuthError(ValueError):
    """
    Base authentication error.

    Subclasses ValueError so callers that only know the generic provider
    contract ("raises ValueError") keep working.
    """

    code = "AUTH_ERROR"


class SignInCancelledError(AuthError):
    """The user closed or cancelled the interactive sign-in."""

    code = "SIGN_IN_CANCELLED"


class UnauthorizedDomainError(AuthError):
    """The app's domain is not in the provider's authorized domains list."""

    code = "UNAUTHORIZED_DOMAIN"


class TokenExpiredError(AuthError):
    """The ID token has expired or was revoked."""

    code = "TOKEN_EXPIRED"


class AuthProvider(ABC):
    """
    Abstract authentication provider.

    Implement this interface for different auth strategies.
    All methods are async to support both sync and async implementations.
    """

    @abstractmethod
    async def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify an authentication token.

        Args:
            token: The token to verify

        Returns:
            Dictionary containing decoded token claims (at minimum: sub/user_id)

        Raises:
            AuthError: If token is invalid, expired, or revoked
        """
        pass

    @abstractmethod
    async def revoke_token(self, token: str) -> None:
        """
        Revoke/invalidate a token.

        Args:
            token: The token to revoke
        """
        pass

    @abstractmethod
    async def get_user_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        """
        Get user information by ID.

        Args:
            user_id: The user's ID

        Returns:
            User info dict or None if not found
        """
        pass
