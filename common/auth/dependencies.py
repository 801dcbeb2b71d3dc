"""
FastAPI authentication dependencies.

Provides factory functions to create auth dependencies that can be
injected into route handlers. Works with any AuthProvider implementation.

Example:
    from common.auth import FirebaseAuth, create_auth_dependency

    auth = FirebaseAuth(credentials_path="serviceAccount.json")
    get_current_user = create_auth_dependency(lambda: auth)

    @app.get("/profile")
    async def get_profile(user: dict = Depends(get_current_user)):
        return {"user_id": user["sub"]}
"""

from typing import Any, Callable, Dict, Optional

from fastapi import Header

from common.auth.base import AuthProvider, AuthError
from common.utils.exceptions import UnauthorizedException


def _split_bearer(authorization: Optional[str], scheme: str) -> Optional[str]:
    """Return the token part of an ``<scheme> <token>`` header, or None."""
    if not authorization:
        return None

    prefix = f"{scheme} "
    if not authorization.startswith(prefix):
        return None

    token = authorization[len(prefix):].strip()
    return token or None


def create_auth_dependency(
    get_auth_provider: Callable[[], AuthProvider],
    header_name: str = "Authorization",
    scheme: str = "Bearer",
):
    """
    Factory to create FastAPI auth dependencies.

    Args:
        get_auth_provider: Callable that returns the AuthProvider instance
        header_name: Header to extract token from (default: Authorization)
        scheme: Auth scheme prefix (default: Bearer)

    Returns:
        A FastAPI dependency function that verifies the token and returns
        its claims (``sub`` is always the user ID)
    """

    async def get_current_user(
        authorization: Optional[str] = Header(None, alias=header_name),
    ) -> Dict[str, Any]:
        """
        Extract and verify the caller from the authorization header.

        Raises:
            UnauthorizedException: If token is missing, invalid, or expired
        """
        if not authorization:
            raise UnauthorizedException("Missing authorization header")

        token = _split_bearer(authorization, scheme)
        if not token:
            raise UnauthorizedException(
                f"Invalid authorization scheme. Expected: {scheme}",
                code="INVALID_AUTH_SCHEME",
            )

        auth = get_auth_provider()
        try:
            claims = await auth.verify_token(token)
        except AuthError as e:
            raise UnauthorizedException(str(e), code=e.code)

        user_id = claims.get("sub") or claims.get("uid")
        if not user_id:
            raise UnauthorizedException("Token missing user ID", code="INVALID_TOKEN")

        claims["sub"] = user_id
        return claims

    return get_current_user


def create_optional_auth_dependency(
    get_auth_provider: Callable[[], AuthProvider],
    header_name: str = "Authorization",
    scheme: str = "Bearer",
):
    """
    Factory to create optional auth dependency.

    Unlike create_auth_dependency, this returns None instead of raising
    an exception when no valid token is provided. Useful for endpoints that
    work for both authenticated and anonymous users.

    Returns:
        A FastAPI dependency that returns the claims dict or None
    """

    async def get_optional_user(
        authorization: Optional[str] = Header(None, alias=header_name),
    ) -> Optional[Dict[str, Any]]:
        token = _split_bearer(authorization, scheme)
        if not token:
            return None

        auth = get_auth_provider()
        try:
            claims = await auth.verify_token(token)
        except AuthError:
            return None

        user_id = claims.get("sub") or claims.get("uid")
        if not user_id:
            return None
        claims["sub"] = user_id
        return claims

    return get_optional_user
