"""
Authentication module - Pluggable auth providers (Firebase).
"""

from common.auth.base import (
    AuthProvider,
    AuthError,
    SignInCancelledError,
    UnauthorizedDomainError,
    TokenExpiredError,
)
from common.auth.firebase_auth import FirebaseAuth
from common.auth.dependencies import create_auth_dependency, create_optional_auth_dependency

__all__ = [
    "AuthProvider",
    "AuthError",
    "SignInCancelledError",
    "UnauthorizedDomainError",
    "TokenExpiredError",
    "FirebaseAuth",
    "create_auth_dependency",
    "create_optional_auth_dependency",
]
