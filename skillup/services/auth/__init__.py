"""
Auth services - sign-in flow and per-client session.
"""

from skillup.services.auth.auth_session import AuthSession, AuthState
from skillup.services.auth.google_flow import GoogleSignInFlow, CANCELLED_FLOW_ERRORS

__all__ = [
    "AuthSession",
    "AuthState",
    "GoogleSignInFlow",
    "CANCELLED_FLOW_ERRORS",
]
