"""
Pydantic models for sign-in request/response validation.
"""

from typing import Optional

from pydantic import BaseModel, Field


class GoogleSignInRequest(BaseModel):
    """
    POST /api/auth/google

    The OAuth callback payload of the interactive Google flow: either a
    credential (``idToken``) or the error the flow ended with.
    """
    idToken: Optional[str] = None
    error: Optional[str] = None
    requestUri: Optional[str] = None


class AuthUser(BaseModel):
    """Identity of a signed-in user."""
    uid: str
    displayName: Optional[str] = None
    email: Optional[str] = None
    photoURL: Optional[str] = None
    idToken: Optional[str] = Field(default=None, exclude=True)
