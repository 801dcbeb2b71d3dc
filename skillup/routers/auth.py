"""
FastAPI router for Auth endpoints.

Google sign-in and sign-out. The browser runs the interactive Google flow
and posts the callback payload here; the resulting Firebase ID token is
what the client sends as ``Authorization: Bearer <token>`` afterwards.
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Header

from common.auth import AuthError, FirebaseAuth, SignInCancelledError, UnauthorizedDomainError
from common.utils import (
    BadRequestException,
    InternalServerException,
    UnauthorizedException,
    error_response,
    success_response,
)
from skillup.config import settings
from skillup.dependencies import get_firebase_auth, require_auth
from skillup.schemas.auth import AuthUser, GoogleSignInRequest
from skillup.services.auth import AuthSession, GoogleSignInFlow

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/google")
async def google_sign_in(
    body: GoogleSignInRequest,
    firebase_auth: Annotated[FirebaseAuth, Depends(get_firebase_auth)],
):
    """
    Complete a Google sign-in.

    A cancelled flow is not an error for the user: it answers
    ``success: false`` with code SIGN_IN_CANCELLED and nothing to display.
    """
    session = AuthSession(firebase_auth)
    flow = GoogleSignInFlow(firebase_auth, body, settings.GOOGLE_SIGNIN_REQUEST_URI)

    shown = await session.sign_in(flow)

    if session.is_authenticated:
        user = session.user
        return success_response(
            {
                "user": user.model_dump(),
                "idToken": user.idToken,
                "notice": shown.model_dump(),
            },
            message=shown.description,
        )

    error = session.last_error
    if isinstance(error, SignInCancelledError):
        return error_response("", code=error.code)
    if isinstance(error, UnauthorizedDomainError):
        raise BadRequestException(shown.description, code=error.code)
    code = error.code if isinstance(error, AuthError) else "SIGN_IN_FAILED"
    raise UnauthorizedException(shown.description, code=code)


@router.post("/logout")
async def logout(
    user: Annotated[dict, Depends(require_auth)],
    firebase_auth: Annotated[FirebaseAuth, Depends(get_firebase_auth)],
    authorization: Optional[str] = Header(None),
):
    """Sign out by revoking the caller's refresh tokens."""
    token = authorization.split(" ", 1)[1].strip() if authorization else None

    session = AuthSession(firebase_auth)
    session.handle_provider_change(
        AuthUser(uid=user["sub"], email=user.get("email"), idToken=token)
    )

    shown = await session.sign_out()
    if session.is_authenticated:
        raise InternalServerException(shown.description, code="SIGN_OUT_FAILED")

    return success_response(message=shown.description)
