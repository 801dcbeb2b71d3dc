"""
Google sign-in flow.

The interactive part (account picker, consent) runs in the browser; what
reaches the server is the OAuth callback payload. This flow turns that
payload into a Firebase session or the error the user needs to see.
"""

import logging
from typing import Optional

from common.auth import AuthError, FirebaseAuth, SignInCancelledError
from skillup.schemas.auth import AuthUser, GoogleSignInRequest

logger = logging.getLogger(__name__)

# OAuth / Google Identity Services codes for a flow the user walked away from
CANCELLED_FLOW_ERRORS = {
    "access_denied",
    "popup_closed_by_user",
    "cancelled_popup_request",
}


class GoogleSignInFlow:
    """
    One sign-in attempt, awaited by ``AuthSession.sign_in``.

    Example:
        flow = GoogleSignInFlow(firebase_auth, payload, settings.GOOGLE_SIGNIN_REQUEST_URI)
        notice = await session.sign_in(flow)
    """

    def __init__(
        self,
        firebase_auth: FirebaseAuth,
        payload: GoogleSignInRequest,
        request_uri: str,
    ):
        self._firebase_auth = firebase_auth
        self._payload = payload
        self._request_uri = payload.requestUri or request_uri

    @property
    def request_uri(self) -> str:
        return self._request_uri

    async def __call__(self) -> AuthUser:
        """
        Complete the sign-in.

        Raises:
            SignInCancelledError: If the user closed or declined the flow
            UnauthorizedDomainError: If the request URI is not an authorized domain
            AuthError: For any other failure
        """
        error_code: Optional[str] = self._payload.error
        if error_code:
            if error_code in CANCELLED_FLOW_ERRORS:
                raise SignInCancelledError(f"Sign-in flow ended: {error_code}")
            raise AuthError(f"Google sign-in failed: {error_code}")

        if not self._payload.idToken:
            raise AuthError("Google sign-in returned no credential")

        session = await self._firebase_auth.sign_in_with_idp(
            self._payload.idToken,
            request_uri=self._request_uri,
        )
        logger.info(f"Google sign-in exchanged for user {session['uid']}")

        return AuthUser(
            uid=session["uid"],
            displayName=session.get("displayName"),
            email=session.get("email"),
            photoURL=session.get("photoUrl"),
            idToken=session.get("idToken"),
        )
