"""
Auth session.

Holds who is signed in for one client and tells subscribers when that
changes. Sessions are created per client and passed to the views that need
them; there is no module-level current user.
"""

import logging
from enum import Enum
from typing import Awaitable, Callable, List, Optional

from common.auth import AuthError, AuthProvider, SignInCancelledError, UnauthorizedDomainError
from skillup.schemas import notice
from skillup.schemas.auth import AuthUser
from skillup.schemas.notice import Notice

logger = logging.getLogger(__name__)

AuthListener = Callable[[Optional[AuthUser]], None]
SignInFlow = Callable[[], Awaitable[AuthUser]]

UNAUTHORIZED_DOMAIN_DESCRIPTION = (
    "This app's domain is not authorized. Please add it to your Firebase "
    "project's authorized domains list in the Authentication settings."
)


class AuthState(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"


class AuthSession:
    """
    Two-state sign-in state machine.

    Every transition goes through ``handle_provider_change``, so changes
    pushed by the provider (expiry, revocation) and changes made by
    ``sign_in``/``sign_out`` reach subscribers the same way.

    ``last_error`` keeps the exception behind the most recent failed
    sign-in or sign-out, for callers that need more than the notice.
    """

    def __init__(self, auth_provider: Optional[AuthProvider] = None):
        """
        Initialize AuthSession.

        Args:
            auth_provider: Used to revoke on sign-out and re-verify on refresh
        """
        self._auth_provider = auth_provider
        self._user: Optional[AuthUser] = None
        self.last_error: Optional[Exception] = None
        self._listeners: List[AuthListener] = []

    @property
    def user(self) -> Optional[AuthUser]:
        return self._user

    @property
    def state(self) -> AuthState:
        return AuthState.AUTHENTICATED if self._user else AuthState.UNAUTHENTICATED

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    def subscribe(self, listener: AuthListener) -> Callable[[], None]:
        """
        Register a listener for user changes.

        Returns:
            A callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def handle_provider_change(self, user: Optional[AuthUser]) -> None:
        """Apply a user change and notify every listener."""
        self._user = user
        logger.debug(f"Auth state is now {self.state.value}")
        for listener in list(self._listeners):
            listener(user)

    async def sign_in(self, flow: SignInFlow) -> Optional[Notice]:
        """
        Run an interactive sign-in flow.

        Returns:
            The notice to show, or None when the user cancelled
        """
        self.last_error = None
        try:
            user = await flow()
        except SignInCancelledError as e:
            self.last_error = e
            logger.info("Sign-in closed or cancelled by user")
            return None
        except UnauthorizedDomainError as e:
            self.last_error = e
            logger.error(f"Sign-in rejected, domain not authorized: {e}")
            return notice.error("Configuration Error", UNAUTHORIZED_DOMAIN_DESCRIPTION, duration=9000)
        except Exception as e:
            self.last_error = e
            logger.error(f"Error signing in with Google: {e}")
            return notice.error(
                "Sign-in Error",
                "Could not sign in with Google. Check the console for more info.",
            )

        self.handle_provider_change(user)
        return notice.info("Signed In", "Welcome back!")

    async def sign_out(self) -> Notice:
        """Revoke the session with the provider and clear the user."""
        self.last_error = None
        user = self._user
        if user and user.idToken and self._auth_provider:
            try:
                await self._auth_provider.revoke_token(user.idToken)
            except AuthError as e:
                self.last_error = e
                logger.error(f"Error signing out: {e}")
                return notice.error("Sign-out Error", "Could not sign out.")

        self.handle_provider_change(None)
        return notice.info("Signed Out", "You have been signed out.")

    async def refresh(self, auth_provider: Optional[AuthProvider] = None) -> Optional[AuthUser]:
        """
        Re-verify the signed-in user's token.

        An expired, revoked or invalid token signs the session out.

        Returns:
            The user still signed in, or None
        """
        provider = auth_provider or self._auth_provider
        user = self._user
        if user is None or provider is None or not user.idToken:
            return user

        try:
            await provider.verify_token(user.idToken)
        except AuthError as e:
            logger.info(f"Session for user {user.uid} ended: {e}")
            self.handle_provider_change(None)
            return None

        return user
