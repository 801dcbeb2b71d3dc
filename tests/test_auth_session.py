"""Unit tests for AuthSession (sign-in state machine)."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from common.auth import AuthError, SignInCancelledError, TokenExpiredError, UnauthorizedDomainError
from skillup.services.auth import AuthSession, AuthState


@pytest.fixture
def mock_provider():
    provider = MagicMock()
    provider.revoke_token = AsyncMock()
    provider.verify_token = AsyncMock(return_value={"uid": "firebase-uid-123", "sub": "firebase-uid-123"})
    return provider


@pytest.fixture
def session(mock_provider):
    return AuthSession(mock_provider)


def flow_returning(user):
    return AsyncMock(return_value=user)


def flow_raising(exc):
    return AsyncMock(side_effect=exc)


class TestSignIn:
    @pytest.mark.asyncio
    async def test_success_authenticates_and_notifies(self, session, auth_user):
        seen = []
        session.subscribe(seen.append)

        shown = await session.sign_in(flow_returning(auth_user))

        assert session.state == AuthState.AUTHENTICATED
        assert session.user == auth_user
        assert seen == [auth_user]
        assert shown.title == "Signed In"
        assert shown.description == "Welcome back!"
        assert not shown.is_error

    @pytest.mark.asyncio
    async def test_cancelled_is_silent(self, session):
        seen = []
        session.subscribe(seen.append)

        shown = await session.sign_in(flow_raising(SignInCancelledError("closed")))

        assert shown is None
        assert session.state == AuthState.UNAUTHENTICATED
        assert seen == []
        assert isinstance(session.last_error, SignInCancelledError)

    @pytest.mark.asyncio
    async def test_unauthorized_domain_shows_configuration_error(self, session):
        shown = await session.sign_in(flow_raising(UnauthorizedDomainError("nope")))

        assert session.state == AuthState.UNAUTHENTICATED
        assert shown.title == "Configuration Error"
        assert "authorized domains" in shown.description
        assert shown.is_error
        assert shown.duration == 9000

    @pytest.mark.asyncio
    async def test_other_failure_shows_sign_in_error(self, session):
        shown = await session.sign_in(flow_raising(AuthError("boom")))

        assert session.state == AuthState.UNAUTHENTICATED
        assert shown.title == "Sign-in Error"
        assert shown.is_error

    @pytest.mark.asyncio
    async def test_last_error_resets_on_success(self, session, auth_user):
        await session.sign_in(flow_raising(AuthError("boom")))
        await session.sign_in(flow_returning(auth_user))
        assert session.last_error is None


class TestSignOut:
    @pytest.mark.asyncio
    async def test_revokes_and_clears(self, session, mock_provider, auth_user):
        session.handle_provider_change(auth_user)
        seen = []
        session.subscribe(seen.append)

        shown = await session.sign_out()

        mock_provider.revoke_token.assert_awaited_once_with("id-token-abc")
        assert session.state == AuthState.UNAUTHENTICATED
        assert seen == [None]
        assert shown.title == "Signed Out"

    @pytest.mark.asyncio
    async def test_failure_keeps_user(self, session, mock_provider, auth_user):
        session.handle_provider_change(auth_user)
        mock_provider.revoke_token.side_effect = AuthError("network")

        shown = await session.sign_out()

        assert session.is_authenticated
        assert shown.title == "Sign-out Error"
        assert shown.is_error

    @pytest.mark.asyncio
    async def test_without_provider_just_clears(self, auth_user):
        session = AuthSession()
        session.handle_provider_change(auth_user)

        shown = await session.sign_out()

        assert session.user is None
        assert shown.title == "Signed Out"


class TestSubscriptions:
    def test_provider_change_reaches_every_listener(self, session, auth_user):
        first, second = [], []
        session.subscribe(first.append)
        session.subscribe(second.append)

        session.handle_provider_change(auth_user)
        session.handle_provider_change(None)

        assert first == [auth_user, None]
        assert second == [auth_user, None]

    def test_unsubscribe_stops_notifications(self, session, auth_user):
        seen = []
        unsubscribe = session.subscribe(seen.append)
        unsubscribe()
        unsubscribe()

        session.handle_provider_change(auth_user)

        assert seen == []

    def test_sessions_are_independent(self, auth_user):
        a, b = AuthSession(), AuthSession()
        a.handle_provider_change(auth_user)
        assert a.is_authenticated
        assert not b.is_authenticated


class TestRefresh:
    @pytest.mark.asyncio
    async def test_valid_token_keeps_user(self, session, mock_provider, auth_user):
        session.handle_provider_change(auth_user)

        assert await session.refresh() == auth_user
        mock_provider.verify_token.assert_awaited_once_with("id-token-abc")

    @pytest.mark.asyncio
    async def test_expired_token_signs_out(self, session, mock_provider, auth_user):
        session.handle_provider_change(auth_user)
        mock_provider.verify_token.side_effect = TokenExpiredError("Token has expired")
        seen = []
        session.subscribe(seen.append)

        assert await session.refresh() is None
        assert session.state == AuthState.UNAUTHENTICATED
        assert seen == [None]

    @pytest.mark.asyncio
    async def test_explicit_provider_wins(self, auth_user, mock_provider):
        session = AuthSession()
        session.handle_provider_change(auth_user)

        await session.refresh(mock_provider)

        mock_provider.verify_token.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_signed_out_session_is_noop(self, session, mock_provider):
        assert await session.refresh() is None
        mock_provider.verify_token.assert_not_called()
