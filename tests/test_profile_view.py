"""Unit tests for ProfileView."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from common.auth import AuthError
from skillup.services.auth import AuthSession
from skillup.services.progress import ProgressStoreError
from skillup.ui import ProfileView


@pytest.fixture
def mock_store(sample_progress):
    store = MagicMock()
    store.load = AsyncMock(return_value=sample_progress)
    store.delete = AsyncMock()
    return store


@pytest.fixture
def mock_provider():
    provider = MagicMock()
    provider.revoke_token = AsyncMock()
    return provider


@pytest.fixture
def session(auth_user, mock_provider):
    session = AuthSession(mock_provider)
    session.handle_provider_change(auth_user)
    return session


@pytest.fixture
def view(mock_store, session):
    return ProfileView(mock_store, session)


class TestLoad:
    @pytest.mark.asyncio
    async def test_loads_summary(self, view, mock_store, sample_user_id):
        await view.load()

        mock_store.load.assert_awaited_once_with(sample_user_id)
        assert view.summary() == {"total": 18, "completed": 3, "percentage": 17}
        assert view.is_loading is False

    @pytest.mark.asyncio
    async def test_no_progress_summary_is_zero(self, view, mock_store):
        mock_store.load.return_value = None
        await view.load()
        assert view.summary() == {"total": 0, "completed": 0, "percentage": 0}

    @pytest.mark.asyncio
    async def test_load_failure_notice(self, view, mock_store):
        mock_store.load.side_effect = ProgressStoreError(ProgressStoreError.LOAD_MESSAGE, "load")

        assert await view.load() is None
        assert view.notices[-1].title == "Loading Error"
        assert view.is_loading is False

    def test_signed_out_redirects_home(self, mock_store):
        view = ProfileView(mock_store, AuthSession())
        assert view.redirect_home is True

    def test_signed_in_stays(self, view):
        assert view.redirect_home is False


class TestDeleteProgress:
    @pytest.mark.asyncio
    async def test_requires_confirmation(self, view, mock_store):
        await view.load()

        assert await view.delete_progress(confirmed=False) is False
        mock_store.delete.assert_not_called()
        assert view.progress is not None

    @pytest.mark.asyncio
    async def test_confirmed_delete_clears_state(self, view, mock_store, sample_user_id):
        await view.load()

        assert await view.delete_progress(confirmed=True) is True
        mock_store.delete.assert_awaited_once_with(sample_user_id)
        assert view.progress is None
        assert view.is_deleting is False
        assert view.notices[-1].title == "Progress Deleted"

    @pytest.mark.asyncio
    async def test_failure_keeps_state(self, view, mock_store):
        await view.load()
        mock_store.delete.side_effect = ProgressStoreError(ProgressStoreError.DELETE_MESSAGE, "delete")

        assert await view.delete_progress(confirmed=True) is False
        assert view.progress is not None
        assert view.is_deleting is False
        assert view.notices[-1].title == "Deletion Error"
        assert view.notices[-1].description == "Could not delete your progress. Please try again."


class TestSignOut:
    @pytest.mark.asyncio
    async def test_sign_out_redirects(self, view):
        shown = await view.sign_out()

        assert shown.title == "Signed Out"
        assert view.redirect_home is True

    @pytest.mark.asyncio
    async def test_sign_out_failure(self, view, mock_provider):
        mock_provider.revoke_token.side_effect = AuthError("network")

        shown = await view.sign_out()

        assert shown.title == "Sign-out Error"
        assert view.redirect_home is False
