"""Unit tests for service wiring in skillup.dependencies."""

import pytest
from unittest.mock import MagicMock

from common.ai import ClaudeProvider, OpenAIProvider
from skillup import dependencies
from skillup.config import Settings
from skillup.pipelines.actions import GenerationActions
from skillup.services.generation import GenerationService
from skillup.services.progress import ProgressStore


@pytest.fixture(autouse=True)
def reset_slots(monkeypatch):
    for name in ("_firebase_auth", "_ai_provider", "_generation_service",
                 "_generation_actions", "_progress_store"):
        monkeypatch.setattr(dependencies, name, None)


class TestInitAllServices:
    def test_wires_services(self, mock_db):
        ai_provider = MagicMock()
        firebase = MagicMock()

        dependencies.init_all_services(mock_db, ai_provider=ai_provider, firebase_auth=firebase)

        assert dependencies.get_firebase_auth() is firebase
        assert isinstance(dependencies.get_generation_service(), GenerationService)
        assert isinstance(dependencies.get_generation_actions(), GenerationActions)
        assert isinstance(dependencies.get_progress_store(), ProgressStore)
        mock_db.__getitem__.assert_called_with("users")

    def test_getters_fail_before_init(self):
        with pytest.raises(RuntimeError):
            dependencies.get_progress_store()
        with pytest.raises(RuntimeError):
            dependencies.get_generation_actions()
        with pytest.raises(RuntimeError):
            dependencies.get_firebase_auth()


class TestCreateAiProvider:
    def test_claude_by_default(self):
        provider = dependencies.create_ai_provider(Settings(CLAUDE_API_KEY="key"))
        assert isinstance(provider, ClaudeProvider)

    def test_openai(self):
        provider = dependencies.create_ai_provider(Settings(AI_PROVIDER="openai", OPENAI_API_KEY="key"))
        assert isinstance(provider, OpenAIProvider)

    def test_missing_key(self):
        assert dependencies.create_ai_provider(Settings(CLAUDE_API_KEY=None)) is None

    def test_single_attempt_by_default(self):
        assert Settings().AI_MAX_RETRIES == 0
