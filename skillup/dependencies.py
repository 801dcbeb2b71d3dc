"""
FastAPI dependencies for SkillUp application.

Provides dependency injection for all services.
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from common.ai import AIProvider, ClaudeProvider, OpenAIProvider
from common.auth import FirebaseAuth, create_auth_dependency, create_optional_auth_dependency
from skillup.config import Settings, settings
from skillup.pipelines.actions import GenerationActions
from skillup.services.generation import GenerationService
from skillup.services.progress import ProgressStore

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────
# Global service instances
# ─────────────────────────────────────────────────────────────────

# Auth
_firebase_auth: Optional[FirebaseAuth] = None

# Generation
_ai_provider: Optional[AIProvider] = None
_generation_service: Optional[GenerationService] = None
_generation_actions: Optional[GenerationActions] = None

# Progress
_progress_store: Optional[ProgressStore] = None

# ─────────────────────────────────────────────────────────────────
# Initialization functions
# ─────────────────────────────────────────────────────────────────

def create_ai_provider(config: Settings) -> Optional[AIProvider]:
    """Build the configured AI provider, or None when its key is missing."""
    if config.AI_PROVIDER == "openai":
        if not config.OPENAI_API_KEY:
            return None
        return OpenAIProvider(
            api_key=config.OPENAI_API_KEY,
            model=config.OPENAI_MODEL,
            max_retries=config.AI_MAX_RETRIES,
            timeout=config.AI_TIMEOUT,
        )

    if not config.CLAUDE_API_KEY:
        return None
    return ClaudeProvider(
        api_key=config.CLAUDE_API_KEY,
        model=config.CLAUDE_MODEL,
        max_retries=config.AI_MAX_RETRIES,
        timeout=config.AI_TIMEOUT,
    )


def init_auth_services(
    firebase_auth: Optional[FirebaseAuth] = None,
    firebase_credentials_path: Optional[str] = None,
    firebase_credentials_dict: Optional[dict] = None,
) -> None:
    """Initialize auth services."""
    global _firebase_auth

    _firebase_auth = firebase_auth or FirebaseAuth(
        credentials_path=firebase_credentials_path,
        credentials_dict=firebase_credentials_dict,
        project_id=settings.FIREBASE_PROJECT_ID,
        api_key=settings.FIREBASE_API_KEY,
    )


def init_generation_services(ai_provider: Optional[AIProvider] = None) -> None:
    """Initialize generation services."""
    global _ai_provider, _generation_service, _generation_actions

    _ai_provider = ai_provider or create_ai_provider(settings)

    if _ai_provider is None:
        logger.warning(f"No API key for AI provider '{settings.AI_PROVIDER}'; generation disabled")
        return

    _generation_service = GenerationService(
        ai_provider=_ai_provider,
        max_tokens=settings.GENERATION_MAX_TOKENS,
        temperature=settings.GENERATION_TEMPERATURE,
    )
    _generation_actions = GenerationActions(_generation_service)


def init_progress_services(db: AsyncIOMotorDatabase) -> None:
    """Initialize progress services."""
    global _progress_store
    _progress_store = ProgressStore(db=db, collection_name=settings.USERS_COLLECTION)


def init_all_services(
    db: AsyncIOMotorDatabase,
    ai_provider: Optional[AIProvider] = None,
    firebase_auth: Optional[FirebaseAuth] = None,
    firebase_credentials_path: Optional[str] = None,
    firebase_credentials_dict: Optional[dict] = None,
) -> None:
    """
    Initialize all services at application startup.

    Args:
        db: Main MongoDB database connection
        ai_provider: Prebuilt AI provider (built from settings if omitted)
        firebase_auth: Prebuilt Firebase auth (built from credentials if omitted)
        firebase_credentials_path: Path to Firebase credentials
        firebase_credentials_dict: Firebase credentials as dict
    """
    init_auth_services(firebase_auth, firebase_credentials_path, firebase_credentials_dict)
    init_generation_services(ai_provider)
    init_progress_services(db)


# ─────────────────────────────────────────────────────────────────
# Auth getters
# ─────────────────────────────────────────────────────────────────

def get_firebase_auth() -> FirebaseAuth:
    """Get Firebase auth client."""
    if _firebase_auth is None:
        raise RuntimeError("Auth services not initialized.")
    return _firebase_auth


# Claims of the verified Firebase ID token; ``sub`` is the user id
require_auth = create_auth_dependency(get_firebase_auth)
optional_auth = create_optional_auth_dependency(get_firebase_auth)


# ─────────────────────────────────────────────────────────────────
# Generation getters
# ─────────────────────────────────────────────────────────────────

def get_generation_service() -> GenerationService:
    """Get generation service instance."""
    if _generation_service is None:
        raise RuntimeError("Generation services not initialized.")
    return _generation_service


def get_generation_actions() -> GenerationActions:
    """Get generation actions bound to the generation service."""
    if _generation_actions is None:
        raise RuntimeError("Generation services not initialized.")
    return _generation_actions


# ─────────────────────────────────────────────────────────────────
# Progress getters
# ─────────────────────────────────────────────────────────────────

def get_progress_store() -> ProgressStore:
    """Get progress store instance."""
    if _progress_store is None:
        raise RuntimeError("Progress services not initialized.")
    return _progress_store

