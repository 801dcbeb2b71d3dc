"""
SkillUp application settings.

Extends the base settings with SkillUp-specific configuration.
"""

from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """SkillUp-specific settings."""

    # ==========================================================================
    # Persistence
    # ==========================================================================
    # One document per user, keyed by the auth provider's user id
    USERS_COLLECTION: str = "users"

    # ==========================================================================
    # Generation
    # ==========================================================================
    # Generation is a single attempt; transport-level retries stay off
    AI_MAX_RETRIES: int = 0
    AI_TIMEOUT: float = 60.0
    GENERATION_MAX_TOKENS: int = 4096
    GENERATION_TEMPERATURE: float = 0.7

    # ==========================================================================
    # Sign-in
    # ==========================================================================
    # Redirect URI sent with the Google credential; its domain must be listed
    # in the Firebase project's authorized domains
    GOOGLE_SIGNIN_REQUEST_URI: str = "http://localhost:3000"


# Global settings instance
settings = Settings()
