"""
Common library for reusable infrastructure components.

This package provides generic modules that can be used across projects:

- database: Async MongoDB connection with Motor
- auth: Pluggable authentication (Firebase)
- ai: Pluggable AI providers (Claude, OpenAI) with structured output
- utils: Standard responses and exceptions
- config: Base settings class
"""

from common.database import MongoDB
from common.auth import AuthProvider, FirebaseAuth, create_auth_dependency
from common.ai import AIProvider, ClaudeProvider, OpenAIProvider
from common.utils import (
    success_response,
    error_response,
    APIException,
    UnauthorizedException,
    ServiceUnavailableException,
)
from common.config import BaseAppSettings

__all__ = [
    # Database
    "MongoDB",
    # Auth
    "AuthProvider",
    "FirebaseAuth",
    "create_auth_dependency",
    # AI
    "AIProvider",
    "ClaudeProvider",
    "OpenAIProvider",
    # Utils
    "success_response",
    "error_response",
    "APIException",
    "UnauthorizedException",
    "ServiceUnavailableException",
    # Config
    "BaseAppSettings",
]
