"""
AI module - Pluggable AI providers (Claude, OpenAI).
"""

from common.ai.base import AIProvider, StructuredOutputError, parse_structured
from common.ai.claude import ClaudeProvider
from common.ai.openai import OpenAIProvider

__all__ = [
    "AIProvider",
    "StructuredOutputError",
    "parse_structured",
    "ClaudeProvider",
    "OpenAIProvider",
]
