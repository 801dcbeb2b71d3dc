"""
Generation service - structured advice and roadmap generation.
"""

from skillup.services.generation.generation_service import GenerationService, GenerationError

__all__ = ["GenerationService", "GenerationError"]
