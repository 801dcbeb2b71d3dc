"""
Generation service.

Wraps the hosted language model: renders a prompt template, asks the
provider for schema-constrained output and returns the validated result.
"""

import logging
from typing import Type

from common.ai import AIProvider, StructuredOutputError
from common.ai.base import SchemaT
from skillup.schemas.roadmap import AdviceInput, AdviceOutput, RoadmapInput, RoadmapOutput
from skillup.services.generation.prompts import (
    ADVICE_SYSTEM_PROMPT,
    ROADMAP_SYSTEM_PROMPT,
    build_advice_prompt,
    build_roadmap_prompt,
)

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """The model call failed or produced no parseable output."""


class GenerationService:
    """
    Single-attempt structured generation for advice and roadmaps.

    No caching, rate limiting or deduplication: every call goes to the
    provider, and the first failure is final.
    """

    def __init__(
        self,
        ai_provider: AIProvider,
        max_tokens: int = 4096,
        temperature: float = 0.7,
    ):
        """
        Initialize GenerationService.

        Args:
            ai_provider: Provider used for structured output
            max_tokens: Token ceiling per generation
            temperature: Sampling temperature
        """
        self._ai = ai_provider
        self._max_tokens = max_tokens
        self._temperature = temperature

    async def generate_advice(self, data: AdviceInput) -> AdviceOutput:
        """
        Generate personalized advice for one roadmap step.

        Raises:
            GenerationError: If the model call fails or output is unusable
        """
        prompt = build_advice_prompt(data.roadmapStep, data.userSkills, data.goal)
        return await self._generate(prompt, ADVICE_SYSTEM_PROMPT, AdviceOutput)

    async def generate_roadmap(self, data: RoadmapInput) -> RoadmapOutput:
        """
        Generate a 3-5 step roadmap for the user's goal.

        Raises:
            GenerationError: If the model call fails or output is unusable
        """
        prompt = build_roadmap_prompt(data.currentSkills, data.goal)
        try:
            return await self._generate(prompt, ROADMAP_SYSTEM_PROMPT, RoadmapOutput)
        except GenerationError as e:
            if isinstance(e.__cause__, StructuredOutputError):
                raise GenerationError(
                    "Failed to generate a roadmap. The AI model did not return a valid output."
                ) from e.__cause__
            raise

    async def _generate(
        self,
        prompt: str,
        system_prompt: str,
        schema: Type[SchemaT],
    ) -> SchemaT:
        logger.debug(f"Requesting {schema.__name__} from {type(self._ai).__name__}")
        try:
            result = await self._ai.generate_structured(
                prompt,
                schema=schema,
                system_prompt=system_prompt,
                max_tokens=self._max_tokens,
                temperature=self._temperature,
            )
        except StructuredOutputError as e:
            logger.warning(f"Unusable {schema.__name__} output: {e}")
            raise GenerationError(str(e)) from e
        except Exception as e:
            logger.warning(f"{schema.__name__} generation call failed: {type(e).__name__}: {e}")
            raise GenerationError(str(e) or type(e).__name__) from e

        if result is None:
            raise GenerationError(f"The AI model did not return a {schema.__name__}.")

        logger.info(f"Generated {schema.__name__}")
        return result
