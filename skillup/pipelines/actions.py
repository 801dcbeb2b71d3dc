"""
Generation action functions.

Wrap each generation call in a uniform outcome for the UI:
``{"success": True, "data": ...}`` or ``{"success": False, "error": "..."}``.
The error text is for display only and differs in shape between the two
actions; callers must not branch on it.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import BaseModel

from skillup.schemas.roadmap import AdviceInput, RoadmapInput
from skillup.services.generation import GenerationService

logger = logging.getLogger(__name__)

ADVICE_ERROR_MESSAGE = "Failed to generate AI advice. Please try again later."
ROADMAP_ERROR_PREFIX = "Failed to generate the roadmap."
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."


@dataclass
class ActionResult:
    """Outcome of a generation action."""
    success: bool
    data: Optional[BaseModel] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        if self.success:
            return {"success": True, "data": self.data.model_dump() if self.data else None}
        return {"success": False, "error": self.error}


async def generate_ai_advice(
    service: GenerationService,
    data: AdviceInput,
) -> ActionResult:
    """
    Generate advice for one roadmap step.

    Failures are logged and replaced by a fixed message.
    """
    try:
        result = await service.generate_advice(data)
    except Exception:
        logger.exception("AI advice generation error")
        return ActionResult(success=False, error=ADVICE_ERROR_MESSAGE)
    return ActionResult(success=True, data=result)


async def generate_dynamic_roadmap(
    service: GenerationService,
    data: RoadmapInput,
) -> ActionResult:
    """
    Generate a roadmap.

    Failures are logged; the returned message carries the underlying error
    text.
    """
    try:
        result = await service.generate_roadmap(data)
    except Exception as e:
        logger.exception("Dynamic roadmap generation error")
        detail = str(e) or UNKNOWN_ERROR_MESSAGE
        return ActionResult(success=False, error=f"{ROADMAP_ERROR_PREFIX} {detail}")
    return ActionResult(success=True, data=result)


class GenerationActions:
    """
    The two actions bound to one GenerationService.

    Views hold this instead of the service so they only ever see outcomes.
    """

    def __init__(self, service: GenerationService):
        self._service = service

    async def advice(self, data: AdviceInput) -> ActionResult:
        return await generate_ai_advice(self._service, data)

    async def roadmap(self, data: RoadmapInput) -> ActionResult:
        return await generate_dynamic_roadmap(self._service, data)
