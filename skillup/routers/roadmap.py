"""
FastAPI router for roadmap generation endpoints.

Both endpoints answer with the action outcome shape
(``{"success": true, "data": ...}`` / ``{"success": false, "error": "..."}``)
so the client handles generation failures inline.
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends

from common.utils import BadRequestException
from skillup.dependencies import get_generation_actions, optional_auth
from skillup.pipelines.actions import GenerationActions
from skillup.schemas.roadmap import MIN_GOAL_LENGTH, AdviceInput, RoadmapInput

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/roadmap", tags=["roadmap"])


@router.post("/generate")
async def generate_roadmap(
    body: RoadmapInput,
    actions: Annotated[GenerationActions, Depends(get_generation_actions)],
    user: Annotated[Optional[dict], Depends(optional_auth)],
):
    """Generate a 3-5 step roadmap for the given goal and background."""
    if len(body.goal.strip()) < MIN_GOAL_LENGTH:
        raise BadRequestException("Please enter a valid goal.", code="INVALID_GOAL")

    logger.info(f"Roadmap requested by {user['sub'] if user else 'anonymous user'}")
    result = await actions.roadmap(body)
    return result.to_dict()


@router.post("/advice")
async def generate_advice(
    body: AdviceInput,
    actions: Annotated[GenerationActions, Depends(get_generation_actions)],
    user: Annotated[Optional[dict], Depends(optional_auth)],
):
    """Generate advice and focus techniques for one roadmap step."""
    logger.debug(f"Advice requested by {user['sub'] if user else 'anonymous user'} for step: {body.roadmapStep}")
    result = await actions.advice(body)
    return result.to_dict()
