"""
FastAPI router for saved roadmap progress.

Provides endpoints to read, replace and delete the caller's snapshot.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from common.utils import ServiceUnavailableException, success_response
from skillup.dependencies import get_progress_store, require_auth
from skillup.pipelines.progress import calculate_progress
from skillup.schemas.progress import ProgressResponse, ProgressSummary, RoadmapProgressData
from skillup.services.progress import ProgressStore, ProgressStoreError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/progress", tags=["progress"])


def _unavailable(e: ProgressStoreError) -> ServiceUnavailableException:
    return ServiceUnavailableException(e.message, code=f"PROGRESS_{e.operation.upper()}_FAILED")


@router.get("")
async def get_progress(
    user: Annotated[dict, Depends(require_auth)],
    store: Annotated[ProgressStore, Depends(get_progress_store)],
):
    """Get the saved snapshot and its completion summary."""
    try:
        progress = await store.load(user["sub"])
    except ProgressStoreError as e:
        raise _unavailable(e)

    response = ProgressResponse(
        roadmapProgress=progress,
        summary=ProgressSummary(**calculate_progress(progress)),
    )
    return success_response(response.model_dump())


@router.put("")
async def save_progress(
    body: RoadmapProgressData,
    user: Annotated[dict, Depends(require_auth)],
    store: Annotated[ProgressStore, Depends(get_progress_store)],
):
    """Replace the saved snapshot with the given one."""
    try:
        await store.save(user["sub"], body)
    except ProgressStoreError as e:
        raise _unavailable(e)

    return success_response(
        {"summary": calculate_progress(body)},
        message="Your roadmap progress has been saved to your account.",
    )


@router.delete("")
async def delete_progress(
    user: Annotated[dict, Depends(require_auth)],
    store: Annotated[ProgressStore, Depends(get_progress_store)],
):
    """Delete the saved snapshot. Other account data is kept."""
    try:
        await store.delete(user["sub"])
    except ProgressStoreError as e:
        raise _unavailable(e)

    return success_response(message="Your saved roadmap progress has been successfully deleted.")
