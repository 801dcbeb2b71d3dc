"""
FastAPI router for Profile endpoints.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from common.utils import ServiceUnavailableException, success_response
from skillup.dependencies import get_progress_store, require_auth
from skillup.pipelines.progress import calculate_progress
from skillup.services.progress import ProgressStore, ProgressStoreError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("")
async def get_profile(
    user: Annotated[dict, Depends(require_auth)],
    store: Annotated[ProgressStore, Depends(get_progress_store)],
):
    """Get the caller's identity, saved roadmap and completion summary."""
    try:
        progress = await store.load(user["sub"])
    except ProgressStoreError:
        raise ServiceUnavailableException(
            "Could not load your roadmap progress.", code="PROGRESS_LOAD_FAILED"
        )

    return success_response({
        "user": {
            "uid": user["sub"],
            "displayName": user.get("name"),
            "email": user.get("email"),
            "photoURL": user.get("picture"),
        },
        "roadmapProgress": progress.model_dump() if progress else None,
        "summary": calculate_progress(progress),
    })
